import asyncio
import logging
from contextlib import asynccontextmanager, suppress
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import Settings, load_settings
from db.retry import RetryPolicy
from db.supabase_client import connect_with_retry
from journal.router import SERVER_ERROR, router as journal_router
from journal.service import EntryStore, StoreUnavailableError

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_ERROR = "date, text and mood are required."


async def attach_store(app: FastAPI, settings: Settings, policy: RetryPolicy):
    client = await connect_with_retry(settings, policy)
    if client is not None:
        app.state.store = EntryStore(client, settings.table_name)


def _log_attach_failure(task: "asyncio.Task"):
    if not task.cancelled() and task.exception() is not None:
        logger.error("Entry store connection task failed", exc_info=task.exception())


def create_app(settings: Optional[Settings] = None, store: Optional[EntryStore] = None) -> FastAPI:
    settings = settings or load_settings()
    # bad retry settings must fail here, not inside the background task
    policy = RetryPolicy.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        task = None
        if app.state.store is None:
            task = asyncio.create_task(attach_store(app, settings, policy))
            task.add_done_callback(_log_attach_failure)
        yield
        if task is not None:
            task.cancel()
            with suppress(Exception, asyncio.CancelledError):
                await task

    app = FastAPI(title="Journal API", lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": REQUIRED_FIELDS_ERROR})

    @app.exception_handler(StoreUnavailableError)
    async def store_unavailable(request: Request, exc: StoreUnavailableError):
        logger.error("%s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content={"error": SERVER_ERROR})

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal Server Error"})

    app.include_router(journal_router)

    @app.get("/")
    def root():
        return {"message": "Journal API is running"}

    return app


def main():
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.info("Starting server on port %s", settings.port)
    logger.info("Environment: %s", settings.environment)
    logger.info("CORS enabled for: %s", settings.cors_origins)
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
