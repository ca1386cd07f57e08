import logging
from typing import List

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from journal.models import EntryCreate, EntryOut
from journal.service import EntryExistsError, EntryStore, StoreUnavailableError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/entries", tags=["Entries"])

DUPLICATE_DATE_ERROR = "Entry already exists for this date."
SERVER_ERROR = "Server error"


def get_entry_store(request: Request) -> EntryStore:
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise StoreUnavailableError("Entry store is not connected")
    return store


@router.post("", response_model=EntryOut, status_code=201)
def create_entry(entry: EntryCreate, store: EntryStore = Depends(get_entry_store)):
    try:
        if store.find_by_date(entry.date) is not None:
            return JSONResponse(status_code=400, content={"error": DUPLICATE_DATE_ERROR})
        return store.create(entry.date, entry.text, entry.mood)
    except EntryExistsError:
        return JSONResponse(status_code=400, content={"error": DUPLICATE_DATE_ERROR})
    except Exception:
        logger.exception("Failed to create entry for %s", entry.date)
        return JSONResponse(status_code=500, content={"error": SERVER_ERROR})


@router.get("", response_model=List[EntryOut])
def list_entries(store: EntryStore = Depends(get_entry_store)):
    try:
        return store.list_all()
    except Exception:
        logger.exception("Failed to list entries")
        return JSONResponse(status_code=500, content={"error": SERVER_ERROR})
