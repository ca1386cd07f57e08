import asyncio
import logging
from typing import Awaitable, Callable, Optional

from supabase import Client, create_client

from config import Settings
from db.retry import RetryPolicy

logger = logging.getLogger(__name__)


def connect(settings: Settings) -> Client:
    """Build a client and make one cheap query so a bad URL/key fails here."""
    client = create_client(settings.supabase_url, settings.supabase_key)
    client.table(settings.table_name).select("id").limit(1).execute()
    return client


async def connect_with_retry(
    settings: Settings,
    policy: Optional[RetryPolicy] = None,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> Optional[Client]:
    """Keep trying to connect until it works. Returns None if unconfigured."""
    if not settings.has_database:
        logger.error("SUPABASE_URL / SUPABASE_KEY environment variables are not set!")
        return None

    policy = policy or RetryPolicy.from_settings(settings)

    for delay in policy.delays():
        try:
            client = await asyncio.to_thread(connect, settings)
        except Exception as e:
            logger.error("Supabase connection error: %s", e)
            logger.info("Retrying connection in %g seconds...", delay)
            await sleep(delay)
            continue

        logger.info("Supabase connected successfully")
        return client
