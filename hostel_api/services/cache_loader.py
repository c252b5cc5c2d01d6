import logging

from hostel_api.cache import HostelCache
from hostel_api.exceptions.custom import HostelStoreError
from hostel_api.services.hostel_store import HostelRepository

logger = logging.getLogger(__name__)


async def prefetch_hostels(repository: HostelRepository, cache: HostelCache) -> None:
    try:
        hostels = await repository.find_all()
    except Exception:
        logger.exception("Error pre-fetching hostel data")
        return

    cache.replace(hostels)
    logger.info("Hostel data pre-fetched and cached (%d hostels)", len(hostels))


async def connect_and_prefetch(repository: HostelRepository, cache: HostelCache) -> None:
    """Connect to the store, then fill the cache once. Never retried."""
    try:
        await repository.connect()
    except HostelStoreError as exc:
        logger.error("MongoDB connection error: %s", exc.detail)
        return

    logger.info("MongoDB connected")
    await prefetch_hostels(repository, cache)
