import logging
from unittest.mock import AsyncMock, MagicMock

from hostel_api.cache import HostelCache
from hostel_api.exceptions.custom import HostelStoreError
from hostel_api.services.cache_loader import connect_and_prefetch, prefetch_hostels
from hostel_api.services.hostel_store import HostelRepository


def _repository(hostels=None):
    repo = AsyncMock(spec=HostelRepository)
    repo.find_all.return_value = hostels or []
    return repo


async def test_prefetch_fills_cache(hostels):
    repo = _repository(hostels)
    cache = HostelCache()

    await prefetch_hostels(repo, cache)

    assert cache.loaded
    assert cache.first(10) == hostels
    repo.find_all.assert_awaited_once()


async def test_prefetch_failure_leaves_cache_untouched(hostels, caplog):
    repo = _repository()
    repo.find_all.side_effect = HostelStoreError(
        "Error pre-fetching hostel data", detail="boom"
    )
    cache = HostelCache()
    cache.replace(hostels[:1])

    with caplog.at_level(logging.ERROR):
        await prefetch_hostels(repo, cache)

    assert cache.first(10) == hostels[:1]
    assert "Error pre-fetching hostel data" in caplog.text


async def test_prefetch_failure_on_first_load_keeps_cache_empty():
    repo = _repository()
    repo.find_all.side_effect = HostelStoreError("Error pre-fetching hostel data")
    cache = HostelCache()

    await prefetch_hostels(repo, cache)

    assert not cache.loaded
    assert len(cache) == 0


async def test_connect_and_prefetch_success(hostels, caplog):
    repo = _repository(hostels)
    cache = HostelCache()

    with caplog.at_level(logging.INFO):
        await connect_and_prefetch(repo, cache)

    repo.connect.assert_awaited_once()
    repo.find_all.assert_awaited_once()
    assert len(cache) == 3
    assert "MongoDB connected" in caplog.text


async def test_connect_failure_skips_prefetch(caplog):
    repo = _repository()
    repo.connect.side_effect = HostelStoreError("MongoDB connection error", detail="refused")
    cache = HostelCache()

    with caplog.at_level(logging.ERROR):
        await connect_and_prefetch(repo, cache)

    repo.find_all.assert_not_awaited()
    assert not cache.loaded
    assert "MongoDB connection error: refused" in caplog.text


async def test_prefetch_keeps_valid_records_around_malformed_ones(hostel_docs, malformed_doc):
    cursor = MagicMock()
    cursor.to_list = AsyncMock(return_value=[hostel_docs[0], malformed_doc, hostel_docs[1]])
    collection = MagicMock()
    collection.find.return_value = cursor
    repo = HostelRepository(MagicMock(), collection)
    cache = HostelCache()

    await prefetch_hostels(repo, cache)

    assert cache.loaded
    assert [h.name for h in cache.first(10)] == ["North Star Hostel", "Lotus Residency"]
    assert cache.find_by_name("Legacy") is None
