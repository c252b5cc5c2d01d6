import copy
from unittest.mock import AsyncMock, patch

import httpx
import pytest
from httpx import ASGITransport

from hostel_api.schemas.hostel import Hostel
from hostel_api.services.hostel_store import HostelRepository

HOSTEL_DOCS = [
    {
        "_id": "65a1f0c2e4b0a1b2c3d4e5f1",
        "name": "North Star Hostel",
        "images": ["https://img.example/north-1.jpg"],
        "location": "Shivaji Nagar, Pune",
        "description": "Quiet rooms close to campus.",
        "category": "boys",
        "rating": 4.2,
        "rooms": [{"type": "single", "price": 9000}, {"type": "double", "price": 6500}],
    },
    {
        "_id": "65a1f0c2e4b0a1b2c3d4e5f2",
        "name": "Lotus Residency",
        "images": [],
        "location": "Kothrud, Pune",
        "category": "girls",
        "rating": 3.1,
        "rooms": [{"type": "triple", "price": 4500}],
    },
    {
        "_id": "65a1f0c2e4b0a1b2c3d4e5f3",
        "name": "Campus Commons",
        "images": [],
        "location": "North Campus, Delhi",
        "category": "co-ed",
        "rating": 2.5,
        "rooms": [],
    },
]


@pytest.fixture
def mock_env(monkeypatch, tmp_path):
    monkeypatch.setenv("MONGODB_URI", "mongodb://localhost:27017/hostels_test")
    monkeypatch.setenv("STATIC_DIR", str(tmp_path / "no-static"))


@pytest.fixture
def hostel_docs() -> list[dict]:
    return copy.deepcopy(HOSTEL_DOCS)


@pytest.fixture
def malformed_doc() -> dict:
    # Category outside the enum, written before validation was enforced
    return {
        "_id": "65a1f0c2e4b0a1b2c3d4e5f9",
        "name": "Legacy",
        "location": "Old",
        "category": "mixed",
    }


@pytest.fixture
def hostels(hostel_docs) -> list[Hostel]:
    return [Hostel.model_validate(doc) for doc in hostel_docs]


@pytest.fixture
def repository(hostels):
    repo = AsyncMock(spec=HostelRepository)
    repo.find_all.return_value = hostels
    return repo


@pytest.fixture
async def app(mock_env, repository):
    from hostel_api.main import create_app, lifespan

    app = create_app()
    with patch(
        "hostel_api.main.HostelRepository.from_settings", return_value=repository
    ):
        async with lifespan(app):
            # Let the background loader settle before tests hit the cache
            await app.state.cache_loader
            yield app


@pytest.fixture
async def client(app):
    async with httpx.AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as c:
        yield c
