import logging
import re

from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from hostel_api.config import Settings
from hostel_api.exceptions.custom import HostelStoreError
from hostel_api.mappers.query_builder import HostelQuery
from hostel_api.schemas.hostel import Hostel

logger = logging.getLogger(__name__)

SEARCH_FIELDS = ("location", "name")


def to_hostels(docs: list[dict]) -> list[Hostel]:
    """Validate store documents, skipping any that do not fit the model."""
    hostels: list[Hostel] = []
    for doc in docs:
        try:
            hostels.append(Hostel.model_validate(doc))
        except ValidationError as exc:
            logger.warning(
                "Skipping malformed hostel document %s: %d validation error(s)",
                doc.get("_id"),
                exc.error_count(),
            )
    return hostels


def build_search_filter(text: str) -> dict:
    pattern = re.escape(text)
    return {
        "$or": [
            {field: {"$regex": pattern, "$options": "i"}} for field in SEARCH_FIELDS
        ]
    }


class HostelRepository:
    def __init__(self, client: AsyncMongoClient, collection: AsyncCollection):
        self._client = client
        self._collection = collection

    @classmethod
    def from_settings(cls, settings: Settings) -> "HostelRepository":
        client: AsyncMongoClient = AsyncMongoClient(
            settings.mongodb_uri,
            serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
        )
        database = client.get_default_database(default=settings.mongodb_database)
        return cls(client, database[settings.mongodb_collection])

    async def connect(self) -> None:
        try:
            await self._client.admin.command("ping")
        except PyMongoError as exc:
            raise HostelStoreError("MongoDB connection error", detail=str(exc)) from exc

    async def close(self) -> None:
        await self._client.close()

    async def find_all(self) -> list[Hostel]:
        try:
            docs = await self._collection.find().to_list()
        except PyMongoError as exc:
            raise HostelStoreError("Error pre-fetching hostel data", detail=str(exc)) from exc
        return to_hostels(docs)

    async def count(self) -> int:
        try:
            return await self._collection.count_documents({})
        except PyMongoError as exc:
            raise HostelStoreError("Error fetching hostel data", detail=str(exc)) from exc

    async def find_page(self, skip: int, limit: int) -> list[Hostel]:
        try:
            cursor = self._collection.find().skip(skip).limit(limit)
            docs = await cursor.to_list()
        except PyMongoError as exc:
            raise HostelStoreError("Error fetching hostel data", detail=str(exc)) from exc
        return to_hostels(docs)

    async def find(self, query: HostelQuery) -> list[Hostel]:
        logger.info("Query: %s", query.filter)
        try:
            cursor = self._collection.find(query.filter)
            if query.sort:
                cursor = cursor.sort(query.sort)
            docs = await cursor.to_list()
        except PyMongoError as exc:
            raise HostelStoreError(
                "Error fetching filtered hostel data", detail=str(exc)
            ) from exc

        hostels = to_hostels(docs)
        logger.info("Found %d hostels matching the query.", len(hostels))
        return hostels

    async def search(self, text: str) -> list[Hostel]:
        try:
            docs = await self._collection.find(build_search_filter(text)).to_list()
        except PyMongoError as exc:
            raise HostelStoreError("Error performing search", detail=str(exc)) from exc
        return to_hostels(docs)
