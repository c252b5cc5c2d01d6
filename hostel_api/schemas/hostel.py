from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class HostelCategory(StrEnum):
    boys = "boys"
    girls = "girls"
    co_ed = "co-ed"


class Room(BaseModel):
    type: str | None = None
    price: float | None = None


class Hostel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str | None = Field(default=None, alias="_id")
    name: str
    images: list[str] = []
    location: str
    description: str | None = None
    category: HostelCategory
    rating: float | None = Field(default=None, ge=0, le=5)
    rooms: list[Room] = []

    @field_validator("id", mode="before")
    @classmethod
    def _object_id_to_str(cls, value: object) -> str | None:
        # Mongo hands back bson.ObjectId for _id
        return None if value is None else str(value)


class HostelPage(BaseModel):
    totalPages: int
    currentPage: int
    hostels: list[Hostel]


class SearchRequest(BaseModel):
    query: str = ""
