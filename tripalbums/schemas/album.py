"""Album and album suggestion request/response schemas."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# Keeps the ownership check under SQLite's bound-parameter limit
MAX_ALBUM_PHOTOS = 1000


class AlbumSuggestionResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    photo_ids: list[int] = Field(alias="photoIds")
    type: Literal["date", "location"]
    confidence: float
    metadata: dict[str, str]


class AlbumSuggestionListResponse(BaseModel):
    suggestions: list[AlbumSuggestionResponse]
    total: int


class AcceptSuggestionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1, max_length=200)
    photo_ids: list[int] = Field(alias="photoIds", min_length=1, max_length=MAX_ALBUM_PHOTOS)


class AcceptSuggestionResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    album_id: int = Field(alias="albumId")


class AlbumDetailResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    trip_id: int = Field(alias="tripId")
    name: str
    photo_ids: list[int] = Field(alias="photoIds")  # in album order
    created_at: str = Field(alias="createdAt")
