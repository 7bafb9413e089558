"""Trip and photo request/response schemas."""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field


class TripCreateRequest(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class TripResponse(BaseModel):
    id: int
    title: str
    start_date: Optional[str]
    end_date: Optional[str]
    created_at: str


class PhotoCreateRequest(BaseModel):
    caption: Optional[str] = None
    taken_at: Optional[datetime] = None
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)


class PhotoBatchCreateRequest(BaseModel):
    photos: list[PhotoCreateRequest] = Field(min_length=1)


class PhotoResponse(BaseModel):
    id: int
    trip_id: int
    caption: Optional[str]
    taken_at: Optional[str]
    latitude: Optional[float]
    longitude: Optional[float]
    created_at: str


class PhotoListResponse(BaseModel):
    photos: list[PhotoResponse]
    total: int
