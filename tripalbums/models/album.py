"""Album models."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class Album(SQLModel, table=True):
    __tablename__ = "albums"

    id: Optional[int] = Field(default=None, primary_key=True)
    trip_id: int = Field(foreign_key="trips.id", index=True)
    name: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class PhotoAlbum(SQLModel, table=True):
    __tablename__ = "photo_albums"
    __table_args__ = (UniqueConstraint("album_id", "photo_id"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    photo_id: int = Field(foreign_key="photos.id", index=True)
    album_id: int = Field(foreign_key="albums.id", index=True)
    position: int = 0
    added_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
