"""Photo model.

Only the metadata the album suggestions need is stored here; image bytes
and EXIF parsing live elsewhere.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlmodel import Field, SQLModel


class Photo(SQLModel, table=True):
    __tablename__ = "photos"

    id: Optional[int] = Field(default=None, primary_key=True)
    trip_id: int = Field(foreign_key="trips.id", index=True)
    caption: Optional[str] = None
    taken_at: Optional[datetime] = Field(default=None, index=True)
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
