"""Photo metadata registration and lookup."""

from datetime import datetime, timezone

from sqlmodel import Session, select, col, func

from tripalbums.models.album import PhotoAlbum
from tripalbums.models.photo import Photo


def _naive_utc(value: datetime | None) -> datetime | None:
    # SQLite drops offsets; store everything as naive UTC
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def add_photos(session: Session, trip_id: int, items: list[dict]) -> list[Photo]:
    """Register photo metadata for a trip. Each item may carry
    caption, taken_at, latitude and longitude."""
    photos = [
        Photo(
            trip_id=trip_id,
            caption=item.get("caption"),
            taken_at=_naive_utc(item.get("taken_at")),
            latitude=item.get("latitude"),
            longitude=item.get("longitude"),
        )
        for item in items
    ]
    session.add_all(photos)
    session.commit()
    for photo in photos:
        session.refresh(photo)
    return photos


def list_unsorted_photos(session: Session, trip_id: int) -> list[Photo]:
    """Photos of a trip that are not assigned to any album, in id order."""
    assigned = select(PhotoAlbum.photo_id)
    return list(session.exec(
        select(Photo).where(
            Photo.trip_id == trip_id,
            col(Photo.id).not_in(assigned),
        ).order_by(col(Photo.id).asc())
    ).all())


def count_photos_in_trip(session: Session, photo_ids: list[int], trip_id: int) -> int:
    """Count distinct photos among photo_ids that belong to trip_id."""
    if not photo_ids:
        return 0
    return session.exec(
        select(func.count()).select_from(Photo).where(
            col(Photo.id).in_(photo_ids),
            Photo.trip_id == trip_id,
        )
    ).one()
