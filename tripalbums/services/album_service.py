"""Album persistence: creation with ordered photo assignments and lookup."""

import logging

from sqlmodel import Session, select, col

from tripalbums.errors import NotFoundError
from tripalbums.models.album import Album, PhotoAlbum

logger = logging.getLogger(__name__)


def create_album_with_assignments(
    session: Session,
    trip_id: int,
    name: str,
    photo_ids: list[int],
) -> Album:
    """Create an album and its photo assignments in one commit.

    Assignment positions follow the order of photo_ids. Nothing is persisted
    if any insert fails.
    """
    album = Album(trip_id=trip_id, name=name)
    try:
        session.add(album)
        session.flush()  # assigns album.id

        for position, photo_id in enumerate(photo_ids):
            session.add(PhotoAlbum(album_id=album.id, photo_id=photo_id, position=position))

        session.commit()
    except Exception:
        session.rollback()
        logger.error("Album creation rolled back for trip %s", trip_id)
        raise

    session.refresh(album)
    logger.info("Created album %s for trip %s with %d photos", album.id, trip_id, len(photo_ids))
    return album


def get_album(session: Session, trip_id: int, album_id: int) -> tuple[Album, list[int]]:
    """Return an album of the trip and its photo ids in position order."""
    album = session.get(Album, album_id)
    if not album or album.trip_id != trip_id:
        raise NotFoundError("Album not found")

    photo_ids = session.exec(
        select(PhotoAlbum.photo_id)
        .where(PhotoAlbum.album_id == album_id)
        .order_by(col(PhotoAlbum.position).asc())
    ).all()
    return album, list(photo_ids)
