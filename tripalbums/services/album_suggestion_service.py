"""Album suggestions: propose albums from a trip's unsorted photos.

Photos are clustered by shooting session and by location, every cluster is
scored, and the best few proposals are returned. Nothing is written until
the caller accepts one of them.
"""

import logging
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Literal

from sqlmodel import Session

from tripalbums.config import settings
from tripalbums.errors import InvalidRequestError
from tripalbums.models.photo import Photo
from tripalbums.services.album_service import create_album_with_assignments
from tripalbums.services.clustering import Cluster, cluster_by_location, cluster_by_time
from tripalbums.services.photo_service import count_photos_in_trip, list_unsorted_photos
from tripalbums.services.trip_service import verify_trip_ownership

logger = logging.getLogger(__name__)

SuggestionType = Literal["date", "location"]

# Confidence policy: base + step * size, capped. Heuristic, not calibrated.
DATE_CONFIDENCE_BASE = 0.5
DATE_CONFIDENCE_CAP = 0.95
LOCATION_CONFIDENCE_BASE = 0.4
LOCATION_CONFIDENCE_CAP = 0.90
CONFIDENCE_STEP = 0.1


@dataclass(frozen=True)
class AlbumSuggestion:
    name: str
    photo_ids: list[int]
    type: SuggestionType
    confidence: float
    metadata: dict[str, str] = field(default_factory=dict)


def score_confidence(suggestion_type: SuggestionType, size: int) -> float:
    """Confidence that a cluster of `size` photos is a deliberate grouping."""
    if suggestion_type == "date":
        return min(DATE_CONFIDENCE_BASE + CONFIDENCE_STEP * size, DATE_CONFIDENCE_CAP)
    return min(LOCATION_CONFIDENCE_BASE + CONFIDENCE_STEP * size, LOCATION_CONFIDENCE_CAP)


def format_album_date(cluster: Cluster) -> str:
    """'March 5, 2024' style name for a session."""
    d = cluster.anchor_time
    return f"{d:%B} {d.day}, {d.year}"


def date_suggestion(cluster: Cluster) -> AlbumSuggestion:
    return AlbumSuggestion(
        name=format_album_date(cluster),
        photo_ids=cluster.photo_ids,
        type="date",
        confidence=score_confidence("date", len(cluster)),
        metadata={"date": cluster.anchor_time.date().isoformat()},
    )


def location_suggestion(cluster: Cluster) -> AlbumSuggestion:
    lat, lon = cluster.seed_point
    location_name = f"Location ({lat:.2f}, {lon:.2f})"
    return AlbumSuggestion(
        name=location_name,
        photo_ids=cluster.photo_ids,
        type="location",
        confidence=score_confidence("location", len(cluster)),
        metadata={"locationName": location_name},
    )


def rank_suggestions(
    time_clusters: list[Cluster],
    location_clusters: list[Cluster],
    limit: int | None = None,
) -> list[AlbumSuggestion]:
    """Build suggestions for both cluster kinds and keep the most confident.

    The sort is stable, so equal confidences keep date-before-location
    order and cluster discovery order.
    """
    if limit is None:
        limit = settings.suggestion_max_results

    suggestions = [date_suggestion(c) for c in time_clusters]
    suggestions += [location_suggestion(c) for c in location_clusters]
    suggestions.sort(key=lambda s: s.confidence, reverse=True)
    return suggestions[:limit]


def suggest_albums(photos: list[Photo]) -> list[AlbumSuggestion]:
    """Compute ranked album suggestions for an in-memory list of photos."""
    min_size = settings.suggestion_min_photos
    if len(photos) < min_size:
        return []

    time_clusters = cluster_by_time(
        photos,
        window=timedelta(minutes=settings.suggestion_time_window_minutes),
        min_size=min_size,
    )
    location_clusters = cluster_by_location(
        photos,
        radius_m=settings.suggestion_radius_m,
        min_size=min_size,
    )
    return rank_suggestions(list(time_clusters.values()), list(location_clusters.values()))


def get_album_suggestions(session: Session, user_id: int, trip_id: int) -> list[AlbumSuggestion]:
    """Suggest albums for the unsorted photos of a trip the user owns.

    Raises NotFoundError if the trip is missing or not the user's.
    """
    verify_trip_ownership(session, user_id, trip_id)
    photos = list_unsorted_photos(session, trip_id)

    suggestions = suggest_albums(photos)
    logger.info(
        "Trip %s: %d unsorted photos -> %d album suggestions",
        trip_id, len(photos), len(suggestions),
    )
    return suggestions


def accept_suggestion(
    session: Session,
    user_id: int,
    trip_id: int,
    name: str,
    photo_ids: list[int],
) -> dict:
    """Turn an accepted suggestion into an album.

    Every check runs before the write, so a rejected request never leaves a
    partial album behind. Duplicate ids make the count fall short and are
    rejected along with ids from other trips.
    """
    verify_trip_ownership(session, user_id, trip_id)

    matched = count_photos_in_trip(session, photo_ids, trip_id)
    if matched != len(photo_ids):
        logger.warning(
            "Rejected album for trip %s: %d of %d photos belong to it",
            trip_id, matched, len(photo_ids),
        )
        raise InvalidRequestError("Some photos do not belong to this trip")

    album = create_album_with_assignments(session, trip_id, name, photo_ids)
    return {"album_id": album.id}
