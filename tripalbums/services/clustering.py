"""Photo clustering for album suggestions.

Two independent passes over a trip's unsorted photos:

- ``cluster_by_time`` groups photos into shooting sessions. A session is
  anchored to its first photo and spans at most ``window`` from it; the
  next photo outside that span opens a new session.
- ``cluster_by_location`` greedily grows fixed-radius clusters around seed
  photos in input order. Membership is tested against the seed, not a
  running centroid, so a cluster can be up to twice the radius across.

Both return an insertion-ordered mapping of cluster key -> Cluster and drop
clusters smaller than ``min_size``.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Optional

from tripalbums.models.photo import Photo
from tripalbums.utils.geo import haversine_distance

logger = logging.getLogger(__name__)

TIME_WINDOW = timedelta(hours=2)
LOCATION_RADIUS_M = 500.0
MIN_CLUSTER_SIZE = 3


@dataclass
class Cluster:
    key: str
    photos: list[Photo] = field(default_factory=list)
    anchor_time: Optional[datetime] = None  # session start, UTC
    seed_point: Optional[tuple[float, float]] = None  # (lat, lon) of the seed photo

    @property
    def photo_ids(self) -> list[int]:
        return [p.id for p in self.photos]

    def __len__(self) -> int:
        return len(self.photos)


def to_utc(value: datetime) -> datetime:
    """Normalize a timestamp to UTC. Naive values are already UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _time_key(start: datetime) -> str:
    epoch_ms = int(start.timestamp() * 1000)
    return f"date-{start.date().isoformat()}-{epoch_ms}"


def cluster_by_time(
    photos: list[Photo],
    window: timedelta = TIME_WINDOW,
    min_size: int = MIN_CLUSTER_SIZE,
) -> dict[str, Cluster]:
    """Group timestamped photos into sessions anchored to each session's first photo."""
    timed = [p for p in photos if p.taken_at is not None]
    # sorted() is stable: photos with equal timestamps keep input order
    timed = sorted(timed, key=lambda p: to_utc(p.taken_at))

    clusters: dict[str, Cluster] = {}

    def flush(group: list[Photo], start: datetime) -> None:
        if len(group) >= min_size:
            key = _time_key(start)
            clusters[key] = Cluster(key=key, photos=group, anchor_time=start)

    group: list[Photo] = []
    group_start: Optional[datetime] = None
    for photo in timed:
        taken = to_utc(photo.taken_at)
        if not group:
            group = [photo]
            group_start = taken
        elif taken - group_start <= window:
            group.append(photo)
        else:
            flush(group, group_start)
            group = [photo]
            group_start = taken

    if group:
        flush(group, group_start)

    logger.debug(
        "Time clustering: %d timestamped photos -> %d sessions",
        len(timed), len(clusters),
    )
    return clusters


def cluster_by_location(
    photos: list[Photo],
    radius_m: float = LOCATION_RADIUS_M,
    min_size: int = MIN_CLUSTER_SIZE,
) -> dict[str, Cluster]:
    """Greedy fixed-radius clustering around seed photos, in input order.

    O(n^2) in the number of geotagged photos.
    """
    geo_photos = [
        p for p in photos
        if p.latitude is not None and p.longitude is not None
    ]

    clusters: dict[str, Cluster] = {}
    assigned: set[int] = set()

    for seed in geo_photos:
        if seed.id in assigned:
            continue

        members = [seed]
        assigned.add(seed.id)
        lat1, lon1 = float(seed.latitude), float(seed.longitude)

        for other in geo_photos:
            if other.id in assigned:
                continue
            distance = haversine_distance(
                lat1, lon1, float(other.latitude), float(other.longitude)
            )
            if distance <= radius_m:
                members.append(other)
                assigned.add(other.id)

        if len(members) >= min_size:
            key = f"location-{lat1:.4f}-{lon1:.4f}-{seed.id}"
            clusters[key] = Cluster(key=key, photos=members, seed_point=(lat1, lon1))

    logger.debug(
        "Location clustering: %d geotagged photos -> %d clusters",
        len(geo_photos), len(clusters),
    )
    return clusters
