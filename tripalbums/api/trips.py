"""Trip, photo and album API endpoints."""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from tripalbums.api.deps import get_current_user, to_http_error
from tripalbums.database import get_session
from tripalbums.errors import TripAlbumsError
from tripalbums.models.photo import Photo
from tripalbums.models.trip import Trip
from tripalbums.models.user import User
from tripalbums.schemas.album import AlbumDetailResponse
from tripalbums.schemas.trip import (
    PhotoBatchCreateRequest,
    PhotoListResponse,
    PhotoResponse,
    TripCreateRequest,
    TripResponse,
)
from tripalbums.services.album_service import get_album
from tripalbums.services.photo_service import add_photos, list_unsorted_photos
from tripalbums.services.trip_service import create_trip, list_trips, verify_trip_ownership

router = APIRouter(prefix="/trips", tags=["trips"])


def _trip_to_response(trip: Trip) -> TripResponse:
    return TripResponse(
        id=trip.id,
        title=trip.title,
        start_date=trip.start_date.isoformat() if trip.start_date else None,
        end_date=trip.end_date.isoformat() if trip.end_date else None,
        created_at=trip.created_at.isoformat() if trip.created_at else "",
    )


def _photo_to_response(p: Photo) -> PhotoResponse:
    return PhotoResponse(
        id=p.id,
        trip_id=p.trip_id,
        caption=p.caption,
        taken_at=p.taken_at.isoformat() if p.taken_at else None,
        latitude=p.latitude,
        longitude=p.longitude,
        created_at=p.created_at.isoformat() if p.created_at else "",
    )


@router.post("", response_model=TripResponse, status_code=201)
def create(
    request: TripCreateRequest,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    """Create a trip."""
    trip = create_trip(session, user.id, request.title, request.start_date, request.end_date)
    return _trip_to_response(trip)


@router.get("", response_model=list[TripResponse])
def list_own_trips(
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    """List the current user's trips, newest first."""
    return [_trip_to_response(t) for t in list_trips(session, user.id)]


@router.post("/{trip_id}/photos", response_model=PhotoListResponse, status_code=201)
def register_photos(
    trip_id: int,
    request: PhotoBatchCreateRequest,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    """Register already-parsed photo metadata for a trip."""
    try:
        verify_trip_ownership(session, user.id, trip_id)
    except TripAlbumsError as e:
        raise to_http_error(e)

    photos = add_photos(session, trip_id, [p.model_dump() for p in request.photos])
    return PhotoListResponse(
        photos=[_photo_to_response(p) for p in photos],
        total=len(photos),
    )


@router.get("/{trip_id}/photos/unsorted", response_model=PhotoListResponse)
def unsorted_photos(
    trip_id: int,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    """List photos of the trip that are not in any album."""
    try:
        verify_trip_ownership(session, user.id, trip_id)
    except TripAlbumsError as e:
        raise to_http_error(e)

    photos = list_unsorted_photos(session, trip_id)
    return PhotoListResponse(
        photos=[_photo_to_response(p) for p in photos],
        total=len(photos),
    )


@router.get("/{trip_id}/albums/{album_id}", response_model=AlbumDetailResponse)
def album_detail(
    trip_id: int,
    album_id: int,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    """Get an album with its photo ids in album order."""
    try:
        verify_trip_ownership(session, user.id, trip_id)
        album, photo_ids = get_album(session, trip_id, album_id)
    except TripAlbumsError as e:
        raise to_http_error(e)

    return AlbumDetailResponse(
        id=album.id,
        trip_id=album.trip_id,
        name=album.name,
        photo_ids=photo_ids,
        created_at=album.created_at.isoformat() if album.created_at else "",
    )
