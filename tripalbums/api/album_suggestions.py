"""Album suggestion API endpoints."""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from tripalbums.api.deps import get_current_user, to_http_error
from tripalbums.database import get_session
from tripalbums.errors import TripAlbumsError
from tripalbums.models.user import User
from tripalbums.schemas.album import (
    AcceptSuggestionRequest,
    AcceptSuggestionResponse,
    AlbumSuggestionListResponse,
    AlbumSuggestionResponse,
)
from tripalbums.services.album_suggestion_service import (
    accept_suggestion,
    get_album_suggestions,
)

router = APIRouter(prefix="/trips/{trip_id}/album-suggestions", tags=["album-suggestions"])


@router.get("", response_model=AlbumSuggestionListResponse)
def list_suggestions(
    trip_id: int,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    """Suggest albums for the trip's unsorted photos, most confident first."""
    try:
        suggestions = get_album_suggestions(session, user.id, trip_id)
    except TripAlbumsError as e:
        raise to_http_error(e)

    return AlbumSuggestionListResponse(
        suggestions=[
            AlbumSuggestionResponse(
                name=s.name,
                photo_ids=s.photo_ids,
                type=s.type,
                confidence=s.confidence,
                metadata=s.metadata,
            )
            for s in suggestions
        ],
        total=len(suggestions),
    )


@router.post("/accept", response_model=AcceptSuggestionResponse, status_code=201)
def accept(
    trip_id: int,
    request: AcceptSuggestionRequest,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    """Create an album from an accepted suggestion."""
    try:
        result = accept_suggestion(session, user.id, trip_id, request.name, request.photo_ids)
    except TripAlbumsError as e:
        raise to_http_error(e)
    return AcceptSuggestionResponse(album_id=result["album_id"])
