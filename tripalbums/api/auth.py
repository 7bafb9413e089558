"""Authentication API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from tripalbums.database import get_session
from tripalbums.errors import AuthenticationError, ConflictError
from tripalbums.schemas.auth import (
    LoginRequest,
    RefreshRequest,
    RefreshResponse,
    RegisterRequest,
    TokenResponse,
)
from tripalbums.services.auth_service import login, refresh_access_token, register_user

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=TokenResponse, status_code=201)
def register(
    request: RegisterRequest,
    session: Session = Depends(get_session),
):
    """Create an account and return tokens."""
    try:
        return TokenResponse(**register_user(request.username, request.password, session))
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.post("/login", response_model=TokenResponse)
def login_user(
    request: LoginRequest,
    session: Session = Depends(get_session),
):
    """Verify credentials and return tokens."""
    try:
        return TokenResponse(**login(request.username, request.password, session))
    except AuthenticationError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))


@router.post("/refresh", response_model=RefreshResponse)
def refresh_token(
    request: RefreshRequest,
    session: Session = Depends(get_session),
):
    """Refresh an access token using a refresh token."""
    try:
        new_token = refresh_access_token(request.refresh_token, session)
    except AuthenticationError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    return RefreshResponse(access_token=new_token)
