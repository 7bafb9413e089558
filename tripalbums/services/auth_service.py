"""User registration, login and token refresh."""

from sqlmodel import Session, select

from tripalbums.errors import AuthenticationError, ConflictError
from tripalbums.models.user import User
from tripalbums.utils.security import (
    create_access_token,
    create_refresh_token,
    decode_token,
    hash_password,
    verify_password,
)


def _issue_tokens(user: User) -> dict:
    return {
        "access_token": create_access_token(user.id),
        "refresh_token": create_refresh_token(user.id),
        "token_type": "bearer",
        "user_id": user.id,
    }


def register_user(username: str, password: str, session: Session) -> dict:
    """Create a user and return a fresh token pair."""
    existing = session.exec(select(User).where(User.username == username)).first()
    if existing:
        raise ConflictError("Username already taken")

    user = User(username=username, password_hash=hash_password(password))
    session.add(user)
    session.commit()
    session.refresh(user)
    return _issue_tokens(user)


def login(username: str, password: str, session: Session) -> dict:
    user = session.exec(select(User).where(User.username == username)).first()
    if not user or not verify_password(password, user.password_hash):
        raise AuthenticationError("Invalid username or password")
    return _issue_tokens(user)


def refresh_access_token(refresh_token_str: str, session: Session) -> str:
    """Validate a refresh token and issue a new access token."""
    try:
        payload = decode_token(refresh_token_str)
    except Exception:
        raise AuthenticationError("Invalid or expired refresh token")

    if payload.get("type") != "refresh":
        raise AuthenticationError("Invalid token type")

    user = session.get(User, int(payload["sub"]))
    if not user:
        raise AuthenticationError("User not found")

    return create_access_token(user.id)
