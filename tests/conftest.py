"""Shared fixtures. The environment must be set before tripalbums is imported."""

import os
import tempfile
from datetime import datetime

os.environ["TRIPALBUMS_DATA_DIR"] = tempfile.mkdtemp()
os.environ["TRIPALBUMS_DB_PATH"] = os.path.join(os.environ["TRIPALBUMS_DATA_DIR"], "test.db")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session, SQLModel  # noqa: E402

from tripalbums.database import engine  # noqa: E402
from tripalbums.models.photo import Photo  # noqa: E402
from tripalbums.models.trip import Trip  # noqa: E402
from tripalbums.models.user import User  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_db():
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    yield


@pytest.fixture
def session():
    with Session(engine) as s:
        yield s


@pytest.fixture
def client():
    from tripalbums.main import app

    with TestClient(app) as c:
        yield c


def make_user(session: Session, username: str = "traveler") -> User:
    user = User(username=username, password_hash="x")
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def make_trip(session: Session, user: User, title: str = "Lisbon") -> Trip:
    trip = Trip(user_id=user.id, title=title)
    session.add(trip)
    session.commit()
    session.refresh(trip)
    return trip


def make_photo(
    session: Session,
    trip: Trip,
    taken_at: datetime | None = None,
    latitude: float | None = None,
    longitude: float | None = None,
) -> Photo:
    photo = Photo(trip_id=trip.id, taken_at=taken_at, latitude=latitude, longitude=longitude)
    session.add(photo)
    session.commit()
    session.refresh(photo)
    return photo


def register(client: TestClient, username: str = "traveler") -> dict:
    r = client.post("/api/v1/auth/register", json={
        "username": username,
        "password": "correct-horse",
    })
    assert r.status_code == 201, r.text
    return {"Authorization": f"Bearer {r.json()['access_token']}"}
