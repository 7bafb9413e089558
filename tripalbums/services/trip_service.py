"""Trip access and creation."""

from datetime import date

from sqlmodel import Session, select, col

from tripalbums.errors import NotFoundError
from tripalbums.models.trip import Trip


def verify_trip_ownership(session: Session, user_id: int, trip_id: int) -> Trip:
    """Return the trip if it exists and belongs to the user.

    Raises NotFoundError otherwise; a trip owned by someone else is
    indistinguishable from a missing one.
    """
    trip = session.exec(
        select(Trip).where(Trip.id == trip_id, Trip.user_id == user_id)
    ).first()
    if not trip:
        raise NotFoundError("Trip not found")
    return trip


def create_trip(
    session: Session,
    user_id: int,
    title: str,
    start_date: date | None = None,
    end_date: date | None = None,
) -> Trip:
    trip = Trip(user_id=user_id, title=title, start_date=start_date, end_date=end_date)
    session.add(trip)
    session.commit()
    session.refresh(trip)
    return trip


def list_trips(session: Session, user_id: int) -> list[Trip]:
    return list(session.exec(
        select(Trip).where(Trip.user_id == user_id).order_by(col(Trip.created_at).desc())
    ).all())
