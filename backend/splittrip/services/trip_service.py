"""
Trip service for trip creation, lookup and lifecycle.
"""
import logging
from sqlalchemy import func
from sqlalchemy.orm import Session
from typing import List
from splittrip.core.config import settings
from splittrip.core.exceptions import Conflict, NotFound, PermissionDenied, TripNotActive
from splittrip.core.utils import generate_trip_code, normalize_trip_code
from splittrip.db.base import utcnow
from splittrip.models.expense import Expense
from splittrip.models.trip import Trip, TripMember, TripStatus
from splittrip.models.user import User

logger = logging.getLogger(__name__)


def generate_unique_trip_code(db: Session) -> str:
    """Generate a trip code not used by any existing trip."""
    for _ in range(settings.TRIP_CODE_MAX_ATTEMPTS):
        code = generate_trip_code()
        exists = db.query(Trip.id).filter(Trip.trip_code == code).first()
        if not exists:
            return code
    raise Conflict("Failed to generate unique trip code")


def create_trip(name: str, creator: User, db: Session) -> Trip:
    """Create a trip; the creator becomes its first member."""
    trip = Trip(
        name=name.strip(),
        trip_code=generate_unique_trip_code(db),
        created_by=creator.id,
        status=TripStatus.ACTIVE
    )
    db.add(trip)
    db.flush()

    db.add(TripMember(trip_id=trip.id, user_id=creator.id, is_creator=True))
    db.commit()
    db.refresh(trip)

    logger.info(f"Trip {trip.id} ({trip.trip_code}) created by {creator.id}")
    return trip


def get_trip_by_code(trip_code: str, db: Session) -> Trip:
    """Find a trip by its share code (case-insensitive)."""
    code = normalize_trip_code(trip_code)
    trip = db.query(Trip).filter(Trip.trip_code == code).first()
    if not trip:
        raise NotFound(f"Trip not found with code: {code}")
    return trip


def list_trips_for_user(user_id: str, db: Session) -> List[Trip]:
    return db.query(Trip).join(TripMember).filter(
        TripMember.user_id == user_id
    ).order_by(Trip.created_at.desc()).all()


def is_member(trip_id: str, user_id: str, db: Session) -> bool:
    return db.query(TripMember.id).filter(
        TripMember.trip_id == trip_id,
        TripMember.user_id == user_id
    ).first() is not None


def add_member(trip: Trip, user_id: str, db: Session) -> TripMember:
    """Add a user to a trip. Caller commits."""
    if is_member(trip.id, user_id, db):
        raise Conflict("User is already a member of this trip")
    member = TripMember(trip_id=trip.id, user_id=user_id, is_creator=False)
    db.add(member)
    db.flush()
    return member


def ensure_active(trip: Trip) -> None:
    if not trip.is_active:
        raise TripNotActive(f"Trip {trip.trip_code} is completed and read-only")


def complete_trip(trip: Trip, user_id: str, db: Session) -> Trip:
    """Mark a trip COMPLETED. Only the creator may do this, and only once."""
    if trip.created_by != user_id:
        raise PermissionDenied("Only the trip creator can complete the trip")
    ensure_active(trip)

    trip.status = TripStatus.COMPLETED
    trip.completed_at = utcnow()
    db.commit()
    db.refresh(trip)

    logger.info(f"Trip {trip.id} completed by {user_id}")
    return trip


def get_trip_summary(trip: Trip, db: Session) -> dict:
    """Lightweight summary for dashboard pages."""
    total = db.query(func.coalesce(func.sum(Expense.amount), 0)).filter(
        Expense.trip_id == trip.id
    ).scalar()

    member_names = [member.user.name for member in trip.members]
    return {
        "trip_id": trip.id,
        "trip_code": trip.trip_code,
        "name": trip.name,
        "status": trip.status,
        "member_count": len(member_names),
        "total_expenses_amount": int(total or 0),
        "member_names": member_names,
    }
