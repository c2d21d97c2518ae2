"""
Trip management routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from splittrip.db.session import get_db
from splittrip.models.user import User
from splittrip.models.trip import Trip, TripMember
from splittrip.schemas.trip import (
    TripCreate, TripResponse, TripDetailResponse,
    TripMemberResponse, TripSummaryResponse
)
from splittrip.api.dependencies import get_current_user
from splittrip.services import trip_service

router = APIRouter(prefix="/trips", tags=["trips"])


def check_trip_access(trip_id: str, user_id: str, db: Session) -> Trip:
    """Check if user is a member of the trip."""
    trip = db.query(Trip).filter(Trip.id == trip_id).first()
    if not trip:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Trip not found"
        )

    member = db.query(TripMember).filter(
        TripMember.trip_id == trip_id,
        TripMember.user_id == user_id
    ).first()

    if not member:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied to this trip"
        )

    return trip


def build_trip_detail(trip: Trip) -> TripDetailResponse:
    members = [
        TripMemberResponse(id=m.user_id, name=m.user.name, is_creator=m.is_creator)
        for m in trip.members
    ]
    return TripDetailResponse(
        **TripResponse.model_validate(trip).model_dump(),
        members=members
    )


@router.post("", response_model=TripResponse, status_code=status.HTTP_201_CREATED)
async def create_trip(
    trip_data: TripCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Create a new trip with the current user as creator."""
    return trip_service.create_trip(trip_data.name, current_user, db)


@router.get("", response_model=List[TripResponse])
async def list_trips(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List all trips for current user."""
    return trip_service.list_trips_for_user(current_user.id, db)


@router.get("/code/{trip_code}", response_model=TripSummaryResponse)
async def get_trip_by_code(
    trip_code: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Preview a trip by its share code (used before requesting to join)."""
    trip = trip_service.get_trip_by_code(trip_code, db)
    return trip_service.get_trip_summary(trip, db)


@router.get("/{trip_id}", response_model=TripDetailResponse)
async def get_trip(
    trip_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get trip details with members."""
    trip = check_trip_access(trip_id, current_user.id, db)
    return build_trip_detail(trip)


@router.get("/{trip_id}/summary", response_model=TripSummaryResponse)
async def get_trip_summary(
    trip_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get trip summary: member count, names and total spent."""
    trip = check_trip_access(trip_id, current_user.id, db)
    return trip_service.get_trip_summary(trip, db)


@router.post("/{trip_id}/complete", response_model=TripResponse)
async def complete_trip(
    trip_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Mark the trip completed (creator only, cannot be undone)."""
    trip = check_trip_access(trip_id, current_user.id, db)
    return trip_service.complete_trip(trip, current_user.id, db)
