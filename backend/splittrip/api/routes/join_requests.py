"""
Join request routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from splittrip.db.session import get_db
from splittrip.models.user import User
from splittrip.models.join_request import JoinRequest
from splittrip.schemas.join_request import JoinRequestCreate, JoinRequestResponse
from splittrip.api.dependencies import get_current_user
from splittrip.api.routes.trips import check_trip_access
from splittrip.services import join_request_service, trip_service

router = APIRouter(prefix="/join-requests", tags=["join-requests"])


def to_response(request: JoinRequest) -> JoinRequestResponse:
    return JoinRequestResponse(
        id=request.id,
        trip_id=request.trip_id,
        user_id=request.user_id,
        user_name=request.user.name,
        status=request.status,
        responded_by=request.responded_by,
        responded_at=request.responded_at,
        created_at=request.created_at
    )


@router.post("", response_model=JoinRequestResponse, status_code=status.HTTP_201_CREATED)
async def submit_join_request(
    request_data: JoinRequestCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Ask to join a trip using its share code."""
    trip = trip_service.get_trip_by_code(request_data.trip_code, db)
    request = join_request_service.submit_join_request(trip, current_user, db)
    return to_response(request)


@router.get("/trip/{trip_id}/pending", response_model=List[JoinRequestResponse])
async def get_pending_requests_for_trip(
    trip_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Pending join requests for a trip (members only)."""
    check_trip_access(trip_id, current_user.id, db)
    return [to_response(r) for r in join_request_service.list_pending_for_trip(trip_id, db)]


@router.get("/me/pending", response_model=List[JoinRequestResponse])
async def get_my_pending_requests(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """The current user's pending join requests."""
    return [to_response(r) for r in join_request_service.list_pending_for_user(current_user.id, db)]


@router.post("/{request_id}/approve", response_model=JoinRequestResponse)
async def approve_join_request(
    request_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Approve a join request (trip creator only)."""
    request = join_request_service.get_join_request(request_id, db)
    return to_response(join_request_service.approve_join_request(request, current_user.id, db))


@router.post("/{request_id}/reject", response_model=JoinRequestResponse)
async def reject_join_request(
    request_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Reject a join request (trip creator only)."""
    request = join_request_service.get_join_request(request_id, db)
    return to_response(join_request_service.reject_join_request(request, current_user.id, db))
