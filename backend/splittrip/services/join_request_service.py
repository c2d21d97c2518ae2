"""
Join request service: users ask to join a trip, the creator decides.
"""
import logging
from sqlalchemy.orm import Session
from typing import List
from splittrip.core.exceptions import Conflict, NotFound, PermissionDenied
from splittrip.db.base import utcnow
from splittrip.models.join_request import JoinRequest, JoinRequestStatus
from splittrip.models.trip import Trip
from splittrip.models.user import User
from splittrip.services.trip_service import add_member, ensure_active, is_member

logger = logging.getLogger(__name__)


def submit_join_request(trip: Trip, user: User, db: Session) -> JoinRequest:
    """Submit a join request for a trip."""
    ensure_active(trip)

    if is_member(trip.id, user.id, db):
        raise Conflict("You are already a member of this trip")

    pending = db.query(JoinRequest.id).filter(
        JoinRequest.trip_id == trip.id,
        JoinRequest.user_id == user.id,
        JoinRequest.status == JoinRequestStatus.PENDING
    ).first()
    if pending:
        raise Conflict("You already have a pending join request for this trip")

    request = JoinRequest(trip_id=trip.id, user_id=user.id)
    db.add(request)
    db.commit()
    db.refresh(request)

    logger.info(f"Join request {request.id}: user {user.id} -> trip {trip.id}")
    return request


def get_join_request(request_id: str, db: Session) -> JoinRequest:
    request = db.query(JoinRequest).filter(JoinRequest.id == request_id).first()
    if not request:
        raise NotFound("Join request not found")
    return request


def list_pending_for_trip(trip_id: str, db: Session) -> List[JoinRequest]:
    return db.query(JoinRequest).filter(
        JoinRequest.trip_id == trip_id,
        JoinRequest.status == JoinRequestStatus.PENDING
    ).order_by(JoinRequest.created_at).all()


def list_pending_for_user(user_id: str, db: Session) -> List[JoinRequest]:
    return db.query(JoinRequest).filter(
        JoinRequest.user_id == user_id,
        JoinRequest.status == JoinRequestStatus.PENDING
    ).order_by(JoinRequest.created_at).all()


def _check_can_respond(request: JoinRequest, responder_id: str) -> None:
    if request.status != JoinRequestStatus.PENDING:
        raise Conflict("This request has already been processed")
    if request.trip.created_by != responder_id:
        raise PermissionDenied("Only the trip creator can respond to join requests")


def approve_join_request(request: JoinRequest, approver_id: str, db: Session) -> JoinRequest:
    """Approve a join request and add the user to the trip."""
    _check_can_respond(request, approver_id)
    ensure_active(request.trip)

    if not is_member(request.trip_id, request.user_id, db):
        add_member(request.trip, request.user_id, db)

    request.status = JoinRequestStatus.APPROVED
    request.responded_by = approver_id
    request.responded_at = utcnow()
    db.commit()
    db.refresh(request)

    logger.info(f"Join request {request.id} approved by {approver_id}")
    return request


def reject_join_request(request: JoinRequest, rejector_id: str, db: Session) -> JoinRequest:
    """Reject a join request."""
    _check_can_respond(request, rejector_id)

    request.status = JoinRequestStatus.REJECTED
    request.responded_by = rejector_id
    request.responded_at = utcnow()
    db.commit()
    db.refresh(request)

    logger.info(f"Join request {request.id} rejected by {rejector_id}")
    return request
