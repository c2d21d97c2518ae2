"""
Balance and settlement routes. Results are computed on demand, never stored.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from splittrip.db.session import get_db
from splittrip.models.user import User
from splittrip.schemas.settlement import BalanceSummary, MemberBalance
from splittrip.api.dependencies import get_current_user
from splittrip.api.routes.trips import check_trip_access
from splittrip.services import balance_service

router = APIRouter(prefix="/settlement", tags=["settlement"])


@router.get("/{trip_id}/balances", response_model=List[MemberBalance])
async def get_balances(
    trip_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Net balance of each trip member."""
    trip = check_trip_access(trip_id, current_user.id, db)
    return balance_service.get_trip_balances(trip, db)


@router.get("/{trip_id}/result", response_model=BalanceSummary)
async def get_settlement_result(
    trip_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Balances plus the minimal set of transfers that settles them."""
    trip = check_trip_access(trip_id, current_user.id, db)
    return balance_service.get_balance_summary(trip, db)
