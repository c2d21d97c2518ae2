"""
Pydantic schemas for balances and settlement.
"""
from pydantic import BaseModel
from typing import List
from splittrip.models.trip import TripStatus


class MemberBalance(BaseModel):
    """Net balance of one member. Positive = is owed, negative = owes."""
    member_id: str
    member_name: str
    balance: int  # Minor units


class Transfer(BaseModel):
    """Schema for a single transfer in settlement."""
    from_member_id: str
    from_member_name: str
    to_member_id: str
    to_member_name: str
    amount: int  # Minor units, always positive
    message: str


class BalanceSummary(BaseModel):
    """Schema for balance summary with settlement transfers."""
    trip_id: str
    trip_name: str
    trip_code: str
    status: TripStatus
    currency: str
    total_expenses: int
    balances: List[MemberBalance]
    transfers: List[Transfer]
    summary: str
