"""
Pydantic schemas for Trip entity.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
from splittrip.models.trip import TripStatus


class TripCreate(BaseModel):
    """Schema for trip creation."""
    name: str = Field(min_length=1, max_length=200)


class TripResponse(BaseModel):
    """Schema for trip response."""
    id: str
    name: str
    trip_code: str
    created_by: str
    status: TripStatus
    completed_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class TripMemberResponse(BaseModel):
    """Schema for trip member response."""
    id: str  # User id
    name: str
    is_creator: bool


class TripDetailResponse(TripResponse):
    """Schema for detailed trip response with members."""
    members: List[TripMemberResponse] = []


class TripSummaryResponse(BaseModel):
    """Lightweight trip summary for landing/dashboard pages."""
    trip_id: str
    trip_code: str
    name: str
    status: TripStatus
    member_count: int
    total_expenses_amount: int  # Minor units
    member_names: List[str]
