"""
Pydantic schemas for JoinRequest entity.
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from splittrip.models.join_request import JoinRequestStatus


class JoinRequestCreate(BaseModel):
    """Schema for submitting a join request via a trip's share code."""
    trip_code: str = Field(min_length=1, max_length=16)


class JoinRequestResponse(BaseModel):
    """Schema for join request response."""
    id: str
    trip_id: str
    user_id: str
    user_name: str
    status: JoinRequestStatus
    responded_by: Optional[str] = None
    responded_at: Optional[datetime] = None
    created_at: datetime
