"""
Join request model for trip membership approval.
"""
from sqlalchemy import Column, String, DateTime, Enum as SQLEnum, ForeignKey
from sqlalchemy.orm import relationship
from splittrip.db.base import BaseModel
import enum


class JoinRequestStatus(str, enum.Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class JoinRequest(BaseModel):
    """A user's request to join a trip, answered by the trip creator."""
    __tablename__ = "join_requests"

    trip_id = Column(String(36), ForeignKey("trips.id"), nullable=False, index=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    status = Column(SQLEnum(JoinRequestStatus), default=JoinRequestStatus.PENDING, nullable=False, index=True)
    responded_by = Column(String(36), ForeignKey("users.id"), nullable=True)
    responded_at = Column(DateTime, nullable=True)

    # Relationships
    trip = relationship("Trip", back_populates="join_requests")
    user = relationship("User", foreign_keys=[user_id], back_populates="join_requests")
