"""
Trip model for shared expense groups.
"""
from sqlalchemy import Column, String, DateTime, Boolean, Enum as SQLEnum, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from splittrip.db.base import BaseModel
import enum


class TripStatus(str, enum.Enum):
    """Trip status enumeration. COMPLETED is terminal."""
    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"


class Trip(BaseModel):
    """Trip model grouping members and expenses for one outing."""
    __tablename__ = "trips"

    name = Column(String(200), nullable=False)
    trip_code = Column(String(16), unique=True, nullable=False, index=True)
    created_by = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    status = Column(SQLEnum(TripStatus), default=TripStatus.ACTIVE, nullable=False)
    completed_at = Column(DateTime, nullable=True)

    # Relationships
    creator = relationship("User", foreign_keys=[created_by])
    members = relationship(
        "TripMember",
        back_populates="trip",
        cascade="all, delete-orphan",
        order_by="TripMember.created_at"
    )
    expenses = relationship("Expense", back_populates="trip", cascade="all, delete-orphan")
    join_requests = relationship("JoinRequest", back_populates="trip", cascade="all, delete-orphan")

    @property
    def is_active(self) -> bool:
        return self.status == TripStatus.ACTIVE


class TripMember(BaseModel):
    """Junction table for Trip and User many-to-many relationship."""
    __tablename__ = "trip_members"
    __table_args__ = (
        UniqueConstraint("trip_id", "user_id", name="uq_trip_member"),
    )

    trip_id = Column(String(36), ForeignKey("trips.id"), nullable=False, index=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    is_creator = Column(Boolean, default=False, nullable=False)

    # Relationships
    trip = relationship("Trip", back_populates="members")
    user = relationship("User", back_populates="trips")
