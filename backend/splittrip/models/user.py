"""
User model for identity and authentication.
"""
from sqlalchemy import Column, String, Boolean, Enum as SQLEnum
from sqlalchemy.orm import relationship
from splittrip.db.base import BaseModel
import enum


class AuthProvider(str, enum.Enum):
    """How the user identifies themselves."""
    GUEST = "GUEST"
    EMAIL = "EMAIL"


class User(BaseModel):
    """User model. Every user, guest or not, has one opaque id."""
    __tablename__ = "users"

    display_name = Column(String(100), nullable=True)
    email = Column(String(255), unique=True, nullable=True, index=True)
    auth_provider = Column(SQLEnum(AuthProvider), default=AuthProvider.GUEST, nullable=False)
    hashed_password = Column(String(255), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)

    # Relationships
    trips = relationship("TripMember", back_populates="user", cascade="all, delete-orphan")
    join_requests = relationship(
        "JoinRequest",
        foreign_keys="JoinRequest.user_id",
        back_populates="user",
        cascade="all, delete-orphan"
    )

    @property
    def name(self) -> str:
        """Name for display: display name, then email local part."""
        if self.display_name and self.display_name.strip():
            return self.display_name
        if self.email:
            return self.email.split("@")[0]
        return "Unknown User"

    @property
    def is_guest(self) -> bool:
        return self.auth_provider == AuthProvider.GUEST
