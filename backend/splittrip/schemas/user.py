"""
Pydantic schemas for User entity.
"""
from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime
from splittrip.models.user import AuthProvider


class DisplayNameIn(BaseModel):
    """Base for requests carrying a display name."""
    display_name: str = Field(min_length=1, max_length=100)

    @field_validator("display_name", mode="before")
    @classmethod
    def strip_display_name(cls, v):
        """Strip surrounding whitespace before the length check."""
        if isinstance(v, str):
            return v.strip()
        return v


class GuestCreate(DisplayNameIn):
    """Schema for guest signup (display name only)."""
    pass


class UserCreate(DisplayNameIn):
    """Schema for email signup."""
    email: EmailStr
    password: str = Field(min_length=8)


class UserUpdate(DisplayNameIn):
    """Schema for profile update."""
    pass


class EmailUpgrade(BaseModel):
    """Schema for turning a guest account into an email account."""
    email: EmailStr
    password: str = Field(min_length=8)


class UserResponse(BaseModel):
    """Schema for user response."""
    id: str
    display_name: Optional[str] = None
    name: str
    email: Optional[EmailStr] = None
    auth_provider: AuthProvider
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True


class UserLogin(BaseModel):
    """Schema for user login."""
    email: EmailStr
    password: str


class Token(BaseModel):
    """Schema for JWT token response."""
    access_token: str
    token_type: str = "bearer"
    user_id: str
