"""Models package - Import all models for SQLAlchemy registration."""
from splittrip.models.user import User, AuthProvider
from splittrip.models.trip import Trip, TripMember, TripStatus
from splittrip.models.expense import Expense, ExpenseSplit
from splittrip.models.join_request import JoinRequest, JoinRequestStatus

__all__ = [
    "User",
    "AuthProvider",
    "Trip",
    "TripMember",
    "TripStatus",
    "Expense",
    "ExpenseSplit",
    "JoinRequest",
    "JoinRequestStatus",
]
