"""
Pydantic schemas for Expense entity.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime


class ExpenseCreate(BaseModel):
    """Schema for expense creation."""
    # Defaults to the current user when omitted
    paid_by: Optional[str] = None
    amount: int  # Minor currency units (paise/cents), must be positive
    description: Optional[str] = Field(default=None, max_length=500)
    split_between: List[str]  # Member ids sharing this expense; order decides remainder


class ExpenseResponse(BaseModel):
    """Schema for expense response."""
    id: str
    trip_id: str
    paid_by: str
    paid_by_name: str
    amount: int
    description: Optional[str] = None
    split_between: List[str]
    created_at: datetime
