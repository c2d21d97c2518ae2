"""
Expense management routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from splittrip.db.session import get_db
from splittrip.models.user import User
from splittrip.models.expense import Expense
from splittrip.schemas.expense import ExpenseCreate, ExpenseResponse
from splittrip.api.dependencies import get_current_user
from splittrip.api.routes.trips import check_trip_access
from splittrip.services import expense_service

router = APIRouter(prefix="/expenses", tags=["expenses"])


def to_response(expense: Expense) -> ExpenseResponse:
    return ExpenseResponse(
        id=expense.id,
        trip_id=expense.trip_id,
        paid_by=expense.paid_by,
        paid_by_name=expense.payer.name,
        amount=expense.amount,
        description=expense.description,
        split_between=expense.split_between,
        created_at=expense.created_at
    )


@router.post("/{trip_id}", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
async def create_expense(
    trip_id: str,
    expense_data: ExpenseCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Add an expense to an active trip."""
    trip = check_trip_access(trip_id, current_user.id, db)

    expense = expense_service.create_expense(
        trip=trip,
        paid_by=expense_data.paid_by or current_user.id,
        amount=expense_data.amount,
        split_between=expense_data.split_between,
        description=expense_data.description,
        created_by=current_user.id,
        db=db
    )
    return to_response(expense)


@router.get("/{trip_id}", response_model=List[ExpenseResponse])
async def list_expenses(
    trip_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List a trip's expenses, oldest first."""
    check_trip_access(trip_id, current_user.id, db)
    return [to_response(e) for e in expense_service.list_expenses(trip_id, db)]
