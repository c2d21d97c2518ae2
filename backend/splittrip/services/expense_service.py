"""
Expense service for expense-related business logic.
"""
import logging
from sqlalchemy.orm import Session, joinedload
from typing import List, Optional, Sequence
from splittrip.core.exceptions import LedgerError
from splittrip.models.expense import Expense, ExpenseSplit
from splittrip.models.trip import Trip, TripMember
from splittrip.services.ledger_service import LedgerExpense, validate_expense
from splittrip.services.trip_service import ensure_active

logger = logging.getLogger(__name__)


def member_ids_for_trip(trip_id: str, db: Session) -> List[str]:
    """Member ids of a trip, in join order."""
    rows = db.query(TripMember.user_id).filter(
        TripMember.trip_id == trip_id
    ).order_by(TripMember.created_at).all()
    return [row.user_id for row in rows]


def create_expense(
    trip: Trip,
    paid_by: str,
    amount: int,
    split_between: Sequence[str],
    description: Optional[str] = None,
    created_by: Optional[str] = None,
    db: Session = None
) -> Expense:
    """Validate and store an expense with its ordered split list."""
    ensure_active(trip)

    candidate = LedgerExpense(
        id="(new)",
        trip_id=trip.id,
        paid_by=paid_by,
        amount=amount,
        split_between=tuple(split_between),
        description=description or ""
    )
    try:
        validate_expense(candidate, set(member_ids_for_trip(trip.id, db)))
    except LedgerError as e:
        logger.warning(f"Rejected expense for trip {trip.id}: {e}")
        raise

    expense = Expense(
        trip_id=trip.id,
        paid_by=paid_by,
        amount=amount,
        description=description,
        created_by=created_by
    )
    db.add(expense)
    db.flush()

    for position, user_id in enumerate(split_between):
        db.add(ExpenseSplit(expense_id=expense.id, user_id=user_id, position=position))

    db.commit()
    db.refresh(expense)

    logger.info(f"Expense {expense.id} of {amount} added to trip {trip.id} by {created_by}")
    return expense


def list_expenses(trip_id: str, db: Session) -> List[Expense]:
    """Expenses for a trip, oldest first, with payer and splits loaded."""
    return db.query(Expense).options(
        joinedload(Expense.payer),
        joinedload(Expense.splits).joinedload(ExpenseSplit.user)
    ).filter(
        Expense.trip_id == trip_id
    ).order_by(Expense.created_at, Expense.id).all()
