"""
Balance service: load a trip's ledger snapshot and build balance/settlement views.
"""
import logging
from sqlalchemy.orm import Session, joinedload
from typing import List
from splittrip.core.config import settings
from splittrip.core.exceptions import UnbalancedLedger
from splittrip.core.money import format_amount
from splittrip.models.expense import Expense
from splittrip.models.trip import Trip, TripMember
from splittrip.services.ledger_service import LedgerExpense, LedgerMember, TripLedger, total_spent
from splittrip.services.settlement_service import compute_settlement

logger = logging.getLogger(__name__)


def load_trip_ledger(trip_id: str, db: Session) -> TripLedger:
    """
    Read members and expenses of a trip into plain ledger values.
    Both reads happen in the caller's session so they form one snapshot.
    """
    members = db.query(TripMember).options(
        joinedload(TripMember.user)
    ).filter(
        TripMember.trip_id == trip_id
    ).order_by(TripMember.created_at).all()

    expenses = db.query(Expense).options(
        joinedload(Expense.splits)
    ).filter(
        Expense.trip_id == trip_id
    ).order_by(Expense.created_at, Expense.id).all()

    return TripLedger(
        trip_id=trip_id,
        members=[LedgerMember(id=m.user_id, name=m.user.name) for m in members],
        expenses=[
            LedgerExpense(
                id=e.id,
                trip_id=e.trip_id,
                paid_by=e.paid_by,
                amount=e.amount,
                split_between=tuple(e.split_between),
                description=e.description or ""
            )
            for e in expenses
        ]
    )


def _balance_rows(balances: dict, names: dict) -> List[dict]:
    return [
        {"member_id": member_id, "member_name": names.get(member_id, ""), "balance": balance}
        for member_id, balance in balances.items()
    ]


def get_trip_balances(trip: Trip, db: Session) -> List[dict]:
    """Net balance of every member, in join order."""
    ledger = load_trip_ledger(trip.id, db)
    return _balance_rows(ledger.balances(), ledger.member_names)


def get_balance_summary(trip: Trip, db: Session) -> dict:
    """Balances plus the transfers that settle them, with display text."""
    ledger = load_trip_ledger(trip.id, db)
    names = ledger.member_names
    balances = ledger.balances()

    try:
        instructions = compute_settlement(balances)
    except UnbalancedLedger:
        logger.error(f"Unbalanced ledger for trip {trip.id}: {balances}")
        raise

    transfers = []
    for instruction in instructions:
        from_name = names.get(instruction.from_member_id, "")
        to_name = names.get(instruction.to_member_id, "")
        transfers.append({
            "from_member_id": instruction.from_member_id,
            "from_member_name": from_name,
            "to_member_id": instruction.to_member_id,
            "to_member_name": to_name,
            "amount": instruction.amount,
            "message": f"{from_name} has to pay {format_amount(instruction.amount)} to {to_name}",
        })

    total_expenses = total_spent(ledger.expenses)

    # Create summary text
    summary_lines = [
        f"Total expenses: {format_amount(total_expenses)} {settings.CURRENCY_CODE}",
        f"Members: {len(balances)}",
        "\nNet balances:",
    ]
    for member_id, balance in balances.items():
        summary_lines.append(f"  {names.get(member_id, member_id)}: {format_amount(balance, signed=True)}")
    summary_lines.append("\nTransfers:")
    if transfers:
        summary_lines.extend(f"  {t['message']}" for t in transfers)
    else:
        summary_lines.append("  All settled up")

    return {
        "trip_id": trip.id,
        "trip_name": trip.name,
        "trip_code": trip.trip_code,
        "status": trip.status,
        "currency": settings.CURRENCY_CODE,
        "total_expenses": total_expenses,
        "balances": _balance_rows(balances, names),
        "transfers": transfers,
        "summary": "\n".join(summary_lines),
    }
