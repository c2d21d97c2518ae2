"""
Ledger aggregation: reduce a trip's expenses into per-member net balances.

Everything here is pure. Callers pass a fully materialized snapshot of a
trip's members and expenses; nothing is read from or written to the
database.
"""
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Tuple
from splittrip.core.exceptions import InvalidAmount, InvalidSplit
from splittrip.core.money import MAX_AMOUNT, split_equally


@dataclass(frozen=True)
class LedgerMember:
    """A trip participant as seen by the ledger."""
    id: str
    name: str = ""


@dataclass(frozen=True)
class LedgerExpense:
    """
    A single immutable payment.

    amount is an integer number of minor currency units. split_between is
    ordered; the order decides who absorbs the rounding remainder.
    """
    id: str
    paid_by: str
    amount: int
    split_between: Tuple[str, ...]
    trip_id: str = ""
    description: str = ""

    def __post_init__(self):
        # Accept any sequence but store an immutable tuple
        object.__setattr__(self, "split_between", tuple(self.split_between))


def validate_expense(expense, member_ids) -> None:
    """
    Check a single expense against the trip's member ids.

    Raises InvalidAmount if the amount is not a positive integer that fits
    a BIGINT column, and
    InvalidSplit if the split list is empty, has duplicates, or names
    someone outside the trip (the payer included).
    """
    amount = expense.amount
    # bool is an int subclass; True is not a valid amount
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidAmount(
            f"Expense {expense.id}: amount must be an integer number of minor units, got {amount!r}"
        )
    if amount <= 0:
        raise InvalidAmount(f"Expense {expense.id}: amount must be positive, got {amount}")
    if amount > MAX_AMOUNT:
        raise InvalidAmount(f"Expense {expense.id}: amount exceeds the maximum of {MAX_AMOUNT}")

    split_between = list(expense.split_between)
    if not split_between:
        raise InvalidSplit(f"Expense {expense.id}: split list is empty")

    seen = set()
    for member_id in split_between:
        if member_id in seen:
            raise InvalidSplit(f"Expense {expense.id}: member {member_id} appears more than once in split")
        seen.add(member_id)
        if member_id not in member_ids:
            raise InvalidSplit(f"Expense {expense.id}: member {member_id} is not in this trip")

    if expense.paid_by not in member_ids:
        raise InvalidSplit(f"Expense {expense.id}: payer {expense.paid_by} is not in this trip")


def expense_shares(expense) -> List[Tuple[str, int]]:
    """(member id, share) pairs for an expense, in split order."""
    split_between = list(expense.split_between)
    shares = split_equally(expense.amount, len(split_between))
    return list(zip(split_between, shares))


def compute_balances(members: Iterable, expenses: Iterable) -> Dict[str, int]:
    """
    Compute each member's net balance in minor units.

    Positive means the member is owed money, negative means they owe.
    Every member appears in the result (zero if untouched), in the order
    given. The balances always sum to exactly zero.
    """
    balances: Dict[str, int] = {member.id: 0 for member in members}

    for expense in expenses:
        validate_expense(expense, balances)

        balances[expense.paid_by] += expense.amount
        for member_id, share in expense_shares(expense):
            balances[member_id] -= share

    return balances


def total_spent(expenses: Sequence) -> int:
    """Sum of expense amounts in minor units."""
    return sum(expense.amount for expense in expenses)


@dataclass
class TripLedger:
    """Consistent snapshot of one trip's members and expenses."""
    trip_id: str
    members: List[LedgerMember] = field(default_factory=list)
    expenses: List[LedgerExpense] = field(default_factory=list)

    @property
    def member_names(self) -> Dict[str, str]:
        return {member.id: member.name for member in self.members}

    def balances(self) -> Dict[str, int]:
        return compute_balances(self.members, self.expenses)
