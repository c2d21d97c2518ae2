"""
Settlement planning: turn net balances into pairwise transfers.
"""
import heapq
from dataclasses import dataclass
from typing import List, Mapping
from splittrip.core.exceptions import UnbalancedLedger


@dataclass(frozen=True)
class SettlementInstruction:
    """One member pays another. amount is positive, in minor units."""
    from_member_id: str
    to_member_id: str
    amount: int


def compute_settlement(balances: Mapping[str, int]) -> List[SettlementInstruction]:
    """
    Minimize the number of transfers needed to settle debts.

    Greedy: repeatedly match the largest creditor with the largest debtor
    and transfer the smaller of the two amounts. Equal amounts are ordered
    by member id. Emits at most n - 1 instructions for n members with a
    nonzero balance.
    """
    total = sum(balances.values())
    if total != 0:
        raise UnbalancedLedger(f"Balances sum to {total}, expected 0")

    # Heap entries are (-outstanding amount, member id): largest first, then by id
    creditors = [(-balance, member_id) for member_id, balance in balances.items() if balance > 0]
    debtors = [(balance, member_id) for member_id, balance in balances.items() if balance < 0]
    heapq.heapify(creditors)
    heapq.heapify(debtors)

    instructions: List[SettlementInstruction] = []
    while creditors and debtors:
        neg_credit, creditor_id = heapq.heappop(creditors)
        neg_debt, debtor_id = heapq.heappop(debtors)
        credit, debt = -neg_credit, -neg_debt

        transfer = min(credit, debt)
        if transfer > 0:
            instructions.append(SettlementInstruction(debtor_id, creditor_id, transfer))

        credit -= transfer
        debt -= transfer
        if credit:
            heapq.heappush(creditors, (-credit, creditor_id))
        if debt:
            heapq.heappush(debtors, (-debt, debtor_id))

    return instructions
