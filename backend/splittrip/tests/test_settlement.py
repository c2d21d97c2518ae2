"""
Tests for settlement planning.
"""
import random
import pytest
from splittrip.core.exceptions import UnbalancedLedger
from splittrip.services.ledger_service import LedgerExpense, LedgerMember, compute_balances
from splittrip.services.settlement_service import SettlementInstruction, compute_settlement


def apply_transfers(balances, instructions):
    result = dict(balances)
    for instruction in instructions:
        result[instruction.from_member_id] += instruction.amount
        result[instruction.to_member_id] -= instruction.amount
    return result


def test_single_creditor_two_debtors():
    instructions = compute_settlement({"A": 600, "B": -300, "C": -300})
    assert instructions == [
        SettlementInstruction("B", "A", 300),
        SettlementInstruction("C", "A", 300),
    ]


def test_all_zero_needs_no_transfers():
    assert compute_settlement({"A": 0, "B": 0}) == []
    assert compute_settlement({}) == []


def test_largest_creditor_and_debtor_matched_first():
    instructions = compute_settlement({"A": 500, "B": 100, "C": -400, "D": -200})
    assert instructions == [
        SettlementInstruction("C", "A", 400),
        SettlementInstruction("D", "A", 100),
        SettlementInstruction("D", "B", 100),
    ]


def test_ties_broken_by_member_id():
    balances = {"zed": 100, "amy": 100, "mia": -100, "bob": -100}
    instructions = compute_settlement(balances)
    assert instructions == [
        SettlementInstruction("bob", "amy", 100),
        SettlementInstruction("mia", "zed", 100),
    ]
    # Insertion order of the mapping does not matter
    reordered = dict(reversed(list(balances.items())))
    assert compute_settlement(reordered) == instructions


def test_unbalanced_input_is_rejected():
    with pytest.raises(UnbalancedLedger):
        compute_settlement({"A": 100, "B": -99})


def test_amounts_are_positive():
    instructions = compute_settlement({"A": 3, "B": -1, "C": -1, "D": -1})
    assert all(i.amount > 0 for i in instructions)


def test_random_ledgers_settle_to_zero_within_bound():
    rng = random.Random(42)
    member_ids = ["m%d" % i for i in range(8)]
    members = [LedgerMember(mid) for mid in member_ids]

    for _ in range(100):
        expenses = [
            LedgerExpense(
                id=f"e{i}",
                paid_by=rng.choice(member_ids),
                amount=rng.randint(1, 50000),
                split_between=rng.sample(member_ids, rng.randint(1, len(member_ids)))
            )
            for i in range(rng.randint(1, 12))
        ]
        balances = compute_balances(members, expenses)
        instructions = compute_settlement(balances)

        settled = apply_transfers(balances, instructions)
        assert all(value == 0 for value in settled.values())

        nonzero = sum(1 for value in balances.values() if value != 0)
        assert len(instructions) <= max(nonzero - 1, 0)

        assert compute_settlement(balances) == instructions


def test_remainder_ledger_settles_exactly():
    members = [LedgerMember("A"), LedgerMember("B"), LedgerMember("C")]
    balances = compute_balances(members, [LedgerExpense("e1", "A", 100, ("A", "B", "C"))])
    instructions = compute_settlement(balances)
    assert instructions == [
        SettlementInstruction("B", "A", 33),
        SettlementInstruction("C", "A", 33),
    ]
