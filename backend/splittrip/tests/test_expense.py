"""
Tests for expense, balance and settlement endpoints.
"""


def add_expense(client, trip_id, headers, **payload):
    return client.post(f"/api/expenses/{trip_id}", json=payload, headers=headers)


def test_create_expense(client, trip_with_members):
    """Test expense creation keeps split order and defaults payer."""
    trip, users = trip_with_members
    alice_id, alice = users["Alice"]
    bob_id, _ = users["Bob"]
    carol_id, _ = users["Carol"]

    response = add_expense(
        client, trip["id"], alice,
        amount=900, description="Dinner", split_between=[carol_id, alice_id, bob_id]
    )
    assert response.status_code == 201
    expense = response.json()
    assert expense["paid_by"] == alice_id
    assert expense["paid_by_name"] == "Alice"
    assert expense["split_between"] == [carol_id, alice_id, bob_id]

    listed = client.get(f"/api/expenses/{trip['id']}", headers=alice).json()
    assert [e["id"] for e in listed] == [expense["id"]]
    assert listed[0]["split_between"] == [carol_id, alice_id, bob_id]


def test_expense_paid_by_other_member(client, trip_with_members):
    trip, users = trip_with_members
    _, alice = users["Alice"]
    bob_id, _ = users["Bob"]

    response = add_expense(client, trip["id"], alice, paid_by=bob_id, amount=100, split_between=[bob_id])
    assert response.status_code == 201
    assert response.json()["paid_by"] == bob_id


def test_empty_split_rejected(client, trip_with_members):
    trip, users = trip_with_members
    _, alice = users["Alice"]

    response = add_expense(client, trip["id"], alice, amount=100, split_between=[])
    assert response.status_code == 400
    assert response.json()["type"] == "InvalidSplit"


def test_split_with_non_member_rejected(client, trip_with_members, make_guest):
    trip, users = trip_with_members
    alice_id, alice = users["Alice"]
    outsider_id, _ = make_guest("Outsider")

    response = add_expense(client, trip["id"], alice, amount=100, split_between=[alice_id, outsider_id])
    assert response.status_code == 400
    assert response.json()["type"] == "InvalidSplit"

    response = add_expense(client, trip["id"], alice, paid_by=outsider_id, amount=100, split_between=[alice_id])
    assert response.status_code == 400


def test_duplicate_split_rejected(client, trip_with_members):
    trip, users = trip_with_members
    alice_id, alice = users["Alice"]

    response = add_expense(client, trip["id"], alice, amount=100, split_between=[alice_id, alice_id])
    assert response.status_code == 400
    assert response.json()["type"] == "InvalidSplit"


def test_non_positive_amount_rejected(client, trip_with_members):
    trip, users = trip_with_members
    alice_id, alice = users["Alice"]

    for amount in (0, -50):
        response = add_expense(client, trip["id"], alice, amount=amount, split_between=[alice_id])
        assert response.status_code == 400
        assert response.json()["type"] == "InvalidAmount"

    assert client.get(f"/api/expenses/{trip['id']}", headers=alice).json() == []


def test_fractional_amount_rejected_by_validation(client, trip_with_members):
    trip, users = trip_with_members
    alice_id, alice = users["Alice"]

    response = add_expense(client, trip["id"], alice, amount=10.5, split_between=[alice_id])
    assert response.status_code == 422


def test_non_member_cannot_add_expense(client, trip_with_members, make_guest):
    trip, _ = trip_with_members
    outsider_id, outsider = make_guest("Outsider")

    response = add_expense(client, trip["id"], outsider, amount=100, split_between=[outsider_id])
    assert response.status_code == 403


def test_completed_trip_rejects_expenses_but_keeps_balances(client, trip_with_members):
    trip, users = trip_with_members
    alice_id, alice = users["Alice"]
    bob_id, _ = users["Bob"]

    add_expense(client, trip["id"], alice, amount=200, split_between=[alice_id, bob_id])
    client.post(f"/api/trips/{trip['id']}/complete", headers=alice)

    response = add_expense(client, trip["id"], alice, amount=200, split_between=[alice_id, bob_id])
    assert response.status_code == 409
    assert response.json()["type"] == "TripNotActive"

    balances = client.get(f"/api/settlement/{trip['id']}/balances", headers=alice).json()
    assert {b["member_id"]: b["balance"] for b in balances}[alice_id] == 100


def test_balances(client, trip_with_members):
    trip, users = trip_with_members
    alice_id, alice = users["Alice"]
    bob_id, _ = users["Bob"]
    carol_id, _ = users["Carol"]

    add_expense(client, trip["id"], alice, amount=100, split_between=[alice_id, bob_id, carol_id])

    response = client.get(f"/api/settlement/{trip['id']}/balances", headers=alice)
    assert response.status_code == 200
    assert response.json() == [
        {"member_id": alice_id, "member_name": "Alice", "balance": 66},
        {"member_id": bob_id, "member_name": "Bob", "balance": -33},
        {"member_id": carol_id, "member_name": "Carol", "balance": -33},
    ]


def test_balances_with_no_expenses(client, trip_with_members):
    trip, users = trip_with_members
    _, alice = users["Alice"]

    balances = client.get(f"/api/settlement/{trip['id']}/balances", headers=alice).json()
    assert len(balances) == 3
    assert all(b["balance"] == 0 for b in balances)

    result = client.get(f"/api/settlement/{trip['id']}/result", headers=alice).json()
    assert result["transfers"] == []
    assert "All settled up" in result["summary"]


def test_settlement_result(client, trip_with_members):
    trip, users = trip_with_members
    alice_id, alice = users["Alice"]
    bob_id, bob = users["Bob"]
    carol_id, _ = users["Carol"]

    add_expense(client, trip["id"], alice, amount=90000, description="Hotel",
                split_between=[alice_id, bob_id, carol_id])
    add_expense(client, trip["id"], bob, amount=30000, description="Taxi",
                split_between=[bob_id, carol_id])

    response = client.get(f"/api/settlement/{trip['id']}/result", headers=bob)
    assert response.status_code == 200
    result = response.json()

    assert result["total_expenses"] == 120000
    assert result["currency"] == "INR"
    balances = {b["member_id"]: b["balance"] for b in result["balances"]}
    assert balances == {alice_id: 60000, bob_id: -15000, carol_id: -45000}

    transfers = [(t["from_member_id"], t["to_member_id"], t["amount"]) for t in result["transfers"]]
    assert transfers == [(carol_id, alice_id, 45000), (bob_id, alice_id, 15000)]
    assert result["transfers"][0]["message"] == "Carol has to pay ₹450.00 to Alice"
    assert "Total expenses: ₹1,200.00 INR" in result["summary"]


def test_amount_too_large_for_storage_rejected(client, trip_with_members):
    trip, users = trip_with_members
    alice_id, alice = users["Alice"]

    response = add_expense(client, trip["id"], alice, amount=2 ** 63, split_between=[alice_id])
    assert response.status_code == 400
    assert response.json()["type"] == "InvalidAmount"
    assert client.get(f"/api/expenses/{trip['id']}", headers=alice).json() == []
