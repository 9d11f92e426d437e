from datetime import datetime, timezone

import pytest

from partysplit.models import Expense, Participant
from partysplit.services.balances import calculate_balances
from partysplit.services.settlement import calculate_settlements

NOW = datetime(2024, 5, 10, 18, 0, tzinfo=timezone.utc)


def _people(*ids: str) -> list[Participant]:
    return [Participant(id=pid, name=pid.upper()) for pid in ids]


def _expense(eid: str, payer_id: str, amount: float) -> Expense:
    return Expense(id=eid, payer_id=payer_id, amount=amount, description=eid, timestamp=NOW)


def test_calculate_balances_equal_split():
    participants = _people("a", "b", "c", "d")
    expenses = [_expense("e1", "a", 100.0), _expense("e2", "b", 70.0)]

    balances = calculate_balances(participants, expenses)

    assert [b.participant_id for b in balances] == ["a", "b", "c", "d"]
    assert [b.amount for b in balances] == pytest.approx([57.5, 27.5, -42.5, -42.5])


def test_calculate_balances_sum_to_zero():
    participants = _people("a", "b", "c")
    expenses = [
        _expense("e1", "a", 10.0),
        _expense("e2", "b", 33.33),
        _expense("e3", "c", 0.01),
        _expense("e4", "a", 19.99),
    ]

    balances = calculate_balances(participants, expenses)

    assert abs(sum(b.amount for b in balances)) < 0.01


def test_calculate_balances_no_participants():
    assert calculate_balances([], [_expense("e1", "a", 10.0)]) == []


def test_calculate_balances_no_expenses():
    balances = calculate_balances(_people("a", "b"), [])
    assert [b.amount for b in balances] == [0.0, 0.0]


def test_calculate_balances_single_participant():
    balances = calculate_balances(_people("a"), [_expense("e1", "a", 42.0), _expense("e2", "a", 8.0)])
    assert len(balances) == 1
    assert balances[0].amount == pytest.approx(0.0)
    assert calculate_settlements(balances) == []


def test_calculate_balances_dangling_payer_counts_towards_share():
    participants = _people("a", "b")
    expenses = [_expense("e1", "a", 20.0), _expense("e2", "ghost", 40.0)]

    balances = calculate_balances(participants, expenses)

    # share is 60 / 2 = 30, the ghost's 40 is credited to nobody
    assert [b.amount for b in balances] == pytest.approx([-10.0, -30.0])


def test_calculate_balances_is_repeatable():
    participants = _people("a", "b", "c")
    expenses = [_expense("e1", "b", 12.34), _expense("e2", "c", 5.0)]

    first = calculate_balances(participants, expenses)
    second = calculate_balances(participants, expenses)

    assert first == second
