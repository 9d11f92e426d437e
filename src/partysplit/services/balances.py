from __future__ import annotations

from typing import Iterable, Sequence

from partysplit.models import Balance, Expense, Participant


def total_spent(expenses: Iterable[Expense]) -> float:
    return sum((expense.amount for expense in expenses), 0.0)


def paid_by(participant_id: str, expenses: Iterable[Expense]) -> float:
    return sum((expense.amount for expense in expenses if expense.payer_id == participant_id), 0.0)


def calculate_balances(participants: Sequence[Participant], expenses: Sequence[Expense]) -> list[Balance]:
    """Net position of every participant under an equal split of all expenses.

    Expenses whose payer is not among ``participants`` still count towards the
    total (and therefore the share) but are credited to nobody.
    """
    if not participants:
        return []

    share_per_person = total_spent(expenses) / len(participants)

    return [
        Balance(
            participant_id=participant.id,
            amount=paid_by(participant.id, expenses) - share_per_person,
        )
        for participant in participants
    ]
