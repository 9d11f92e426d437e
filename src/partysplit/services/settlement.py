from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Sequence

from partysplit.models import Balance, Settlement

EPSILON = 0.01
CENT = Decimal("0.01")


def round_cents(amount: float) -> float:
    # exact half-cent ties go up: 42.125 -> 42.13
    return float(Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP))


def calculate_settlements(balances: Sequence[Balance]) -> list[Settlement]:
    """Greedy largest-first matching of debtors against creditors.

    Amounts within ``EPSILON`` of zero count as settled. Emitted amounts are
    rounded to cents; the running balances are not.
    """
    debtors: list[tuple[str, float]] = [
        (balance.participant_id, balance.amount) for balance in balances if balance.amount < -EPSILON
    ]
    creditors: list[tuple[str, float]] = [
        (balance.participant_id, balance.amount) for balance in balances if balance.amount > EPSILON
    ]

    debtors.sort(key=lambda x: x[1])
    creditors.sort(key=lambda x: x[1], reverse=True)

    settlements: list[Settlement] = []
    i, j = 0, 0

    while i < len(debtors) and j < len(creditors):
        debt_id, debt_amount = debtors[i]
        cred_id, cred_amount = creditors[j]

        transfer_amount = min(abs(debt_amount), cred_amount)
        settlements.append(
            Settlement(
                from_participant=debt_id,
                to_participant=cred_id,
                amount=round_cents(transfer_amount),
            )
        )

        debt_amount += transfer_amount
        cred_amount -= transfer_amount
        debtors[i] = (debt_id, debt_amount)
        creditors[j] = (cred_id, cred_amount)

        if abs(debt_amount) < EPSILON:
            i += 1
        if abs(cred_amount) < EPSILON:
            j += 1

    return settlements


def apply_settlements(balances: Iterable[Balance], settlements: Iterable[Settlement]) -> dict[str, float]:
    """Residual balance per participant once every transfer has been made."""
    residual: dict[str, float] = {}
    for balance in balances:
        residual[balance.participant_id] = residual.get(balance.participant_id, 0.0) + balance.amount
    for settlement in settlements:
        residual[settlement.from_participant] = residual.get(settlement.from_participant, 0.0) + settlement.amount
        residual[settlement.to_participant] = residual.get(settlement.to_participant, 0.0) - settlement.amount
    return residual
