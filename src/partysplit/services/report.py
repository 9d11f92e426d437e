from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from partysplit.config import get_settings
from partysplit.models import Expense, Participant, Settlement
from partysplit.services.balances import paid_by, total_spent


@dataclass(slots=True)
class ReportSummary:
    total_amount: float
    per_person: float
    highest_spender: Optional[str]
    participant_count: int


@dataclass(slots=True)
class SpendingShare:
    name: str
    value: float


def _names(participants: Sequence[Participant]) -> dict[str, str]:
    return {participant.id: participant.name for participant in participants}


def highest_spender(participants: Sequence[Participant], expenses: Sequence[Expense]) -> Optional[str]:
    totals: dict[str, float] = {}
    for expense in expenses:
        totals[expense.payer_id] = totals.get(expense.payer_id, 0.0) + expense.amount

    top_id: Optional[str] = None
    top_amount = -1.0
    for payer_id, amount in totals.items():
        if amount > top_amount:
            top_id, top_amount = payer_id, amount

    if top_id is None:
        return None
    return _names(participants).get(top_id)


def summarize(participants: Sequence[Participant], expenses: Sequence[Expense]) -> ReportSummary:
    total = total_spent(expenses)
    return ReportSummary(
        total_amount=total,
        per_person=total / len(participants) if participants else 0.0,
        highest_spender=highest_spender(participants, expenses),
        participant_count=len(participants),
    )


def spending_breakdown(participants: Sequence[Participant], expenses: Sequence[Expense]) -> list[SpendingShare]:
    shares = [SpendingShare(name=p.name, value=paid_by(p.id, expenses)) for p in participants]
    return [share for share in shares if share.value > 0]


def format_settlement_report(
    participants: Sequence[Participant],
    expenses: Sequence[Expense],
    settlements: Sequence[Settlement],
    currency: Optional[str] = None,
) -> str:
    currency = get_settings().currency if currency is None else currency
    names = _names(participants)
    summary = summarize(participants, expenses)

    lines = [
        "PARTY SETTLEMENT REPORT",
        f"Total spent: {currency}{summary.total_amount:.2f}",
        f"Per person: {currency}{summary.per_person:.2f}",
        f"Top spender: {summary.highest_spender or '-'}",
        f"Participants: {summary.participant_count}",
        "",
    ]
    if not settlements:
        lines.append("All settled, no transfers needed.")
        return "\n".join(lines)

    lines.append("Transfers:")
    for settlement in settlements:
        payer = names.get(settlement.from_participant, settlement.from_participant)
        payee = names.get(settlement.to_participant, settlement.to_participant)
        lines.append(f"  {payer} → {payee}: {currency}{settlement.amount:.2f}")
    return "\n".join(lines)
