from __future__ import annotations

from typing import Optional, Protocol, Sequence

from partysplit.config import get_settings
from partysplit.logging import get_logger
from partysplit.models import Expense, Participant


class TextGenerator(Protocol):
    async def generate(self, prompt: str) -> str: ...


def build_insight_prompt(participants: Sequence[Participant], expenses: Sequence[Expense]) -> str:
    names = {participant.id: participant.name for participant in participants}
    summary = "\n".join(
        f"{names.get(expense.payer_id, 'Unknown')} paid {expense.amount:g} for {expense.description}"
        for expense in expenses
    )
    return f"Based on the party expenses: {summary}, provide a brief 3-bullet summary."


async def get_expense_insights(
    generator: Optional[TextGenerator],
    participants: Sequence[Participant],
    expenses: Sequence[Expense],
) -> str:
    """Free-form spending summary; falls back to a placeholder instead of raising."""
    settings = get_settings()
    if generator is None:
        return settings.insights_unconfigured_message

    log = get_logger(__name__)
    prompt = build_insight_prompt(participants, expenses)
    try:
        text = await generator.generate(prompt)
    except Exception:
        log.exception("insights.failed", expenses=len(expenses))
        return settings.insights_failure_message

    log.info("insights.generated", expenses=len(expenses))
    return text or settings.insights_failure_message
