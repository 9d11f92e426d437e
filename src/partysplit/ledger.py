"""In-memory ledger of participants and expenses for a single party."""

from __future__ import annotations

import math
import uuid
from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

from partysplit.config import get_settings
from partysplit.logging import get_logger
from partysplit.models import Balance, Expense, Participant, Settlement
from partysplit.services.balances import calculate_balances
from partysplit.services.settlement import calculate_settlements


def _new_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:8]}"


class PartyLedger:
    def __init__(
        self,
        participants: Optional[Iterable[Participant]] = None,
        expenses: Optional[Iterable[Expense]] = None,
    ) -> None:
        self._participants: list[Participant] = list(participants or [])
        self._expenses: list[Expense] = list(expenses or [])  # add_expense prepends
        self._log = get_logger(__name__)

    @classmethod
    def demo(cls) -> PartyLedger:
        now = datetime.now(timezone.utc)
        participants = [
            Participant(id="p1", name="A"),
            Participant(id="p2", name="B"),
            Participant(id="p3", name="C"),
            Participant(id="p4", name="D"),
        ]
        expenses = [
            Expense(id="e1", payer_id="p1", amount=100.0, description="Dinner", timestamp=now - timedelta(seconds=10)),
            Expense(id="e2", payer_id="p2", amount=70.0, description="Drinks", timestamp=now - timedelta(seconds=5)),
        ]
        return cls(participants, expenses)

    @property
    def participants(self) -> list[Participant]:
        return list(self._participants)

    @property
    def expenses(self) -> list[Expense]:
        return list(self._expenses)

    def get_participant(self, participant_id: str) -> Optional[Participant]:
        for participant in self._participants:
            if participant.id == participant_id:
                return participant
        return None

    def add_participant(self, name: str) -> Participant:
        clean = name.strip()
        if not clean:
            raise ValueError("Participant name must not be empty")

        participant = Participant(id=_new_id("p"), name=clean)
        self._participants.append(participant)
        self._log.info("ledger.participant.added", participant_id=participant.id)
        return participant

    def remove_participant(self, participant_id: str) -> None:
        """Drop a participant together with every expense they paid."""
        before = len(self._expenses)
        self._participants = [p for p in self._participants if p.id != participant_id]
        self._expenses = [e for e in self._expenses if e.payer_id != participant_id]
        self._log.info(
            "ledger.participant.removed",
            participant_id=participant_id,
            expenses_removed=before - len(self._expenses),
        )

    def add_expense(self, payer_id: str, amount: float, description: str = "") -> Expense:
        if not math.isfinite(amount) or amount <= 0:
            raise ValueError(f"Expense amount must be a positive number, got {amount!r}")
        if self.get_participant(payer_id) is None:
            raise ValueError(f"Unknown payer: {payer_id}")

        expense = Expense(
            id=_new_id("e"),
            payer_id=payer_id,
            amount=amount,
            description=description.strip() or get_settings().default_expense_description,
            timestamp=datetime.now(timezone.utc),
        )
        self._expenses.insert(0, expense)
        self._log.info("ledger.expense.added", expense_id=expense.id, payer_id=payer_id, amount=amount)
        return expense

    def delete_expense(self, expense_id: str) -> None:
        self._expenses = [e for e in self._expenses if e.id != expense_id]
        self._log.info("ledger.expense.deleted", expense_id=expense_id)

    def balances(self) -> list[Balance]:
        return calculate_balances(self._participants, self._expenses)

    def settlements(self) -> list[Settlement]:
        return calculate_settlements(self.balances())
