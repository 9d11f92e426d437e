from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True)
class Participant:
    id: str
    name: str


@dataclass(slots=True)
class Expense:
    id: str
    payer_id: str
    amount: float
    description: str
    timestamp: datetime


@dataclass(slots=True)
class Balance:
    participant_id: str
    # > 0: owed by the group, < 0: owes the group
    amount: float


@dataclass(slots=True)
class Settlement:
    from_participant: str
    to_participant: str
    amount: float
