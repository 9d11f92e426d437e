from __future__ import annotations

import math
import re

# leading currency symbol: "¥ 12.50", "$12", "€ 3,5"
CURRENCY_PREFIX = re.compile(r"^[^\d\s.,+-]+\s*")


def parse_amount(text: str) -> float:
    """
    Parse a user-entered expense amount.

    Accepted forms:
    - 12.5
    - 12,50
    - ¥ 100
    - $70

    Non-numeric, non-finite and non-positive values raise ValueError.
    """
    cleaned = CURRENCY_PREFIX.sub("", text.strip()).replace(",", ".")
    if not cleaned:
        raise ValueError(f"No amount in {text!r}")

    try:
        amount = float(cleaned)
    except ValueError as exc:
        raise ValueError(f"Not a number: {text!r}") from exc

    if not math.isfinite(amount):
        raise ValueError(f"Amount must be finite, got {text!r}")
    if amount <= 0:
        raise ValueError(f"Amount must be positive, got {text!r}")
    return amount
