from partysplit.models import Balance, Expense, Participant, Settlement
from partysplit.services.balances import calculate_balances
from partysplit.services.settlement import calculate_settlements

__all__ = [
    "Balance",
    "Expense",
    "Participant",
    "Settlement",
    "calculate_balances",
    "calculate_settlements",
]
