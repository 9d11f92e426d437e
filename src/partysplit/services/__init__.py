from partysplit.services.balances import calculate_balances
from partysplit.services.settlement import EPSILON, apply_settlements, calculate_settlements

__all__ = ["EPSILON", "apply_settlements", "calculate_balances", "calculate_settlements"]
