"""Domain constants and enumerations."""

from enum import Enum
from typing import Dict


class Direction(str, Enum):
    INR_TO_USD = "INR_TO_USD"
    USD_TO_INR = "USD_TO_INR"


DIRECTION_LABELS: Dict[Direction, str] = {
    Direction.INR_TO_USD: "INR → USD",
    Direction.USD_TO_INR: "USD → INR",
}

# Returned (not raised) when a conversion cannot be performed
INVALID_INPUT = "Invalid input"
RATE_FETCH_ERROR = "Failed to fetch exchange rate."

DEFAULT_HISTORY_LIMIT = 15
