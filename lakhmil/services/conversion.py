from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Union

from lakhmil.models.constants import Direction, INVALID_INPUT
from .formatting import FormattedValue, format_inr, format_usd
from .parsing import parse_amount

"""INR <-> USD conversion.

Composes the amount parser, a caller-supplied rate and the magnitude
formatters. The rate is the USD value of one rupee; it is never fetched
here, so every function in this module is pure and safe to call from any
thread.

Failure is a return value: a missing/unusable rate or a zero amount gives
the ``INVALID_INPUT`` string.
"""


@dataclass(frozen=True)
class ConversionOutcome:
    raw: str
    direction: Direction
    rounded: bool
    rate: Optional[float]
    amount: float
    converted: Optional[float]
    result: FormattedValue

    @property
    def ok(self) -> bool:
        return self.converted is not None


def is_usable_rate(rate: Optional[float]) -> bool:
    """A rate must be a positive, finite number."""
    if isinstance(rate, bool) or not isinstance(rate, (int, float)):
        return False
    return math.isfinite(rate) and rate > 0


def coerce_direction(direction: Union[Direction, str, bool]) -> Direction:
    """``True`` or ``"INR_TO_USD"`` mean INR->USD; anything else is USD->INR."""
    if isinstance(direction, bool):
        return Direction.INR_TO_USD if direction else Direction.USD_TO_INR
    if direction == Direction.INR_TO_USD.value:
        return Direction.INR_TO_USD
    return Direction.USD_TO_INR


def convert_detailed(
    raw: str, direction: Direction, rounded: bool, rate: Optional[float]
) -> ConversionOutcome:
    direction = coerce_direction(direction)
    amount = parse_amount(raw)
    if not is_usable_rate(rate) or amount == 0:
        return ConversionOutcome(
            raw=raw,
            direction=direction,
            rounded=rounded,
            rate=rate,
            amount=amount,
            converted=None,
            result=INVALID_INPUT,
        )
    rate = float(rate)  # type: ignore[arg-type]
    if direction is Direction.INR_TO_USD:
        converted = amount * rate
        result = format_usd(converted, rounded)
    else:
        converted = amount / rate
        result = format_inr(converted, rounded)
    return ConversionOutcome(
        raw=raw,
        direction=direction,
        rounded=rounded,
        rate=rate,
        amount=amount,
        converted=converted,
        result=result,
    )


def convert(
    raw: str, direction: Direction, rounded: bool, rate: Optional[float]
) -> FormattedValue:
    """Convert ``raw`` in the given direction; ``"Invalid input"`` on failure."""
    return convert_detailed(raw, direction, rounded, rate).result
