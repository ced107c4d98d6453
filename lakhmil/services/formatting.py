"""Magnitude formatters for INR (lakh/crore) and USD (K/M/B) notation."""

from __future__ import annotations

import math
from typing import Sequence, Tuple, Union

from .money import number_text, to_fixed2

FormattedValue = Union[str, float]

# (threshold, divisor, suffix), evaluated top-down
INR_BUCKETS: Sequence[Tuple[float, float, str]] = (
    (1e7, 1e7, " Cr"),
    (1e5, 1e5, " L"),
)
USD_BUCKETS: Sequence[Tuple[float, float, str]] = (
    (1e9, 1e9, "B"),
    (1e6, 1e6, "M"),
    (1e3, 1e3, "K"),
)


def _format(value: float, rounded: bool, buckets: Sequence[Tuple[float, float, str]]) -> FormattedValue:
    value = float(value)
    # negative, NaN and infinite values are read as zero (also folds -0.0)
    if not math.isfinite(value) or value <= 0:
        value = 0.0
    for threshold, divisor, suffix in buckets:
        if value >= threshold:
            scaled = value / divisor
            if rounded:
                return to_fixed2(scaled) + suffix
            return number_text(scaled) + suffix
    if rounded:
        return to_fixed2(value)
    return value


def format_inr(value: float, rounded: bool = True) -> FormattedValue:
    """Format a rupee amount as crore / lakh.

    ``rounded=False`` returns the bare ``float`` below one lakh and a string
    (``"1.5 Cr"``) otherwise.
    """
    return _format(value, rounded, INR_BUCKETS)


def format_usd(value: float, rounded: bool = True) -> FormattedValue:
    """Format a dollar amount as billion / million / thousand."""
    return _format(value, rounded, USD_BUCKETS)


def value_kind(value: FormattedValue) -> str:
    """Tag a formatter result: ``"string"`` or ``"number"``."""
    return "string" if isinstance(value, str) else "number"


def render(value: FormattedValue) -> str:
    """Display text for a formatter result."""
    if isinstance(value, str):
        return value
    return number_text(value)
