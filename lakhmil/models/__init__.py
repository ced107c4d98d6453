"""Pydantic domain models for the lakh/million converter."""

from .constants import (
    DIRECTION_LABELS,
    INVALID_INPUT,
    Direction,
)  # re-export
from .conversion import ConvertIn, ConvertOut, FormatOut, ParseOut
from .history import HistoryEntry
from .rates import RateOut

__all__ = [
    "DIRECTION_LABELS",
    "INVALID_INPUT",
    "Direction",
    "ConvertIn",
    "ConvertOut",
    "FormatOut",
    "ParseOut",
    "HistoryEntry",
    "RateOut",
]
