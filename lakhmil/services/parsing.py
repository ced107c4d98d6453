"""Flexible amount parser.

Turns free-form user text such as ``"1.5Cr"``, ``"50 L"``, ``"2.3B"``,
``"10k"`` or ``"300000"`` into a plain amount in base units (rupees or
dollars). Parsing never fails outward: anything unreadable yields ``0.0``.

Suffix rules (checked against the end of the normalized text, first match
wins):

    CR                  -> 1e7   (crore)
    L / LAKH            -> 1e5   (lakh)
    B / BIL / BILLION   -> 1e9
    M / MIL / MILLION   -> 1e6
    K / THOUSAND        -> 1e3

Only the first occurrence of a suffix token is removed, so inputs that end
in ``L`` are always read as lakh, including ``"100MIL"`` (100 lakh). That
quirk is intentional and kept stable for existing users.
"""

from __future__ import annotations

import math
import re
from typing import Callable, Tuple

CRORE = 1e7
LAKH = 1e5
BILLION = 1e9
MILLION = 1e6
THOUSAND = 1e3

_WHITESPACE_RE = re.compile(r"\s")
_BILLION_RE = re.compile(r"B(IL(LION)?)?")
_MILLION_RE = re.compile(r"M(IL(LION)?)?")
_THOUSAND_RE = re.compile(r"K|THOUSAND")
# Leading float literal: sign, ASCII digits with optional fraction, optional exponent.
_LEADING_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def _strip_lakh(text: str) -> str:
    return text.replace("L", "", 1).replace("LAKH", "", 1)


# (accepted endings, multiplier, stripper) in priority order
_SUFFIX_RULES: Tuple[Tuple[Tuple[str, ...], float, Callable[[str], str]], ...] = (
    (("CR",), CRORE, lambda t: t.replace("CR", "", 1)),
    (("L", "LAKH"), LAKH, _strip_lakh),
    (("B", "BIL", "BILLION"), BILLION, lambda t: _BILLION_RE.sub("", t, count=1)),
    (("M", "MIL", "MILLION"), MILLION, lambda t: _MILLION_RE.sub("", t, count=1)),
    (("K", "THOUSAND"), THOUSAND, lambda t: _THOUSAND_RE.sub("", t, count=1)),
)


def normalize(raw: str) -> str:
    """Drop all whitespace and uppercase."""
    return _WHITESPACE_RE.sub("", raw or "").upper()


def split_suffix(text: str) -> Tuple[str, float]:
    """Return ``(number_text, multiplier)`` for already normalized text."""
    for endings, multiplier, strip in _SUFFIX_RULES:
        if text.endswith(endings):
            return strip(text), multiplier
    return text, 1.0


def parse_leading_float(text: str) -> float | None:
    """Parse the numeric prefix of ``text``; ``None`` when there is none."""
    match = _LEADING_FLOAT_RE.match(text)
    if not match:
        return None
    return float(match.group(0))


def parse_amount(raw: str) -> float:
    """Parse ``raw`` into an amount in base units, ``0.0`` when unreadable.

    Negative and non-finite numbers (``"-5L"``, ``"1E400"``) are treated as
    unreadable so the result is always a finite value >= 0.
    """
    number_text, multiplier = split_suffix(normalize(raw))
    number = parse_leading_float(number_text)
    if number is None or not math.isfinite(number) or number <= 0:
        return 0.0
    amount = number * multiplier
    if not math.isfinite(amount):
        return 0.0
    return amount
