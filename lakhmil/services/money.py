"""Number-to-text helpers.

Centralized so the formatters, the API and the history store render amounts
identically.
"""

from __future__ import annotations
from decimal import Context, Decimal, ROUND_HALF_UP

# wide enough for every finite double written out in full
_WIDE = Context(prec=400)


def to_fixed2(value: float) -> str:
    """Render ``value`` with exactly two decimals.

    Rounds half-up on the exact binary value of the float, so ``1.005``
    (stored as 1.00499...) gives ``"1.00"`` while ``0.125`` gives ``"0.13"``.
    """
    return str(
        Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP, context=_WIDE)
    )


def number_text(value: float) -> str:
    """Shortest text form of ``value``; integral values drop the ``.0``."""
    value = float(value)
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)
