"""Conversion history helpers.

Only successful conversions are recorded; each entry keeps the input as the
user typed it, the displayed result, the direction label and the UTC date.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

from lakhmil.db.dal import Database
from lakhmil.models.constants import DIRECTION_LABELS, Direction
from lakhmil.models.history import HistoryEntry
from .conversion import ConversionOutcome
from .formatting import render


def _row_to_entry(row: dict) -> HistoryEntry:
    direction = Direction(row["direction"])
    return HistoryEntry(
        id=int(row["id"]),
        timestamp=int(row["timestamp_ms"]),
        input=row["input"],
        result=row["result"],
        date=row["date"],
        direction=direction,
        direction_label=DIRECTION_LABELS[direction],
    )


def record_conversion(
    db: Database,
    outcome: ConversionOutcome,
    limit: int,
    now: Optional[datetime] = None,
) -> Optional[HistoryEntry]:
    """Store ``outcome`` if it succeeded; returns the stored entry or None."""
    if not outcome.ok:
        return None
    now = now or datetime.now(timezone.utc)
    timestamp_ms = int(now.timestamp() * 1000)
    day = now.astimezone(timezone.utc).date().isoformat()
    result = render(outcome.result)
    entry_id = db.add_history_entry(
        timestamp_ms=timestamp_ms,
        input_text=outcome.raw,
        result=result,
        direction=outcome.direction.value,
        day=day,
        limit=limit,
    )
    return HistoryEntry(
        id=entry_id,
        timestamp=timestamp_ms,
        input=outcome.raw,
        result=result,
        date=day,
        direction=outcome.direction,
        direction_label=DIRECTION_LABELS[outcome.direction],
    )


def list_entries(db: Database, limit: Optional[int] = None) -> List[HistoryEntry]:
    return [_row_to_entry(r) for r in db.list_history(limit)]
