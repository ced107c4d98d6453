"""Database schema DDL definitions and initialization utilities.

Tables:
  - conversion_history: past successful conversions, newest kept, capped
  - metadata: key/value store (schema version)
"""

from __future__ import annotations
import sqlite3
from typing import Sequence
from pathlib import Path

BASIC_UTC_NOW = "strftime('%Y-%m-%dT%H:%M:%fZ','now')"

CONVERSION_HISTORY_DDL = f"""
CREATE TABLE IF NOT EXISTS conversion_history (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    timestamp_ms INTEGER NOT NULL, -- epoch milliseconds
    input TEXT NOT NULL, -- raw text as typed, e.g. '1.5Cr'
    result TEXT NOT NULL, -- display text, e.g. '18.00K'
    direction TEXT NOT NULL CHECK (direction IN ('INR_TO_USD','USD_TO_INR')),
    date TEXT NOT NULL, -- ISO date (YYYY-MM-DD, UTC)
    created_at TEXT NOT NULL DEFAULT ({BASIC_UTC_NOW})
);
"""

METADATA_DDL = f"""
CREATE TABLE IF NOT EXISTS metadata (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TEXT NOT NULL DEFAULT ({BASIC_UTC_NOW})
);
"""

DDL_ORDER: Sequence[str] = (
    CONVERSION_HISTORY_DDL,
    METADATA_DDL,
)


def init_db(path: Path) -> None:
    """Create all tables idempotently.

    Parameters
    ----------
    path: Path to SQLite database file.
    """
    conn = sqlite3.connect(path)
    try:
        cur = conn.cursor()
        for ddl in DDL_ORDER:
            cur.execute(ddl)
        conn.commit()
    finally:
        conn.close()
