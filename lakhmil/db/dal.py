"""Data Access Layer for the conversion history.

Responsibilities
----------------
- Record successful conversions, newest first.
- Enforce the history cap on every insert so the table never grows past it.
- List and clear entries.
"""

from __future__ import annotations

from pathlib import Path
import sqlite3
from typing import Any, Dict, List


class Database:
    def __init__(self, db_path: Path):
        self.db_path = db_path

    # ------------------------------------------------------------------
    # Connection helpers
    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    # ------------------------------------------------------------------
    # History
    def add_history_entry(
        self,
        *,
        timestamp_ms: int,
        input_text: str,
        result: str,
        direction: str,
        day: str,
        limit: int,
    ) -> int:
        """Insert an entry, trim to the newest ``limit`` rows, return its id."""
        if limit < 1:
            raise ValueError("history limit must be at least 1")
        with self._connect() as conn:
            cur = conn.cursor()
            cur.execute(
                """
                INSERT INTO conversion_history (timestamp_ms, input, result, direction, date)
                VALUES (?, ?, ?, ?, ?)
                """,
                (timestamp_ms, input_text, result, direction, day),
            )
            entry_id = int(cur.lastrowid)
            cur.execute(
                """
                DELETE FROM conversion_history
                WHERE id NOT IN (
                    SELECT id FROM conversion_history ORDER BY id DESC LIMIT ?
                )
                """,
                (limit,),
            )
            conn.commit()
            return entry_id

    def list_history(self, limit: int | None = None) -> List[Dict[str, Any]]:
        sql = "SELECT * FROM conversion_history ORDER BY id DESC"
        params: List[Any] = []
        if limit is not None:
            sql += " LIMIT ?"
            params.append(limit)
        with self._connect() as conn:
            cur = conn.cursor()
            cur.execute(sql, params)
            return [dict(r) for r in cur.fetchall()]

    def clear_history(self) -> int:
        """Delete every entry; return how many were removed."""
        with self._connect() as conn:
            cur = conn.cursor()
            cur.execute("DELETE FROM conversion_history")
            removed = cur.rowcount
            conn.commit()
            return int(removed)
