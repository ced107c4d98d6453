from __future__ import annotations
from pydantic import BaseModel, Field
from .constants import Direction


class HistoryEntry(BaseModel):
    id: int
    timestamp: int = Field(..., description="Epoch milliseconds")
    input: str
    result: str
    date: str = Field(..., description="UTC date, YYYY-MM-DD")
    direction: Direction
    direction_label: str
