from __future__ import annotations
from typing import Literal, Optional, Union
from pydantic import BaseModel, Field

from .constants import Direction
from .history import HistoryEntry


class ConvertIn(BaseModel):
    input: str = Field(..., max_length=256, description="Amount as typed, e.g. '1.5Cr', '50L', '2.3B'")
    direction: Direction = Direction.INR_TO_USD
    rounded: bool = True


class ConvertOut(BaseModel):
    input: str
    direction: Direction
    direction_label: str
    rounded: bool
    rate: Optional[float] = Field(None, description="USD per 1 INR used for this conversion")
    ok: bool
    # "string" for formatted text, "number" for a bare unrounded amount
    kind: Literal["string", "number"]
    result: Union[str, float]
    history_entry: Optional[HistoryEntry] = None


class ParseOut(BaseModel):
    input: str
    amount: float


class FormatOut(BaseModel):
    value: float
    currency: Literal["INR", "USD"]
    rounded: bool
    kind: Literal["string", "number"]
    result: Union[str, float]
