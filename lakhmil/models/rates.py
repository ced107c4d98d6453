from __future__ import annotations
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class RateOut(BaseModel):
    provider: str
    base_currency: str
    quote_currency: str
    rate: float = Field(..., gt=0, description="USD per 1 INR")
    inverse: float = Field(..., gt=0, description="INR per 1 USD")
    fetched_at: Optional[datetime] = None
