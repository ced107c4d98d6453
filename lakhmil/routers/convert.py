from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, Request

from lakhmil.core.config import Settings
from lakhmil.db.dal import Database
from lakhmil.models.constants import DIRECTION_LABELS
from lakhmil.models.conversion import ConvertIn, ConvertOut, FormatOut, ParseOut
from lakhmil.services.conversion import convert_detailed
from lakhmil.services.formatting import format_inr, format_usd, value_kind
from lakhmil.services.history import record_conversion
from lakhmil.services.parsing import parse_amount
from lakhmil.services.rates.cache_service import RateCacheService

router = APIRouter(prefix="/convert", tags=["convert"])

logger = logging.getLogger("lakhmil.convert")


def get_settings_dep(request: Request) -> Settings:
    return request.app.state.settings


def get_db(request: Request) -> Database:
    return Database(request.app.state.settings.db_path)


def get_rate_service(request: Request) -> RateCacheService:
    return request.app.state.rate_service


@router.post("", response_model=ConvertOut, summary="Convert an amount between INR and USD")
def convert_amount(
    payload: ConvertIn,
    db: Database = Depends(get_db),
    svc: RateCacheService = Depends(get_rate_service),
    settings: Settings = Depends(get_settings_dep),
):
    rate = svc.get_rate()
    outcome = convert_detailed(payload.input, payload.direction, payload.rounded, rate)
    entry = record_conversion(db, outcome, settings.history_limit)
    if not outcome.ok:
        logger.info(
            "conversion rejected (rate available: %s, amount: %s)",
            rate is not None,
            outcome.amount,
        )
    return ConvertOut(
        input=payload.input,
        direction=outcome.direction,
        direction_label=DIRECTION_LABELS[outcome.direction],
        rounded=payload.rounded,
        rate=rate,
        ok=outcome.ok,
        kind=value_kind(outcome.result),
        result=outcome.result,
        history_entry=entry,
    )


@router.get("/parse", response_model=ParseOut, summary="Parse a lakh/crore/K/M/B amount")
async def parse(input: str = Query("", max_length=256, description="e.g. 1Cr, 50L, 2.3B")):
    return ParseOut(input=input, amount=parse_amount(input))


@router.get("/format", response_model=FormatOut, summary="Format an amount in INR or USD notation")
async def format_value(
    value: float = Query(..., ge=0, allow_inf_nan=False),
    currency: str = Query("INR", pattern="^(INR|USD|inr|usd)$"),
    rounded: bool = Query(True),
):
    currency = currency.upper()
    formatter = format_inr if currency == "INR" else format_usd
    result = formatter(value, rounded)
    return FormatOut(
        value=value,
        currency=currency,
        rounded=rounded,
        kind=value_kind(result),
        result=result,
    )
