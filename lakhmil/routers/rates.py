from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request

from lakhmil.models.constants import RATE_FETCH_ERROR
from lakhmil.models.rates import RateOut
from lakhmil.services.rates.cache_service import RateCacheService, RateSnapshot

"""Rates router.

Endpoints:
    - GET /rates/current   -> cached INR->USD rate (fetched on first use)
    - POST /rates/refresh  -> force a refetch from the configured provider

Both answer 503 with "Failed to fetch exchange rate." when no rate is
available.
"""

router = APIRouter(prefix="/rates", tags=["rates"])


def get_rate_service(request: Request) -> RateCacheService:
    return request.app.state.rate_service


def _to_out(snap: RateSnapshot) -> RateOut:
    if snap.rate is None:
        raise HTTPException(status_code=503, detail=snap.error or RATE_FETCH_ERROR)
    return RateOut(
        provider=snap.provider,
        base_currency=snap.base_currency,
        quote_currency=snap.quote_currency,
        rate=snap.rate,
        inverse=1 / snap.rate,
        fetched_at=snap.fetched_at,
    )


@router.get("/current", response_model=RateOut, summary="Current INR->USD rate")
def current_rate(svc: RateCacheService = Depends(get_rate_service)):
    svc.get_rate()
    return _to_out(svc.snapshot())


@router.post("/refresh", response_model=RateOut, summary="Refetch the INR->USD rate")
def refresh_rate(svc: RateCacheService = Depends(get_rate_service)):
    svc.refresh()
    return _to_out(svc.snapshot())
