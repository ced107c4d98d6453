from __future__ import annotations

"""Concrete rate providers and factory.

'static' returns a fixed placeholder rate (offline use, tests). 'external-http'
reads the public currency-api snapshot, base INR:

    {"date": "2024-05-01", "inr": {"usd": 0.01199, "eur": 0.0112, ...}}
"""
import logging
import math
from typing import Dict, Type

from lakhmil.core.config import Settings
from lakhmil.services.http_client import get_json, HttpError
from .base import RateProvider, RateUnavailableError

logger = logging.getLogger("lakhmil.rates")

DEFAULT_STATIC_RATE = 0.012  # USD per INR


class StaticRateProvider(RateProvider):
    name = "static"

    def __init__(self, rate: float = DEFAULT_STATIC_RATE):
        if rate <= 0:
            raise ValueError("static rate must be positive")
        self._rate = rate

    def get_rate(self) -> float:  # type: ignore[override]
        return self._rate


class ExternalHTTPRateProvider(RateProvider):
    name = "external-http"

    def __init__(self, url: str, *, timeout: float = 5.0, retries: int = 2):
        self._url = url
        self._timeout = timeout
        self._retries = retries

    def get_rate(self) -> float:  # type: ignore[override]
        try:
            data = get_json(self._url, timeout=self._timeout, retries=self._retries)
        except HttpError as e:
            raise RateUnavailableError(str(e)) from e
        return extract_usd_rate(data)


def extract_usd_rate(data: Dict) -> float:
    """Pull ``inr.usd`` out of a currency-api payload."""
    quotes = data.get("inr")
    if not isinstance(quotes, dict):
        raise RateUnavailableError("payload has no 'inr' quotes")
    value = quotes.get("usd")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise RateUnavailableError(f"unexpected usd quote {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise RateUnavailableError(f"unusable usd quote {value!r}")
    logger.debug("fetched rate inr.usd=%s (snapshot date %s)", value, data.get("date"))
    return float(value)


_PROVIDER_REGISTRY: Dict[str, Type[RateProvider]] = {
    "static": StaticRateProvider,
    "external-http": ExternalHTTPRateProvider,
}


def make_rate_provider(settings: Settings) -> RateProvider:
    kind = settings.exchange_rate_provider
    cls = _PROVIDER_REGISTRY.get(kind)
    if not cls:
        raise ValueError(f"Unknown rate provider kind '{kind}'")
    if cls is ExternalHTTPRateProvider:
        return ExternalHTTPRateProvider(
            str(settings.exchange_api_url),
            timeout=settings.http_timeout_seconds,
            retries=settings.http_retries,
        )
    return StaticRateProvider(settings.static_rate)
