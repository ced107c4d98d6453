from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from threading import Lock
from typing import Callable, Optional

from lakhmil.models.constants import RATE_FETCH_ERROR
from lakhmil.services.http_client import HttpError
from .base import RateProvider, RateUnavailableError

"""Session rate cache.

Purpose:
    Fetch the INR->USD rate once and serve it to every conversion until the
    entry is older than the configured TTL (settings.rates_cache_ttl_seconds).

Design:
    - Wraps a single RateProvider (selected via settings.exchange_rate_provider).
    - A failed fetch never raises to callers: get_rate() returns None and
      last_error carries the user-facing message, so conversions degrade to
      "Invalid input" exactly as when no rate has been loaded yet.
    - A previously cached rate is dropped once stale, even if the refresh
      fails; an old rate is not served past its TTL.
"""

logger = logging.getLogger("lakhmil.rates")


@dataclass
class _CacheEntry:
    rate: float
    fetched_at: datetime


@dataclass(frozen=True)
class RateSnapshot:
    provider: str
    base_currency: str
    quote_currency: str
    rate: Optional[float]
    fetched_at: Optional[datetime]
    error: Optional[str]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RateCacheService:
    """Cached INR->USD rate with TTL-bound entry."""

    def __init__(
        self,
        provider: RateProvider,
        ttl_seconds: int,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._provider = provider
        self._ttl = timedelta(seconds=ttl_seconds)
        self._clock = clock
        self._entry: Optional[_CacheEntry] = None
        self._last_error: Optional[str] = None
        self._lock = Lock()

    @property
    def provider_name(self) -> str:
        return self._provider.name

    @property
    def last_error(self) -> Optional[str]:
        return self._last_error

    # Internal --------------------------------------------------
    def _is_entry_valid(self, entry: _CacheEntry) -> bool:
        return self._clock() - entry.fetched_at < self._ttl

    def _fetch(self) -> Optional[float]:
        try:
            rate = self._provider.get_rate()
        except (RateUnavailableError, HttpError) as e:
            logger.warning("exchange rate fetch failed via %s: %s", self.provider_name, e)
            self._entry = None
            self._last_error = RATE_FETCH_ERROR
            return None
        self._entry = _CacheEntry(rate=rate, fetched_at=self._clock())
        self._last_error = None
        logger.info("exchange rate loaded via %s: %s USD per INR", self.provider_name, rate)
        return rate

    # Public API -----------------------------------------------
    def get_rate(self) -> Optional[float]:
        with self._lock:
            entry = self._entry
            if entry and self._is_entry_valid(entry):
                return entry.rate
            return self._fetch()

    def refresh(self) -> Optional[float]:
        with self._lock:
            return self._fetch()

    def snapshot(self) -> RateSnapshot:
        """Report the cached state without fetching."""
        with self._lock:
            entry = self._entry
            if entry and not self._is_entry_valid(entry):
                entry = None
            return RateSnapshot(
                provider=self.provider_name,
                base_currency=self._provider.base_currency,
                quote_currency=self._provider.quote_currency,
                rate=entry.rate if entry else None,
                fetched_at=entry.fetched_at if entry else None,
                error=self._last_error,
            )
