"""
Shared fixtures: isolated settings/DB per test and stub rate providers.
"""

import pytest
from fastapi.testclient import TestClient

from lakhmil.core.config import Settings
from lakhmil.main import create_app
from lakhmil.services.rates.base import RateProvider, RateUnavailableError
from lakhmil.services.rates.cache_service import RateCacheService


class StubProvider(RateProvider):
    """Returns queued rates (or raises when the queued item is an exception)."""

    name = "stub"

    def __init__(self, *results):
        self.results = list(results)
        self.calls = 0

    def get_rate(self) -> float:
        self.calls += 1
        item = self.results.pop(0) if len(self.results) > 1 else self.results[0]
        if isinstance(item, Exception):
            raise item
        return item


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        data_dir=tmp_path,
        db_path=tmp_path / "test.sqlite3",
        exchange_rate_provider="static",
        static_rate=0.012,
    )


@pytest.fixture
def client(settings) -> TestClient:
    return TestClient(create_app(settings_override=settings))


@pytest.fixture
def failing_client(settings) -> TestClient:
    svc = RateCacheService(StubProvider(RateUnavailableError("offline")), ttl_seconds=3600)
    return TestClient(create_app(settings_override=settings, rate_service=svc))
