from __future__ import annotations

"""Rate provider abstraction.

A provider answers one question: how many US dollars is one rupee worth
right now. Caching and failure reporting live one level up, in
``cache_service``.
"""
from abc import ABC, abstractmethod


class RateUnavailableError(Exception):
    """Raised by a provider that cannot produce a usable rate."""


class RateProvider(ABC):
    name: str = "abstract"
    base_currency: str = "INR"
    quote_currency: str = "USD"

    @abstractmethod
    def get_rate(self) -> float:
        """Return USD per 1 INR."""
        raise NotImplementedError
