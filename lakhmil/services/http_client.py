from __future__ import annotations

"""Lightweight HTTP client util with retry.

Uses stdlib urllib; the only outbound call this service makes is a single
GET of a small JSON document, so a full client library is not needed.
"""
import http.client
import json
import logging
import time
import urllib.request
from typing import Any, Dict, Optional

logger = logging.getLogger("lakhmil.http")

USER_AGENT = "lakhmil/0.1 (+exchange-rate)"


class HttpError(Exception):
    pass


def get_json(
    url: str, *, timeout: float = 5.0, retries: int = 2, backoff: float = 0.5
) -> Dict[str, Any]:
    req = urllib.request.Request(
        url, headers={"Accept": "application/json", "User-Agent": USER_AGENT}
    )
    last_err: Optional[Exception] = None
    for attempt in range(retries + 1):
        try:
            with urllib.request.urlopen(req, timeout=timeout) as resp:  # nosec B310
                if resp.status >= 400:
                    raise HttpError(f"HTTP {resp.status} for {url}")
                data = json.loads(resp.read().decode("utf-8"))
                if not isinstance(data, dict):
                    raise HttpError(f"Expected a JSON object from {url}")
                return data
        except (
            OSError,  # URLError, TimeoutError, ConnectionResetError
            http.client.HTTPException,  # RemoteDisconnected, IncompleteRead
            HttpError,
            ValueError,  # JSON decode
        ) as e:
            last_err = e
            if attempt == retries:
                break
            delay = backoff * (2**attempt)
            logger.debug(
                "GET %s failed (attempt %d/%d): %s; retrying in %.2fs",
                url,
                attempt + 1,
                retries + 1,
                e,
                delay,
            )
            time.sleep(delay)
    raise HttpError(f"Failed to fetch JSON from {url}: {last_err}")
