"""
Unit tests for the JSON GET helper (urlopen stubbed, no network).
"""

import http.client
import json
import urllib.error

import pytest

from lakhmil.services import http_client
from lakhmil.services.http_client import HttpError, get_json

URL = "https://example.test/inr.json"


class FakeResponse:
    def __init__(self, body: bytes, status: int = 200):
        self.status = status
        self._body = body

    def read(self) -> bytes:
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


def json_response(payload) -> FakeResponse:
    return FakeResponse(json.dumps(payload).encode("utf-8"))


@pytest.fixture
def sleeps(monkeypatch):
    delays = []
    monkeypatch.setattr(http_client.time, "sleep", delays.append)
    return delays


def stub_urlopen(monkeypatch, *outcomes):
    """Each call consumes the next outcome: a response or an exception to raise."""
    queue = list(outcomes)
    calls = []

    def fake_urlopen(req, timeout):
        calls.append((req.full_url, timeout))
        item = queue.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    monkeypatch.setattr(http_client.urllib.request, "urlopen", fake_urlopen)
    return calls


class TestGetJson:
    def test_success(self, monkeypatch, sleeps):
        calls = stub_urlopen(monkeypatch, json_response({"inr": {"usd": 0.012}}))
        assert get_json(URL, timeout=3.0) == {"inr": {"usd": 0.012}}
        assert calls == [(URL, 3.0)]
        assert sleeps == []

    def test_retries_then_succeeds(self, monkeypatch, sleeps):
        calls = stub_urlopen(
            monkeypatch,
            urllib.error.URLError("dns"),
            http.client.RemoteDisconnected("closed"),
            json_response({"ok": True}),
        )
        assert get_json(URL, retries=2, backoff=0.5) == {"ok": True}
        assert len(calls) == 3
        assert sleeps == [0.5, 1.0]

    def test_non_object_json(self, monkeypatch, sleeps):
        stub_urlopen(monkeypatch, json_response([1, 2, 3]))
        with pytest.raises(HttpError, match="JSON object"):
            get_json(URL, retries=0)

    def test_invalid_json(self, monkeypatch, sleeps):
        stub_urlopen(monkeypatch, FakeResponse(b"<html>"))
        with pytest.raises(HttpError):
            get_json(URL, retries=0)

    def test_error_status(self, monkeypatch, sleeps):
        stub_urlopen(monkeypatch, FakeResponse(b"{}", status=503))
        with pytest.raises(HttpError, match="HTTP 503"):
            get_json(URL, retries=0)

    def test_exhausted_retries(self, monkeypatch, sleeps):
        calls = stub_urlopen(
            monkeypatch,
            ConnectionResetError("reset"),
            http.client.IncompleteRead(b"{"),
            TimeoutError("slow"),
        )
        with pytest.raises(HttpError, match="Failed to fetch JSON"):
            get_json(URL, retries=2, backoff=0.1)
        assert len(calls) == 3
        assert sleeps == [0.1, 0.2]
