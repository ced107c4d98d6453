"""
HTTP surface tests (FastAPI TestClient, static rate provider, temp DB).
"""

from lakhmil.models.constants import INVALID_INPUT, RATE_FETCH_ERROR


class TestMeta:
    def test_root_and_health(self, client):
        assert client.get("/").json()["version"] == "0.1.0"
        assert client.get("/health").json()["status"] == "ok"

    def test_request_id_echoed(self, client):
        resp = client.get("/health", headers={"X-Request-ID": "abc-123"})
        assert resp.headers["X-Request-ID"] == "abc-123"

    def test_unknown_route(self, client):
        resp = client.get("/nope")
        assert resp.status_code == 404
        assert resp.json()["error"] == "not_found"


class TestConvert:
    def test_inr_to_usd(self, client):
        resp = client.post("/convert", json={"input": "1Cr", "direction": "INR_TO_USD", "rounded": True})
        assert resp.status_code == 200
        body = resp.json()
        assert body["ok"] is True
        assert body["kind"] == "string"
        assert body["result"] == "120.00K"
        assert body["rate"] == 0.012
        assert body["direction_label"] == "INR → USD"
        assert body["history_entry"]["result"] == "120.00K"

    def test_usd_to_inr(self, client):
        resp = client.post("/convert", json={"input": "1.2M", "direction": "USD_TO_INR"})
        assert resp.json()["result"] == "10.00 Cr"

    def test_unrounded_bare_number(self, client):
        resp = client.post("/convert", json={"input": "50000", "rounded": False})
        body = resp.json()
        assert body["kind"] == "number"
        assert body["result"] == 600

    def test_invalid_input_is_not_an_error(self, client):
        resp = client.post("/convert", json={"input": "abc"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["ok"] is False
        assert body["result"] == INVALID_INPUT
        assert body["history_entry"] is None

    def test_no_rate_gives_invalid_input(self, failing_client):
        resp = failing_client.post("/convert", json={"input": "1Cr"})
        body = resp.json()
        assert body["result"] == INVALID_INPUT
        assert body["rate"] is None

    def test_bad_direction(self, client):
        resp = client.post("/convert", json={"input": "1Cr", "direction": "EUR_TO_USD"})
        assert resp.status_code == 422
        assert resp.json()["error"] == "validation_error"

    def test_parse(self, client):
        assert client.get("/convert/parse", params={"input": "1.5Cr"}).json()["amount"] == 15000000

    def test_format(self, client):
        body = client.get("/convert/format", params={"value": 2.3e9, "currency": "usd"}).json()
        assert body["result"] == "2.30B"
        body = client.get("/convert/format", params={"value": 999, "rounded": False}).json()
        assert body == {"value": 999, "currency": "INR", "rounded": False, "kind": "number", "result": 999}

    def test_format_rejects_negative(self, client):
        assert client.get("/convert/format", params={"value": -1}).status_code == 422


class TestRates:
    def test_current(self, client):
        body = client.get("/rates/current").json()
        assert body["provider"] == "static"
        assert body["rate"] == 0.012
        assert body["base_currency"] == "INR"
        assert body["quote_currency"] == "USD"

    def test_refresh(self, client):
        assert client.post("/rates/refresh").json()["rate"] == 0.012

    def test_unavailable(self, failing_client):
        resp = failing_client.get("/rates/current")
        assert resp.status_code == 503
        assert resp.json()["detail"] == RATE_FETCH_ERROR


class TestHistory:
    def test_successful_conversions_listed_newest_first(self, client):
        client.post("/convert", json={"input": "1Cr"})
        client.post("/convert", json={"input": "abc"})
        client.post("/convert", json={"input": "10K", "direction": "USD_TO_INR"})
        entries = client.get("/history").json()
        assert [e["input"] for e in entries] == ["10K", "1Cr"]
        assert entries[0]["direction_label"] == "USD → INR"

    def test_capped(self, client, settings):
        for i in range(settings.history_limit + 3):
            client.post("/convert", json={"input": f"{i + 1}L"})
        entries = client.get("/history").json()
        assert len(entries) == settings.history_limit
        assert entries[0]["input"] == f"{settings.history_limit + 3}L"

    def test_clear(self, client):
        client.post("/convert", json={"input": "1Cr"})
        resp = client.delete("/history")
        assert resp.json() == {"status": "cleared", "removed": 1}
        assert client.get("/history").json() == []
