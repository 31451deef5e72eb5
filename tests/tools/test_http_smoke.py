import requests

from fintra.config import catalog
from tools import http_smoke


class DummyResponse:
    def __init__(self, status_code, data=None):
        self.status_code = status_code
        self._data = data or {}
        self.text = str(self._data)

    def json(self):
        return self._data


def test_smoke_passes_when_all_routes_respond(monkeypatch):
    seen = []

    def fake_get(url, timeout=None):
        seen.append(url)
        return DummyResponse(200)

    monkeypatch.setattr(http_smoke.requests, "get", fake_get)
    assert http_smoke.run_smoke("http://gw.test/") == 0
    assert seen[0] == "http://gw.test/health"
    assert len(seen) == 1 + len(catalog.EXAMPLE_PATHS)


def test_smoke_fails_on_server_error(monkeypatch):
    def fake_get(url, timeout=None):
        if "company-quote" in url:
            return DummyResponse(500, {"error": "Failed to fetch company quote data"})
        return DummyResponse(200)

    monkeypatch.setattr(http_smoke.requests, "get", fake_get)
    assert http_smoke.run_smoke("http://gw.test") == 1


def test_smoke_fails_when_unreachable(monkeypatch):
    def fake_get(url, timeout=None):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(http_smoke.requests, "get", fake_get)
    assert http_smoke.run_smoke("http://gw.test") == 1
