from __future__ import annotations

from typing import Any, List

import pytest
import requests

from app.core.config import settings


class FakeResponse:
    def __init__(self, status_code: int = 200, body: Any = None, url: str = "", invalid_json: bool = False):
        self.status_code = status_code
        self._body = body
        self.url = url
        self._invalid_json = invalid_json

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self):
        if self._invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._body


class FakeApi:
    """Stands in for `requests.get`; records every call."""

    def __init__(self):
        self.calls: List[dict] = []
        self.responses: List[Any] = []

    def queue(self, status_code: int = 200, body: Any = None, **kw) -> "FakeApi":
        self.responses.append(FakeResponse(status_code, body, **kw))
        return self

    def raise_error(self, exc: Exception) -> "FakeApi":
        self.responses.append(exc)
        return self

    def __call__(self, url, headers=None, params=None, timeout=None):
        self.calls.append({"url": url, "headers": headers or {}, "params": params or {}, "timeout": timeout})
        if not self.responses:
            raise AssertionError(f"unexpected request to {url}")
        nxt = self.responses.pop(0)
        if isinstance(nxt, Exception):
            raise nxt
        nxt.url = url
        return nxt


@pytest.fixture(autouse=True)
def _settings(monkeypatch):
    monkeypatch.setattr(settings, "API_FOOTBALL_FAKE_MODE", False)
    monkeypatch.setattr(settings, "API_FOOTBALL_URL", "https://api.test")
    monkeypatch.setattr(settings, "API_FOOTBALL_KEY", "secret-key")
    monkeypatch.setattr(settings, "LEAGUE_ID", 239)
    monkeypatch.setattr(settings, "SEASON", 2023)


@pytest.fixture
def fake_api(monkeypatch) -> FakeApi:
    api = FakeApi()
    monkeypatch.setattr(requests, "get", api)
    return api
