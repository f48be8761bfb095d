from __future__ import annotations

from typing import Any

import pytest

import translation_relay.relay.app as app_mod
from translation_relay.relay import upstream
from translation_relay.relay.romanizer import EngineHandle, Romanizer


class FakeResponse:
    def __init__(self, status_code: int = 200, json_data: Any = None, text: str | None = None) -> None:
        self.status_code = status_code
        self._json = json_data
        self._text = text

    def json(self) -> Any:
        if self._text is not None:
            raise ValueError("not json")
        return self._json

    @property
    def text(self) -> str:
        return self._text if self._text is not None else ""


class FakeClient:
    """Stands in for httpx.Client; records calls and replays one response."""

    response = FakeResponse(json_data=[[["Hello", "こんにちは", None, None]], None, "ja"])
    calls: list[dict[str, Any]] = []

    def __init__(self, timeout: float | int | None = None, follow_redirects: bool = False) -> None:
        self.timeout = timeout
        self.follow_redirects = follow_redirects

    def __enter__(self) -> "FakeClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        return None

    def get(self, url: str, params: dict[str, str] | None = None, headers: dict[str, str] | None = None) -> FakeResponse:
        FakeClient.calls.append({
            "url": url,
            "params": params,
            "headers": headers,
            "timeout": self.timeout,
            "follow_redirects": self.follow_redirects,
        })
        return FakeClient.response


@pytest.fixture
def fake_upstream(monkeypatch):
    """Patch httpx.Client in the upstream module; set .response to change the reply."""
    FakeClient.calls = []
    FakeClient.response = FakeResponse(json_data=[[["Hello", "こんにちは", None, None]], None, "ja"])
    monkeypatch.setattr(upstream.httpx, "Client", FakeClient)
    return FakeClient


@pytest.fixture(scope="session")
def romanizer() -> Romanizer:
    return Romanizer()


@pytest.fixture
def ready_engine(monkeypatch, romanizer):
    handle = EngineHandle()
    handle.set_engine(romanizer)
    monkeypatch.setattr(app_mod, "ENGINE", handle)
    return handle
