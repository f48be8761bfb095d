"""Relay exceptions. Each carries the HTTP status it is reported with."""
from __future__ import annotations
from typing import Any


class RelayError(Exception):
    status_code = 500

    def __init__(self, message: str, **extra: Any) -> None:
        super().__init__(message)
        self.message = message
        self.extra = extra

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.message, **self.extra}


class MissingTextError(RelayError):
    status_code = 400

    def __init__(self) -> None:
        super().__init__("No text provided")


class UpstreamStatusError(RelayError):
    """Upstream answered with an HTTP status >= 400."""
    status_code = 502

    def __init__(self, status: int) -> None:
        super().__init__("Upstream translation error", status=status)
        self.status = status


class UpstreamShapeError(RelayError):
    """Upstream body is neither a chunk array nor a plain string."""
    status_code = 502

    def __init__(self) -> None:
        super().__init__("Unexpected upstream response")


class EngineNotReadyError(RelayError):
    status_code = 503

    def __init__(self, state: str) -> None:
        super().__init__("Romanization engine not ready", state=state)
        self.state = state
