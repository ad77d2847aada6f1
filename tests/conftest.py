"""Shared test fixtures for kyc-screening."""

from __future__ import annotations

import json
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

import httpx
import pytest

FIXED_NOW = datetime(2026, 10, 18, 9, 30, tzinfo=timezone.utc)


def completion_payload(content: str | None) -> dict[str, Any]:
    """Return an OpenAI-style chat completion body carrying `content`."""
    message: dict[str, Any] = {"role": "assistant"}
    if content is not None:
        message["content"] = content
    return {
        "id": "chatcmpl-test",
        "choices": [{"index": 0, "message": message, "finish_reason": "stop"}],
        "usage": {"prompt_tokens": 120, "completion_tokens": 40},
    }


class RecordingTransport:
    """Mock transport handler that records requests and replays a fixed response."""

    def __init__(self, respond: Callable[[httpx.Request], httpx.Response]):
        self.respond = respond
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def last_body(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content.decode())


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Clock pinned to a known UTC instant."""
    return lambda: FIXED_NOW


@pytest.fixture
def completion_transport():
    """Factory for a recording transport replying with the given completion content or status."""

    def _create(
        content: str | None = "[]",
        *,
        status_code: int = 200,
        json_body: Any = None,
    ) -> RecordingTransport:
        def respond(request: httpx.Request) -> httpx.Response:
            del request
            if status_code != 200 or json_body is not None:
                return httpx.Response(status_code, json=json_body if json_body is not None else {})
            return httpx.Response(200, json=completion_payload(content))

        return RecordingTransport(respond)

    return _create
