"""Error taxonomy shared by the screening and analysis endpoints."""

from __future__ import annotations

from typing import Any

CONFIG_ERROR_MESSAGE = "DeepSeek API key not configured. Please set DEEPSEEK_API_KEY in environment variables."
UPSTREAM_ERROR_MESSAGE = "Failed to fetch adverse media data from DeepSeek API"
INTERNAL_ERROR_MESSAGE = "Internal server error"
PARSE_ERROR_MESSAGE = "Failed to parse AI response"


class ScreeningError(Exception):
    """Base error mapped to an HTTP response envelope at the route boundary."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.message}


class InvalidRequestError(ScreeningError):
    """Caller supplied an unusable request body."""

    status_code = 400


class ConfigurationError(ScreeningError):
    """Operator-fixable configuration problem, e.g. missing API credential."""

    status_code = 500

    def __init__(self, message: str = CONFIG_ERROR_MESSAGE):
        super().__init__(message)


class UpstreamError(ScreeningError):
    """Completion API answered with a non-success status."""

    def __init__(self, status_code: int, body: Any, message: str = UPSTREAM_ERROR_MESSAGE):
        super().__init__(message)
        # Non-error statuses (e.g. an unfollowed redirect) still surface as a gateway failure.
        self.status_code = status_code if status_code >= 400 else 502
        self.upstream_status_code = status_code
        self.body = body if body is not None else {}

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.message, "details": self.body}


class TransportError(ScreeningError):
    """Network-level failure while calling the completion API."""

    status_code = 500

    def to_payload(self) -> dict[str, Any]:
        return {"error": INTERNAL_ERROR_MESSAGE, "message": self.message}


class ResponseParseError(ValueError):
    """Completion text did not contain decodable JSON."""

    def __init__(self, raw_response: str, reason: str = ""):
        super().__init__(reason or PARSE_ERROR_MESSAGE)
        self.raw_response = raw_response
