"""Chat-completion API client (DeepSeek-compatible, OpenAI wire format)."""

from __future__ import annotations

import time
from typing import Any

import httpx
import structlog

from kyc_screening.config import DEFAULT_DEEPSEEK_API_URL
from kyc_screening.errors import ConfigurationError, TransportError, UpstreamError

logger = structlog.get_logger(__name__)


class CompletionClient:
    """Send a single prompt to the completion endpoint and return the reply text.

    Failures are raised immediately; nothing is retried because a caller is
    waiting on the result.
    """

    def __init__(
        self,
        api_key: str | None,
        *,
        api_url: str = DEFAULT_DEEPSEEK_API_URL,
        model: str = "deepseek-chat",
        timeout_seconds: float = 120.0,
        session: httpx.AsyncClient | None = None,
    ):
        self.api_key = (api_key or "").strip() or None
        self.api_url = api_url
        self.model = model
        self.timeout_seconds = timeout_seconds
        self._owns_session = session is None
        self.session = session or httpx.AsyncClient(timeout=float(timeout_seconds))

    @property
    def configured(self) -> bool:
        return self.api_key is not None

    async def complete(
        self,
        prompt: str,
        *,
        system_prompt: str,
        temperature: float = 0.3,
        max_tokens: int = 3000,
        response_format: dict[str, Any] | None = None,
        empty_content: str = "[]",
    ) -> str:
        """Return `choices[0].message.content`, or `empty_content` when the reply has none."""
        if not self.configured:
            raise ConfigurationError()

        body: dict[str, Any] = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": prompt},
            ],
            "temperature": temperature,
            "max_tokens": max_tokens,
            "stream": False,
        }
        if response_format is not None:
            body["response_format"] = response_format

        started = time.monotonic()
        try:
            response = await self.session.post(
                self.api_url,
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {self.api_key}",
                },
                json=body,
                timeout=self.timeout_seconds,
            )
        except httpx.TransportError as exc:
            reason = str(exc) or type(exc).__name__
            logger.warning("completion_transport_failed", model=self.model, error=reason)
            raise TransportError(f"Completion API request failed: {reason}") from exc

        if not response.is_success:
            details = _decode_error_body(response)
            logger.warning(
                "completion_request_failed",
                model=self.model,
                status_code=response.status_code,
                details=details,
            )
            raise UpstreamError(response.status_code, details)

        try:
            payload = response.json()
        except ValueError as exc:
            logger.warning("completion_response_not_json", model=self.model, status_code=response.status_code)
            raise UpstreamError(502, {"message": "Completion API returned a non-JSON body"}) from exc

        content = _extract_content(payload)
        usage = payload.get("usage") if isinstance(payload, dict) else None
        if not isinstance(usage, dict):
            usage = {}
        logger.info(
            "completion_request_succeeded",
            model=self.model,
            latency_seconds=round(time.monotonic() - started, 4),
            prompt_tokens=usage.get("prompt_tokens"),
            completion_tokens=usage.get("completion_tokens"),
            content_chars=len(content or ""),
        )
        return content or empty_content

    async def close(self) -> None:
        """Close the underlying HTTP client when this instance created it."""
        if self._owns_session:
            await self.session.aclose()


def _decode_error_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return {}


def _extract_content(payload: Any) -> str | None:
    if not isinstance(payload, dict):
        return None
    choices = payload.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    if not isinstance(first, dict):
        return None
    message = first.get("message")
    if not isinstance(message, dict):
        return None
    content = message.get("content")
    return content if isinstance(content, str) else None
