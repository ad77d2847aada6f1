"""Request body decoding shared by the JSON routes."""

from __future__ import annotations

from typing import Any

from fastapi import Request


async def read_json_object(request: Request) -> dict[str, Any]:
    """Return the JSON object body, or an empty dict for absent, malformed or non-object bodies."""
    try:
        payload = await request.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}
