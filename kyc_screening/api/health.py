"""Health endpoint reporting completion API readiness."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("")
async def health_check(request: Request) -> dict[str, Any]:
    """Report whether the service can reach a configured completion API."""
    client = getattr(request.app.state, "completion_client", None)
    if client is None:
        return {"status": "unhealthy", "completion_api": "not_initialized", "model": None}

    completion_api = "configured" if client.configured else "not_configured"
    return {
        "status": "healthy" if client.configured else "degraded",
        "completion_api": completion_api,
        "model": client.model,
    }
