"""API endpoint for AI-assisted portfolio analysis."""

from __future__ import annotations

from typing import Annotated, Any
from uuid import uuid4

import structlog
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from kyc_screening.analysis.service import AnalysisService
from kyc_screening.api.body import read_json_object
from kyc_screening.models.analysis import AnalysisRequest, AnalysisType

router = APIRouter(prefix="/api/v1/ai", tags=["analysis"])

logger = structlog.get_logger(__name__)

_SUPPORTED_TYPES = ", ".join(member.value for member in AnalysisType)


def get_analysis_service(request: Request) -> AnalysisService:
    """Get analysis service from app state."""
    service = getattr(request.app.state, "analysis_service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="Analysis service is not configured")
    return service


def _error(status_code: int, message: str, **extra: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, **extra})


@router.post("/analyze")
async def analyze(
    request: Request,
    service: Annotated[AnalysisService, Depends(get_analysis_service)],
) -> JSONResponse:
    """Return score, breakdown, insights and recommendations for the submitted data."""
    body = await read_json_object(request)
    if body.get("data") is None:
        return _error(400, "Data is required")
    analysis_type = body.get("analysisType")
    if not analysis_type:
        return _error(400, "Analysis type is required")
    if not isinstance(analysis_type, str) or analysis_type not in {member.value for member in AnalysisType}:
        return _error(400, f"Unsupported analysis type. Expected one of: {_SUPPORTED_TYPES}")

    structlog.contextvars.bind_contextvars(request_id=str(uuid4()), analysis_type=analysis_type)
    try:
        try:
            analysis_request = AnalysisRequest.model_validate(body)
        except ValidationError as exc:
            details = exc.errors(include_url=False, include_context=False, include_input=False)
            return _error(400, "Invalid analysis request", details=details)

        result = await service.analyze(analysis_request)
        logger.info("analysis_completed", score=result.score, confidence=result.confidence)
        return JSONResponse(content=result.model_dump(mode="json", by_alias=True, exclude_none=True))
    except Exception as exc:  # noqa: BLE001
        logger.exception("analysis_unexpected_error")
        return _error(500, "Failed to perform AI analysis", details=str(exc))
    finally:
        structlog.contextvars.clear_contextvars()
