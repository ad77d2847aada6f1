"""API endpoint for adverse media report generation."""

from __future__ import annotations

from typing import Annotated
from uuid import uuid4

import structlog
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse

from kyc_screening.api.body import read_json_object
from kyc_screening.errors import INTERNAL_ERROR_MESSAGE, ScreeningError
from kyc_screening.models.adverse_media import ReportRequest
from kyc_screening.screening.generator import AdverseMediaReportGenerator

router = APIRouter(prefix="/api/v1/adverse-media", tags=["adverse-media"])

logger = structlog.get_logger(__name__)


def get_report_generator(request: Request) -> AdverseMediaReportGenerator:
    """Get adverse media report generator from app state."""
    generator = getattr(request.app.state, "report_generator", None)
    if generator is None:
        raise HTTPException(status_code=503, detail="Adverse media report generator is not configured")
    return generator


def _default_date_range_days(request: Request) -> int:
    settings = getattr(request.app.state, "settings", None)
    return getattr(settings, "default_date_range_days", 30)


@router.post("/report")
async def generate_report(
    request: Request,
    generator: Annotated[AdverseMediaReportGenerator, Depends(get_report_generator)],
) -> JSONResponse:
    """Screen an entity for adverse media over the requested lookback window."""
    body = await read_json_object(request)
    structlog.contextvars.bind_contextvars(request_id=str(uuid4()))
    try:
        report_request = ReportRequest.from_payload(
            body.get("entityName"),
            body.get("dateRange"),
            default_days=_default_date_range_days(request),
        )
        structlog.contextvars.bind_contextvars(entity_name=report_request.entity_name)
        logger.info(
            "adverse_media_report_requested",
            date_range=report_request.date_range,
            date_range_days=report_request.date_range_days,
        )
        report = await generator.generate(report_request)
        return JSONResponse(content=report.model_dump(mode="json", by_alias=True))
    except ScreeningError as exc:
        logger.warning("adverse_media_report_failed", status_code=exc.status_code, error=exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_payload())
    except Exception as exc:  # noqa: BLE001
        logger.exception("adverse_media_report_unexpected_error")
        return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR_MESSAGE, "message": str(exc)})
    finally:
        structlog.contextvars.clear_contextvars()
