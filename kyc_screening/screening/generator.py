"""Adverse media report generation: prompt, completion, parse, normalize."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta

import structlog

from kyc_screening.clients.completion import CompletionClient
from kyc_screening.errors import ResponseParseError
from kyc_screening.models.adverse_media import (
    ALL_DATES,
    AdverseMediaReport,
    DegradedReport,
    ReportRequest,
    utc_now,
)
from kyc_screening.screening.normalizer import normalize
from kyc_screening.screening.parser import parse_completion
from kyc_screening.screening.prompt import SYSTEM_PROMPT, build_prompt

logger = structlog.get_logger(__name__)


class AdverseMediaReportGenerator:
    """Produce one adverse media report per request; holds no per-request state."""

    def __init__(
        self,
        completion_client: CompletionClient,
        *,
        temperature: float = 0.3,
        max_tokens: int = 3000,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.completion_client = completion_client
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.clock = clock

    async def generate(self, request: ReportRequest) -> AdverseMediaReport | DegradedReport:
        """Return the normalized report, or a degraded report when the reply is not JSON.

        Configuration, upstream and transport errors propagate to the caller.
        """
        now = self.clock()
        end_date = now.date()
        start_date = None
        if request.date_range_days != ALL_DATES:
            start_date = (now - timedelta(days=int(request.date_range_days))).date()

        prompt = build_prompt(request.entity_name, start_date, end_date)
        content = await self.completion_client.complete(
            prompt,
            system_prompt=SYSTEM_PROMPT,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )

        try:
            parsed = parse_completion(content)
        except ResponseParseError as exc:
            logger.warning("completion_parse_failed", error=str(exc), raw_chars=len(exc.raw_response))
            return DegradedReport(raw_response=exc.raw_response)

        result = normalize(parsed, today=end_date)
        report = AdverseMediaReport(
            entity_name=request.entity_name,
            date_range=request.date_range,
            search_date=now,
            findings=result.findings,
            next_steps=result.next_steps,
            overall_risk_assessment=result.overall_risk_assessment,
        )
        logger.info(
            "adverse_media_report_generated",
            findings_count=report.findings_count,
            next_steps_count=len(report.next_steps),
            risk_level=report.overall_risk_assessment.level,
        )
        return report
