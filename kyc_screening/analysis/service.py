"""Portfolio analysis backed by the completion API with a local fallback."""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from typing import Any

import structlog

from kyc_screening.analysis.prompt import ANALYSIS_SYSTEM_PROMPT, build_analysis_prompt
from kyc_screening.clients.completion import CompletionClient
from kyc_screening.errors import ScreeningError
from kyc_screening.models.analysis import AnalysisRequest, AnalysisResult, ScoreBreakdown

logger = structlog.get_logger(__name__)

DEFAULT_CONFIDENCE = 75
FALLBACK_SCORE = 50

_BREAKDOWN_KEYS = (
    "companySize",
    "industry",
    "geography",
    "contactQuality",
    "complianceReadiness",
    "riskFactors",
    "financialHealth",
)


class AnalysisService:
    """Score and summarize portfolio data; never fails toward the caller."""

    def __init__(
        self,
        completion_client: CompletionClient,
        *,
        temperature: float = 0.3,
        max_tokens: int = 2000,
    ):
        self.completion_client = completion_client
        self.temperature = temperature
        self.max_tokens = max_tokens

    async def analyze(self, request: AnalysisRequest) -> AnalysisResult:
        if not self.completion_client.configured:
            logger.warning("analysis_api_not_configured_using_fallback")
            return fallback_analysis(request)

        prompt = build_analysis_prompt(request)
        try:
            content = await self.completion_client.complete(
                prompt,
                system_prompt=ANALYSIS_SYSTEM_PROMPT,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                response_format={"type": "json_object"},
                empty_content="",
            )
        except ScreeningError as exc:
            logger.warning("analysis_completion_failed_using_fallback", error=exc.message)
            return fallback_analysis(request)

        if not content:
            logger.warning("analysis_empty_completion_using_fallback")
            return fallback_analysis(request)

        try:
            decoded = json.loads(content)
        except ValueError as exc:
            logger.warning("analysis_parse_failed_using_fallback", error=str(exc))
            return fallback_analysis(request)

        if not isinstance(decoded, Mapping):
            logger.warning("analysis_payload_not_object_using_fallback", payload_type=type(decoded).__name__)
            return fallback_analysis(request)

        return normalize_analysis(decoded)


def normalize_analysis(raw: Mapping[str, Any]) -> AnalysisResult:
    """Map a model reply onto `AnalysisResult`, tolerating missing or mistyped fields."""
    score = _number(raw.get("score")) or _number(raw.get("overall"))

    supplied = raw.get("breakdown")
    if isinstance(supplied, Mapping) and supplied:
        breakdown_payload = {key: value for key, value in supplied.items() if _number(value) is not None}
    else:
        breakdown_payload = {"overall": score}

    return AnalysisResult(
        score=score,
        breakdown=ScoreBreakdown.model_validate(breakdown_payload),
        insights=_strings(raw.get("insights")),
        recommendations=_strings(raw.get("recommendations")),
        risk_factors=_strings(raw.get("riskFactors")),
        confidence=_number(raw.get("confidence")) or DEFAULT_CONFIDENCE,
        reasoning=_first_text(raw.get("reasoning"), raw.get("explanation")),
    )


def fallback_analysis(request: AnalysisRequest) -> AnalysisResult:
    """Deterministic scoring used when the completion API is unavailable."""
    score = FALLBACK_SCORE
    leads = request.data.leads
    if leads:
        total = sum(_lead_score(lead) for lead in leads)
        score = _round_half_up(total / len(leads))

    return AnalysisResult(
        score=score,
        breakdown=ScoreBreakdown(
            overall=score,
            company_size=50,
            industry=50,
            geography=50,
            contact_quality=50,
        ),
        insights=["Using fallback analysis. Please configure DEEPSEEK_API_KEY for enhanced AI analysis."],
        recommendations=["Configure DeepSeek API key for comprehensive AI-powered analysis."],
        confidence=50,
        reasoning="Fallback analysis - DeepSeek API not configured",
    )


def _lead_score(lead: Any) -> float:
    if isinstance(lead, Mapping):
        value = _number(lead.get("aiScore"))
        if value:
            return value
    return FALLBACK_SCORE


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)) and math.isfinite(value):
        return value
    return None


def _strings(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [item if isinstance(item, str) else json.dumps(item, default=str) for item in value]


def _first_text(*values: Any) -> str:
    for value in values:
        if isinstance(value, str) and value:
            return value
    return ""
