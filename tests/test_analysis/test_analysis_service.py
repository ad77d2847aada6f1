"""Tests for the portfolio analysis service."""

from __future__ import annotations

import json

import httpx
import pytest

from kyc_screening.analysis.service import AnalysisService, fallback_analysis, normalize_analysis
from kyc_screening.clients.completion import CompletionClient
from kyc_screening.models.analysis import AnalysisRequest


def _request(**data) -> AnalysisRequest:
    return AnalysisRequest.model_validate({"data": data, "analysisType": "lead_scoring"})


def test_fallback_uses_rounded_mean_lead_score() -> None:
    result = fallback_analysis(_request(leads=[{"aiScore": 70}, {"aiScore": 75}, {"name": "no score"}]))

    # (70 + 75 + 50) / 3 = 65.0
    assert result.score == 65
    assert result.confidence == 50
    assert result.breakdown.overall == 65
    assert result.breakdown.company_size == 50
    assert result.reasoning == "Fallback analysis - DeepSeek API not configured"


def test_fallback_rounds_half_up() -> None:
    result = fallback_analysis(_request(leads=[{"aiScore": 60}, {"aiScore": 61}]))

    assert result.score == 61


def test_fallback_without_leads_scores_fifty() -> None:
    result = fallback_analysis(_request(clients=[{"name": "Globex"}]))

    assert result.score == 50
    assert result.insights == ["Using fallback analysis. Please configure DEEPSEEK_API_KEY for enhanced AI analysis."]


def test_normalize_analysis_maps_fields_and_defaults() -> None:
    result = normalize_analysis(
        {
            "overall": 82,
            "insights": ["Strong pipeline"],
            "recommendations": "not a list",
            "riskFactors": ["Sanctions exposure"],
            "explanation": "Based on lead mix",
        }
    )

    assert result.score == 82
    assert result.breakdown.overall == 82
    assert result.insights == ["Strong pipeline"]
    assert result.recommendations == []
    assert result.risk_factors == ["Sanctions exposure"]
    assert result.confidence == 75
    assert result.reasoning == "Based on lead mix"


def test_normalize_analysis_keeps_supplied_breakdown() -> None:
    result = normalize_analysis(
        {"score": 70, "breakdown": {"companySize": 80, "industry": 60, "note": "n/a"}, "confidence": 90}
    )

    payload = result.model_dump(mode="json", by_alias=True, exclude_none=True)
    assert payload["breakdown"] == {"companySize": 80, "industry": 60}
    assert payload["confidence"] == 90


@pytest.mark.asyncio
async def test_analyze_without_key_uses_fallback_and_makes_no_call(completion_transport) -> None:
    transport = completion_transport("{}")

    async with httpx.AsyncClient(transport=httpx.MockTransport(transport)) as session:
        service = AnalysisService(CompletionClient(None, session=session))
        result = await service.analyze(_request(leads=[{"aiScore": 90}]))

    assert result.score == 90
    assert result.confidence == 50
    assert transport.call_count == 0


@pytest.mark.asyncio
async def test_analyze_requests_json_object_and_normalizes(completion_transport) -> None:
    reply = {"score": 77, "insights": ["Good fit"], "confidence": 88, "reasoning": "Mid-market bank"}
    transport = completion_transport(json.dumps(reply))

    async with httpx.AsyncClient(transport=httpx.MockTransport(transport)) as session:
        service = AnalysisService(CompletionClient("key", session=session))
        result = await service.analyze(_request(leads=[{"aiScore": 10}]))

    body = transport.last_body()
    assert body["response_format"] == {"type": "json_object"}
    assert body["max_tokens"] == 2000
    assert result.score == 77
    assert result.insights == ["Good fit"]
    assert result.confidence == 88


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("content", "status_code"),
    [(None, 200), ("definitely not json", 200), ("[1, 2]", 200), ("{}", 500)],
)
async def test_analyze_falls_back_on_bad_replies(completion_transport, content, status_code) -> None:
    if status_code == 200:
        transport = completion_transport(content)
    else:
        transport = completion_transport(status_code=status_code, json_body={"error": "boom"})

    async with httpx.AsyncClient(transport=httpx.MockTransport(transport)) as session:
        service = AnalysisService(CompletionClient("key", session=session))
        result = await service.analyze(_request(leads=[{"aiScore": 40}]))

    assert result.score == 40
    assert result.reasoning == "Fallback analysis - DeepSeek API not configured"
    assert transport.call_count == 1
