"""Tests for adverse media prompt construction."""

from __future__ import annotations

from datetime import date

from kyc_screening.screening.prompt import ADVERSE_MEDIA_SCOPE, SYSTEM_PROMPT, build_prompt


def test_prompt_embeds_entity_and_review_window() -> None:
    prompt = build_prompt("Acme Corp", date(2026, 9, 18), date(2026, 10, 18))

    assert '**Entity Under Review:** "Acme Corp"' in prompt
    assert "**Review Period:** 2026-09-18 to 2026-10-18" in prompt


def test_prompt_is_deterministic() -> None:
    first = build_prompt("Globex Holdings", date(2026, 1, 1), date(2026, 2, 1))
    second = build_prompt("Globex Holdings", date(2026, 1, 1), date(2026, 2, 1))

    assert first == second


def test_prompt_lists_scope_schema_and_json_only_instruction() -> None:
    prompt = build_prompt("Acme Corp", date(2026, 9, 18), date(2026, 10, 18))

    for item in ADVERSE_MEDIA_SCOPE:
        assert f"- {item}" in prompt
    for field in ("**title**", "**description**", "**date**", "**source**", "**severity**", "**category**"):
        assert field in prompt
    assert '"nextSteps"' in prompt
    assert '"overallRiskAssessment"' in prompt
    assert "Return ONLY valid JSON, no markdown" in prompt


def test_prompt_without_lower_bound_for_all_dates() -> None:
    prompt = build_prompt("Acme Corp", None, date(2026, 10, 18))

    assert "**Review Period:** All available records to 2026-10-18" in prompt


def test_system_prompt_sets_compliance_analyst_role() -> None:
    assert SYSTEM_PROMPT.startswith("You are a senior compliance analyst")
