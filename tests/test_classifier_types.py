# tests/test_classifier_types.py
"""Tests for guide data types."""

import pytest
from datetime import date


def test_project_type_values():
    from guide_pipeline.agents.classifier_types import ProjectType

    assert [t.value for t in ProjectType] == [
        "frontend", "backend", "mobile", "fullstack", "data", "devops", "general",
    ]


def test_project_type_from_string():
    from guide_pipeline.agents.classifier_types import ProjectType

    assert ProjectType.from_string(" Backend ") == ProjectType.BACKEND
    assert ProjectType.from_string("nonsense") == ProjectType.GENERAL


def test_project_type_str_is_value():
    from guide_pipeline.agents.classifier_types import ProjectType

    assert str(ProjectType.DEVOPS) == "devops"


def test_format_date_matches_us_short_date():
    from guide_pipeline.agents.classifier_types import format_date

    assert format_date(date(2026, 10, 7)) == "10/7/2026"
    assert format_date(date(2025, 1, 31)) == "1/31/2025"


def test_generation_request_trims_purpose():
    from guide_pipeline.agents.classifier_types import GenerationRequest

    request = GenerationRequest("  My API  ", date(2026, 1, 1))

    assert request.purpose == "My API"
    assert request.requested_at == date(2026, 1, 1)


def test_generation_request_accepts_none_purpose():
    from guide_pipeline.agents.classifier_types import GenerationRequest

    assert GenerationRequest(None).purpose == ""


def test_generation_result_is_immutable():
    from dataclasses import FrozenInstanceError
    from guide_pipeline.agents.classifier_types import GenerationResult

    result = GenerationResult(content="text")

    with pytest.raises(FrozenInstanceError):
        result.content = "other"


def test_generation_result_to_dict():
    from guide_pipeline.agents.classifier_types import GenerationResult, ProjectType

    result = GenerationResult(content="doc", project_type=ProjectType.DATA, provider="gemini")

    assert result.to_dict() == {"content": "doc", "project_type": "data", "provider": "gemini"}
