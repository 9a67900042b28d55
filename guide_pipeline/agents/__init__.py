"""Agents for the guide pipeline."""

from guide_pipeline.agents.classifier import classify
from guide_pipeline.agents.classifier_types import (
    GenerationRequest,
    GenerationResult,
    ProjectType,
    PromptSpec,
)
from guide_pipeline.agents.prompt_builder import build_prompt

__all__ = [
    "classify",
    "build_prompt",
    "GenerationRequest",
    "GenerationResult",
    "ProjectType",
    "PromptSpec",
]
