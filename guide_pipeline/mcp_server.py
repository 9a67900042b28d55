"""MCP tool functions for guide generation."""

from typing import Optional

from guide_pipeline.agents.classifier import classify
from guide_pipeline.agents.providers.base import LLMProvider
from guide_pipeline.config import GeneratorConfig
from guide_pipeline.orchestrator import GenerationError, GuideGenerator


async def generate_vscode_instructions_tool(
    purpose: str,
    provider: Optional[LLMProvider] = None,
    config: Optional[GeneratorConfig] = None,
) -> dict:
    """
    Generate a VS Code development guide for a project.

    Args:
        purpose: What the project is meant to do
        provider: Optional provider override (tests, embedding hosts)
        config: Optional configuration (defaults to environment)

    Returns:
        {"success": True, "content", "project_type", "provider"} or
        {"success": False, "error", "error_kind"}
    """
    generator = GuideGenerator(provider=provider, config=config)
    try:
        result = await generator.generate_instructions(purpose)
    except GenerationError as e:
        return {"success": False, "error": str(e), "error_kind": e.kind.value}

    return {"success": True, **result.to_dict()}


def classify_project_tool(purpose: str) -> dict:
    """
    Classify a project purpose without calling a provider.

    Returns:
        {"purpose", "project_type"}
    """
    project_type = classify(purpose)
    return {"purpose": (purpose or "").strip(), "project_type": project_type.value}
