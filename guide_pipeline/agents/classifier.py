# guide_pipeline/agents/classifier.py
"""Keyword classifier - maps a project purpose to a ProjectType."""

from guide_pipeline.agents.classifier_types import ProjectType

# Checked in order; the first group with a matching keyword wins.
KEYWORD_GROUPS: tuple[tuple[ProjectType, tuple[str, ...]], ...] = (
    (ProjectType.FRONTEND, ("frontend", "web", "site", "ui")),
    (ProjectType.BACKEND, ("backend", "api", "service")),
    (ProjectType.MOBILE, ("mobile", "android", "ios")),
    (ProjectType.FULLSTACK, ("fullstack", "full-stack")),
    (ProjectType.DATA, ("data", "analytics", "ml", "ai")),
    (ProjectType.DEVOPS, ("devops", "infrastructure", "cloud")),
)


def classify(purpose: str) -> ProjectType:
    """
    Classify a project purpose by keyword.

    Matching is a case-insensitive substring test, so "building" counts
    as "ui". Purposes that match more than one group resolve to the
    earliest group in KEYWORD_GROUPS.

    Args:
        purpose: Free-text project description (may be empty)

    Returns:
        The matching ProjectType, or ProjectType.GENERAL
    """
    purpose_lower = (purpose or "").lower()

    for project_type, keywords in KEYWORD_GROUPS:
        if any(keyword in purpose_lower for keyword in keywords):
            return project_type

    return ProjectType.GENERAL
