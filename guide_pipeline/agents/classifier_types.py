# guide_pipeline/agents/classifier_types.py
"""Data types for classification and guide generation."""

from dataclasses import dataclass, field
from datetime import date as date_type
from enum import Enum


class ProjectType(Enum):
    """Coarse project categories used to tailor a guide."""

    FRONTEND = "frontend"
    BACKEND = "backend"
    MOBILE = "mobile"
    FULLSTACK = "fullstack"
    DATA = "data"
    DEVOPS = "devops"
    GENERAL = "general"

    @classmethod
    def from_string(cls, value: str) -> "ProjectType":
        """Convert string to ProjectType, defaulting to GENERAL."""
        value = value.lower().strip()
        for member in cls:
            if member.value == value:
                return member
        return cls.GENERAL

    def __str__(self) -> str:
        return self.value


def format_date(value: date_type) -> str:
    """Render a date the way en-US short dates read (M/D/YYYY, no padding)."""
    return f"{value.month}/{value.day}/{value.year}"


@dataclass(frozen=True)
class GenerationRequest:
    """A single guide request."""

    purpose: str
    requested_at: date_type = field(default_factory=date_type.today)

    def __post_init__(self):
        object.__setattr__(self, "purpose", (self.purpose or "").strip())


@dataclass(frozen=True)
class PromptSpec:
    """Header and provider prompt for one request."""

    header_text: str
    body_prompt: str
    project_type: ProjectType
    date: str


@dataclass(frozen=True)
class GenerationResult:
    """Finished guide document."""

    content: str
    project_type: ProjectType = ProjectType.GENERAL
    provider: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary for tool responses."""
        return {
            "content": self.content,
            "project_type": self.project_type.value,
            "provider": self.provider,
        }
