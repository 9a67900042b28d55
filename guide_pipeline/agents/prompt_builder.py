# guide_pipeline/agents/prompt_builder.py
"""Builds the guide header and the provider prompt."""

from datetime import date as date_type
from typing import Union

from guide_pipeline.agents.classifier_types import ProjectType, PromptSpec, format_date
from guide_pipeline.agents.prompts import load_prompt

GUIDE_TEMPLATE = "vscode_guide"

HEADER_TEMPLATE = """# {purpose} - VS Code Development Guide

Generated on: {date}
Project Type: {project_type}

---"""

# Typographic punctuation replaced in the body prompt
PUNCTUATION_MAP = str.maketrans({
    "\u201c": "\"",
    "\u201d": "\"",
    "\u2018": "'",
    "\u2019": "'",
    "\u2013": "-",
    "\u2014": "-",
})

FOOTER = """---
*Generated with AI assistance for VS Code development*
*Memory Bank MCP - @tuncer-byte*"""


def normalize_text(text: str) -> str:
    """Replace smart quotes and dashes with ASCII equivalents."""
    return text.translate(PUNCTUATION_MAP)


def build_header(purpose: str, project_type: ProjectType, date: str) -> str:
    """Render the document header prepended to every guide."""
    return HEADER_TEMPLATE.format(
        purpose=purpose, date=date, project_type=project_type.value
    )


def build_prompt(
    purpose: str,
    project_type: ProjectType,
    date: Union[date_type, str],
) -> PromptSpec:
    """
    Build the header and provider prompt for a guide.

    Pure: identical inputs always produce identical text. The body prompt
    has typographic punctuation normalized so every backend receives the
    same text. The header keeps the purpose as given.

    Args:
        purpose: Project purpose as given by the user
        project_type: Classified project type
        date: Generation date, either a date or pre-rendered text

    Returns:
        PromptSpec holding header, body prompt, type and rendered date
    """
    date_text = date if isinstance(date, str) else format_date(date)
    body = load_prompt(GUIDE_TEMPLATE).format(
        purpose=normalize_text(purpose),
        project_type=project_type.value,
        date=date_text,
    )
    return PromptSpec(
        header_text=build_header(purpose, project_type, date_text),
        body_prompt=body,
        project_type=project_type,
        date=date_text,
    )


def assemble_document(spec: PromptSpec, generated: str) -> str:
    """Wrap provider output with the header and attribution footer."""
    return f"{spec.header_text}\n\n{generated}\n\n{FOOTER}"
