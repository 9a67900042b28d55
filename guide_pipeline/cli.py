"""Guide Pipeline CLI."""

import asyncio
import sys
from dataclasses import replace
from pathlib import Path

import click
from dotenv import find_dotenv, load_dotenv
from rich.console import Console
from rich.markdown import Markdown
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


@click.group()
def main():
    """Guide Pipeline - AI-generated VS Code development guides."""
    load_dotenv(find_dotenv(usecwd=True))


@main.command()
def version():
    """Show version."""
    from . import __version__
    console.print(f"guide-pipeline v{__version__}")


@main.command()
def types():
    """List project types and the keywords that select them."""
    from .agents.classifier import KEYWORD_GROUPS
    from .agents.classifier_types import ProjectType

    table = Table()
    table.add_column("Priority", style="dim")
    table.add_column("Type")
    table.add_column("Keywords")

    for priority, (project_type, keywords) in enumerate(KEYWORD_GROUPS, start=1):
        table.add_row(str(priority), project_type.value, ", ".join(keywords))
    table.add_row("-", ProjectType.GENERAL.value, "(no match)")

    console.print(table)


@main.command()
@click.argument("purpose")
def classify(purpose: str):
    """Show the project type a purpose is classified as."""
    from .agents.classifier import classify as classify_purpose

    project_type = classify_purpose(purpose)
    console.print(f"[bold]{project_type.value}[/bold]")


@main.command()
@click.argument("purpose")
@click.option("--provider", "-p", default=None, help="Provider: gemini, openai or anthropic")
@click.option("--model", "-m", default=None, help="Override the provider's default model")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Write the guide to this file instead of printing it")
@click.option("--raw", is_flag=True, help="Print plain Markdown instead of rendering it")
def generate(purpose: str, provider: str, model: str, output: Path, raw: bool):
    """Generate a VS Code development guide for PURPOSE."""
    from .config import GeneratorConfig
    from .orchestrator import ConfigurationError, GenerationError, GuideGenerator
    from .utils.logging import setup_logging

    try:
        config = GeneratorConfig.from_env()
    except ConfigurationError as e:
        err_console.print(f"[red]Failed ({e.kind.value}): {e}[/red]")
        sys.exit(1)
    if provider:
        config = replace(config, provider=provider.lower())
    if model:
        config = replace(config, model=model)
    setup_logging(config=config)

    generator = GuideGenerator(config=config)
    try:
        with err_console.status(f"Generating guide with {config.provider}..."):
            result = asyncio.run(generator.generate_instructions(purpose))
    except GenerationError as e:
        err_console.print(f"[red]Failed ({e.kind.value}): {e}[/red]")
        sys.exit(1)

    if output:
        output.write_text(result.content, encoding="utf-8")
        console.print(f"[green]Guide written to {output} ({result.project_type.value})[/green]")
    elif raw:
        click.echo(result.content)
    else:
        console.print(Markdown(result.content))


if __name__ == "__main__":
    main()
