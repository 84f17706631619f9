"""
skillhub CLI - Command Line Interface.
"""

import json
import sys
from pathlib import Path
from typing import Optional

import click
from loguru import logger
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

from skillhub import __version__
from skillhub.config import get_settings
from skillhub.core.parser import SkillFileError, load_skill_file
from skillhub.core.semver import InvalidVersionError, compare_semver
from skillhub.core.skill import ParsedSkill, ParseResult, slugify
from skillhub.hand.toml_writer import serialize_hand_toml
from skillhub.hand.translator import TranslateOptions, translate_to_hand
from skillhub.scoring.quality import compute_detailed_score
from skillhub.scoring.validation import validate_skill

console = Console()


def setup_logging(verbose: bool = False):
    """Configure logging."""
    settings = get_settings()
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else settings.log_level)
    if settings.log_file:
        logger.add(settings.log_file, level="DEBUG")


def _load_or_exit(path: str) -> ParsedSkill:
    try:
        result = load_skill_file(path)
    except SkillFileError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    if not result.success:
        _display_parse_errors(result)
        sys.exit(1)
    return result.skill


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def main(verbose: bool):
    """skillhub - Parse, score and translate SKILL.md files."""
    setup_logging(verbose)


@main.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def lint(path: str):
    """Check a SKILL.md file and list every problem found."""
    skill = _load_or_exit(path)
    console.print(f"[green]✓[/green] {escape(skill.name)} v{escape(skill.version)} is valid")


@main.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print the breakdown as JSON")
def score(path: str, as_json: bool):
    """Compute the quality score of a SKILL.md file."""
    skill = _load_or_exit(path)
    breakdown = compute_detailed_score(skill)

    if as_json:
        click.echo(json.dumps(breakdown.to_dict(), indent=2))
        return

    console.print(Panel(
        f"[bold]{escape(skill.name)}[/bold]\n"
        f"Quality Score: [bold]{breakdown.total}/100[/bold]\n"
        f"Schema: {breakdown.schema}/25  Instructions: {breakdown.instructions}/75",
        title="Quality Score",
    ))
    for detail in breakdown.details:
        console.print(f"  [green]{detail}[/green]")


@main.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--slug", type=str, help="Slug to report (defaults to the slugified name)")
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
def validate(path: str, slug: Optional[str], as_json: bool):
    """Run the full validation report on a SKILL.md file."""
    skill = _load_or_exit(path)
    report = validate_skill(skill, slug or slugify(skill.name))

    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2))
    else:
        _display_report(report)

    if not report.publishable:
        sys.exit(1)


@main.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", type=click.Path(), help="Write HAND.toml here instead of stdout")
@click.option("--model-provider", type=str, help="Model provider")
@click.option("--model-id", type=str, help="Model identifier")
@click.option("--max-tokens", type=int, help="Max output tokens")
@click.option("--temperature", type=float, help="Sampling temperature")
@click.option("--timeout-seconds", type=int, help="Execution timeout")
@click.option("--source-url", type=str, help="Link back to the published skill")
def hand(
    path: str,
    output: Optional[str],
    model_provider: Optional[str],
    model_id: Optional[str],
    max_tokens: Optional[int],
    temperature: Optional[float],
    timeout_seconds: Optional[int],
    source_url: Optional[str],
):
    """Translate a SKILL.md file into HAND.toml."""
    skill = _load_or_exit(path)
    defaults = get_settings().hand

    options = TranslateOptions(
        model_provider=model_provider or defaults.model_provider,
        model_id=model_id or defaults.model_id,
        max_tokens=max_tokens if max_tokens is not None else defaults.max_tokens,
        temperature=temperature if temperature is not None else defaults.temperature,
        timeout_seconds=timeout_seconds if timeout_seconds is not None else defaults.timeout_seconds,
        source_url=source_url or "",
    )
    text = serialize_hand_toml(translate_to_hand(skill, options, defaults))

    if output:
        Path(output).write_text(text, encoding="utf-8")
        console.print(f"[green]HAND.toml saved to {output}[/green]")
    else:
        click.echo(text, nl=False)


@main.command()
@click.argument("a")
@click.argument("b")
def compare(a: str, b: str):
    """Compare two versions (prints 1, -1 or 0)."""
    try:
        click.echo(compare_semver(a, b))
    except InvalidVersionError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)


def _display_parse_errors(result: ParseResult):
    """Display parse errors as a checklist."""
    if result.structural:
        console.print("[red]Invalid SKILL.md:[/red]")
    else:
        console.print(f"[red]Invalid SKILL.md ({len(result.errors)} problems):[/red]")
    for err in result.errors:
        console.print(f"  [red]✗[/red] {err.field}: {escape(err.message)}")


def _display_report(report):
    """Display a validation report in rich format."""
    summary = report.get_summary()
    color = "green" if report.publishable else "red"

    console.print(Panel(
        f"[bold]{escape(report.slug)}[/bold]\n"
        f"Quality Score: [{color}]{report.quality_score}/100[/{color}]\n"
        f"Publishable: [{color}]{'yes' if report.publishable else 'no'}[/{color}]",
        title="Validation Report",
    ))

    table = Table()
    table.add_column("Check", style="cyan")
    table.add_column("Severity")
    table.add_column("Result")
    table.add_column("Message")

    sev_colors = {"error": "red", "warning": "yellow", "info": "blue"}
    for c in report.all_checks:
        sev = c.severity.value
        table.add_row(
            c.id,
            f"[{sev_colors[sev]}]{sev.upper()}[/{sev_colors[sev]}]",
            "[green]pass[/green]" if c.passed else "[red]fail[/red]",
            escape(c.message[:60] + "..." if len(c.message) > 60 else c.message),
        )
    console.print(table)

    console.print(
        f"\n[dim]{summary['passed']}/{summary['total']} passed, "
        f"{summary['errors']} errors, {summary['warnings']} warnings[/dim]"
    )


if __name__ == "__main__":
    main()
