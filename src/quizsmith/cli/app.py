# src/quizsmith/cli/app.py
"""Command-line interface for Quizsmith.

A thin Typer wrapper around the generation pipeline:
1. Parses args (via Typer)
2. Loads config (.env, quizsmith.yaml, QUIZSMITH_* vars)
3. Calls generate_quiz_from_source
4. Renders the quiz with Rich
"""

from __future__ import annotations

import logging
import sys

import typer
from rich.console import Console, Group
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from quizsmith import __version__
from quizsmith.config import build_settings, load_config, load_env_file, validate_config
from quizsmith.exceptions import ConfigError, QuizsmithError
from quizsmith.generation import QuizPipeline
from quizsmith.models import QuestionSet
from quizsmith.taxonomy import Difficulty, TaxonomyCategory

app = typer.Typer(
    name="quizsmith",
    help="Quizsmith - generate multiple-choice quizzes from source text.",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

OPTION_LABELS = "ABCD"


def version_callback(value: bool) -> None:
    if value:
        console.print(f"quizsmith {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Quizsmith - generate multiple-choice quizzes from source text."""
    load_env_file()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )
    # LiteLLM is chatty at DEBUG
    logging.getLogger("LiteLLM").setLevel(logging.WARNING)


def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    with open(source, encoding="utf-8") as f:
        return f.read()


def render_quiz(quiz: QuestionSet, show_answers: bool = True) -> None:
    """Print a quiz as one panel per question."""
    for number, question in enumerate(quiz.questions, start=1):
        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column(style="bold")
        table.add_column()
        for label, option in zip(OPTION_LABELS, question.options, strict=False):
            marker = "[green]✓[/green]" if show_answers and option.is_correct else ""
            table.add_row(f"{label}.", f"{escape(option.option_text)} {marker}".rstrip())

        body: list = [table]
        if show_answers:
            body.append(f"\n[dim]Explanation:[/dim] {escape(question.explanation)}")
            body.append(f"[dim]Source:[/dim] [italic]{escape(question.source_quote)}[/italic]")

        title = f"[bold]{number}. {escape(question.question_text)}"
        console.print(Panel(Group(*body), title=title, title_align="left"))


@app.command()
def generate(
    source: str = typer.Argument(..., help="File with source text, or '-' for stdin"),
    difficulty: Difficulty = typer.Option(
        Difficulty.MEDIUM, "--difficulty", "-d", help="Quiz difficulty"
    ),
    count: int = typer.Option(5, "--count", "-n", min=1, help="Number of questions"),
    taxonomy: TaxonomyCategory = typer.Option(
        None, "--taxonomy", "-t", help="Use a single taxonomy category instead of the blend"
    ),
    no_refine: bool = typer.Option(False, "--no-refine", help="Skip the refinement pass"),
    as_json: bool = typer.Option(False, "--json", help="Print the quiz as JSON"),
    hide_answers: bool = typer.Option(False, "--hide-answers", help="Do not mark answers"),
    config_file: str = typer.Option(None, "--config", "-c", help="Path to config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Generate a quiz from a source text file."""
    _configure_logging(verbose)

    try:
        config = load_config(config_file)
        for warning in validate_config(config):
            err_console.print(f"[yellow]Warning:[/yellow] {escape(warning)}")
        settings = build_settings(config)
    except ConfigError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        if e.suggestion:
            err_console.print(f"[dim]{escape(e.suggestion)}[/dim]")
        raise typer.Exit(1) from e

    if no_refine:
        settings = settings.with_overrides(refine=False)

    try:
        source_text = _read_source(source)
    except OSError as e:
        err_console.print(f"[red]Error:[/red] Cannot read {escape(source)}: {escape(str(e))}")
        raise typer.Exit(1) from e

    if not source_text.strip():
        err_console.print("[red]Error:[/red] Source text is empty")
        raise typer.Exit(1)

    pipeline = QuizPipeline.from_settings(settings)
    try:
        with err_console.status("Generating quiz..."):
            quiz = pipeline.generate(difficulty, count, source_text, taxonomy)
    except QuizsmithError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e

    if as_json:
        console.print_json(quiz.model_dump_json())
        return

    if len(quiz) < count:
        err_console.print(
            f"[yellow]Only {len(quiz)} of {count} questions could be generated.[/yellow]"
        )
    render_quiz(quiz, show_answers=not hide_answers)


if __name__ == "__main__":
    app()
