"""CLI for the cocalc expression evaluator.

Usage:
    python -m cocalc eval "1+2*3"              # Print 7
    python -m cocalc eval "3/(2-2)" --explain  # ERR plus the failure reason
    python -m cocalc eval -- "--5"             # Leading '-' needs the '--' guard
    python -m cocalc batch expressions.txt     # One expression per line
    python -m cocalc repl                      # Interactive calculator
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from cocalc.config import Settings
from cocalc.evaluator import evaluate_detailed
from cocalc.logging_config import configure_logging
from cocalc.report import render_batch, render_evaluation, render_history
from cocalc.session import Session

app = typer.Typer(
    name="cocalc",
    help="Evaluate arithmetic expressions (+ - * / % and parentheses)",
    no_args_is_help=True,
)
console = Console(stderr=True)

_QUIT_WORDS = ("q", "quit", "exit")


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override COCALC_LOG_LEVEL (DEBUG, INFO, ...)"),
) -> None:
    """Configure logging before any command runs."""
    settings = Settings.from_env()
    configure_logging(log_level or settings.log_level)


@app.command("eval")
def cmd_eval(
    expression: str = typer.Argument(help="Expression to evaluate (e.g., '(1+2)*3')"),
    explain: bool = typer.Option(False, "--explain", "-e", help="Show normalized text and failure reason"),
    as_json: bool = typer.Option(False, "--json", help="Print the full evaluation as JSON"),
) -> None:
    """Evaluate one expression. Exits 1 when the result is ERR."""
    result = evaluate_detailed(expression)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
    else:
        typer.echo(result.output)
        if explain:
            render_evaluation(result, console)

    if not result.ok:
        raise typer.Exit(1)


@app.command("batch")
def cmd_batch(
    path: Path = typer.Argument(help="File with one expression per line"),
    as_json: bool = typer.Option(False, "--json", help="Print all evaluations as a JSON list"),
) -> None:
    """Evaluate every non-blank line of a file."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Cannot read {escape(str(path))}: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    results = [evaluate_detailed(line) for line in text.splitlines() if line.strip()]

    if as_json:
        typer.echo(json.dumps([r.to_dict() for r in results], indent=2))
    else:
        for r in results:
            typer.echo(r.output)
        render_batch(results, console, title=f"Batch: {path.name}")

    if any(not r.ok for r in results):
        raise typer.Exit(1)


@app.command("repl")
def cmd_repl() -> None:
    """Interactive calculator. Lines starting with + - * / % continue from the last result."""
    settings = Settings.from_env()
    session = Session()
    console.print("[dim]Type an expression; 'history', 'clear' or 'q' to quit.[/dim]")

    while True:
        try:
            line = console.input(escape(settings.prompt))
        except (EOFError, KeyboardInterrupt):
            break

        command = line.strip().lower()
        if not command:
            continue
        if command in _QUIT_WORDS:
            break
        if command == "history":
            render_history(session.history, console)
            continue
        if command == "clear":
            session.clear()
            console.print("[dim]Cleared.[/dim]")
            continue

        result = session.submit(line)
        typer.echo(result.output)
        if not result.ok:
            console.print(f"[red]{result.verdict}[/red]")


if __name__ == "__main__":
    app()
