"""Rich rendering for evaluation results — single explain view, batch table, history.

Human-facing tables go to the console passed in (stderr in the CLI);
result strings themselves are printed by the caller on stdout.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cocalc.models import Evaluation


def _fmt_status(result: Evaluation) -> str:
    """Colour the verdict: green ok, red error kind."""
    if result.ok:
        return "[green]ok[/green]"
    return f"[red]{result.verdict}[/red]"


def _fmt_value(result: Evaluation) -> str:
    if result.value is None:
        return "--"
    return repr(result.value)


def render_evaluation(result: Evaluation, console: Console) -> None:
    """Render one Evaluation as a two-column metric table."""
    table = Table(title="Evaluation", show_header=True, header_style="bold")
    table.add_column("Field", style="dim", min_width=12)
    table.add_column("Value", min_width=20)

    table.add_row("Expression", escape(result.expression) or "[dim](empty)[/dim]")
    table.add_row("Normalized", escape(result.normalized) or "--")
    table.add_row("Value", _fmt_value(result))
    table.add_row("Output", escape(result.output))
    table.add_row("Status", _fmt_status(result))

    console.print()
    console.print(table)
    console.print()


def render_batch(results: list[Evaluation], console: Console, title: str = "Batch") -> None:
    """Render a row per evaluated line plus an ok/failed summary."""
    if not results:
        console.print("[yellow]No expressions to evaluate.[/yellow]")
        return

    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Expression", min_width=16)
    table.add_column("Result", justify="right", min_width=8)
    table.add_column("Status", min_width=10)

    for i, result in enumerate(results, start=1):
        table.add_row(
            str(i),
            escape(result.expression),
            escape(result.output),
            _fmt_status(result),
        )

    failed = sum(1 for r in results if not r.ok)
    console.print()
    console.print(table)
    if failed:
        console.print(f"[red]{failed}/{len(results)} failed[/red]")
    else:
        console.print(f"[green]{len(results)}/{len(results)} ok[/green]")
    console.print()


def render_history(history: list[Evaluation], console: Console) -> None:
    render_batch(history, console, title="History")
