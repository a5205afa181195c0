"""Rich terminal reporter: confidence pills and a matches table."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from jsleak.findings.models import ScanResult
from jsleak.findings.redactor import redact


def _confidence_pill(score: int) -> Text:
    if score >= 90:
        style = "bold white on red"
    elif score >= 75:
        style = "bold white on dark_orange"
    elif score >= 60:
        style = "bold black on yellow"
    else:
        style = "bold black on bright_cyan"
    return Text(f" {score:>3} ", style=style)


def _short_source(source_id: str) -> str:
    tail = source_id.rstrip("/").rsplit("/", 1)[-1]
    return tail or source_id


def render(
    result: ScanResult,
    *,
    reveal: bool = False,
    show_summary: bool = True,
    console: Console | None = None,
) -> None:
    """Print scan results to the terminal using Rich."""
    console = console or Console(stderr=True)

    if not result.matches:
        console.print()
        console.print("[bold green]No secrets detected.[/bold green]")
        if show_summary:
            _print_summary(console, result)
        return

    console.print()
    table = Table(
        title="jsleak matches",
        show_lines=True,
        title_style="bold",
        border_style="dim",
    )
    table.add_column("Conf.", justify="center", width=7)
    table.add_column("Type", style="cyan", min_width=18)
    table.add_column("File", style="magenta")
    table.add_column("Offset", justify="right", style="green")
    table.add_column("Entropy", justify="right")
    table.add_column("Match", min_width=15)

    for m in result.by_confidence():
        table.add_row(
            _confidence_pill(m.confidence),
            m.type,
            _short_source(m.file),
            str(m.index),
            f"{m.entropy:.2f}",
            escape(redact(m.match, reveal=reveal)),
        )

    console.print(table)

    if show_summary:
        _print_summary(console, result)


def _print_summary(console: Console, result: ScanResult) -> None:
    console.print()
    console.print(f"[dim]Units scanned:[/dim]  {result.scanned_units}")
    console.print(f"[dim]Matches:[/dim]        {result.total_matches}")
    console.print(f"[dim]Skipped:[/dim]        {len(result.skipped_units)}")
    for s in result.skipped_units:
        console.print(f"  [dim]{escape(s.source_id)} ({escape(s.reason)})[/dim]")
    console.print(f"[dim]Failed:[/dim]         {len(result.failed_units)}")
    for s in result.failed_units:
        console.print(f"  [red]{escape(s.source_id)}[/red] [dim]{escape(s.reason)}[/dim]")
    console.print(f"[dim]Duration:[/dim]       {result.scan_duration_ms:.0f}ms")
