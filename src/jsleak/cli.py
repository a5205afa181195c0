"""jsleak CLI: Typer application with scan, patterns, and init commands."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn
from rich.table import Table

from jsleak import __version__

app = typer.Typer(
    name="jsleak",
    help="Find leaked credentials in JavaScript resources.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _load(config: Optional[str], root: Path):
    from jsleak.config.loader import ConfigError, load_config
    from jsleak.patterns.registry import RegistryError, build_registry

    try:
        cfg = load_config(root, config)
        registry = build_registry(cfg, root)
    except (ConfigError, RegistryError) as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc
    return cfg, registry


# ── scan ──────────────────────────────────────────────────────────────────────


@app.command()
def scan(
    paths: List[Path] = typer.Argument(None, help="Files or directories to scan"),
    har: Optional[Path] = typer.Option(None, "--har", help="Scan script responses from a HAR capture"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .jsleak.toml"),
    tuning: Optional[str] = typer.Option(None, "--tuning", "-t", help="Heuristic preset: strict | lenient"),
    min_confidence: Optional[int] = typer.Option(None, "--min-confidence", min=0, max=100, help="Confidence floor (0-100)"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write JSON report to file"),
    reveal: bool = typer.Option(False, "--reveal", help="Show matched values instead of redacting them"),
    concurrency: Optional[int] = typer.Option(None, "--concurrency", min=1, help="Parallel content fetches"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output with per-candidate decisions"),
) -> None:
    """Scan JavaScript files, directories, or a HAR capture for secrets."""
    from jsleak.config.tuning import PRESETS
    from jsleak.feed.sources import FeedError, collect_sources, load_har
    from jsleak.log import configure_logging
    from jsleak.output import json_report, terminal
    from jsleak.scanner.engine import build_scanner

    configure_logging(verbose=verbose, debug=debug)

    if not paths and har is None:
        console.print("[bold red]Error:[/bold red] nothing to scan (give paths or --har)")
        raise typer.Exit(code=2)

    cfg, registry = _load(config, Path.cwd())

    # --- CLI overrides ---
    if tuning:
        if tuning not in PRESETS:
            console.print(f"[bold red]Invalid tuning:[/bold red] {tuning}")
            raise typer.Exit(code=2)
        cfg.scan.tuning = tuning  # type: ignore[assignment]
    if min_confidence is not None:
        cfg.scan.min_confidence = min_confidence
    if format:
        if format not in ("terminal", "json"):
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]
    if concurrency is not None:
        cfg.scan.concurrency = concurrency
    show_values = reveal or cfg.output.reveal

    # --- Collect sources ---
    sources: list = []
    if paths:
        missing = [p for p in paths if not p.exists()]
        if missing:
            console.print(f"[bold red]Not found:[/bold red] {', '.join(map(str, missing))}")
            raise typer.Exit(code=2)
        sources.extend(
            collect_sources(paths, cfg.feed.extensions, cfg.feed.max_file_size_kb)
        )
    if har is not None:
        try:
            sources.extend(load_har(har, cfg.feed.extensions))
        except FeedError as exc:
            console.print(f"[bold red]HAR error:[/bold red] {exc}")
            raise typer.Exit(code=2) from exc

    scanner = build_scanner(cfg, registry)

    if verbose or debug:
        console.print(f"[dim]Patterns loaded: {len(registry)}[/dim]")
        console.print(f"[dim]Tuning: {scanner.tuning.name} (floor {scanner.tuning.min_confidence})[/dim]")
        console.print(f"[dim]Sources: {len(sources)}[/dim]")

    # --- Run scan ---
    if cfg.output.format == "terminal" and sources:
        with Progress(
            TextColumn("[dim]Scanning[/dim]"),
            BarColumn(),
            MofNCompleteColumn(),
            console=console,
            transient=True,
        ) as progress:
            task = progress.add_task("scan", total=len(sources))
            result = asyncio.run(
                scanner.scan_sources(
                    sources,
                    lambda done, total: progress.update(task, completed=done),
                    concurrency=cfg.scan.concurrency,
                )
            )
    else:
        result = asyncio.run(
            scanner.scan_sources(sources, concurrency=cfg.scan.concurrency)
        )

    if debug:
        console.print(f"[dim]Scan duration: {result.scan_duration_ms:.0f}ms[/dim]")

    # --- Output ---
    if cfg.output.format == "terminal":
        terminal.render(result, reveal=show_values, show_summary=cfg.output.show_summary)
    else:
        print(json_report.render(result, reveal=show_values))

    if output:
        Path(output).write_text(json_report.render(result, reveal=show_values), encoding="utf-8")
        if verbose:
            console.print(f"[dim]Report written to {output}[/dim]")

    raise typer.Exit(code=1 if result.matches else 0)


# ── patterns ──────────────────────────────────────────────────────────────────


@app.command()
def patterns(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .jsleak.toml"),
) -> None:
    """List the active secret patterns."""
    from jsleak.scanner.validators import VALIDATORS

    _, registry = _load(config, Path.cwd())

    table = Table(title="jsleak patterns", border_style="dim", title_style="bold")
    table.add_column("Name", style="cyan")
    table.add_column("Validator", justify="center")
    table.add_column("Pattern", overflow="fold")
    for definition in registry.enabled_patterns():
        table.add_row(
            definition.name,
            "yes" if definition.name in VALIDATORS else "-",
            escape(definition.pattern),
        )
    Console().print(table)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .jsleak.toml in the current directory."""
    from jsleak.config.defaults import DEFAULT_TOML
    from jsleak.config.loader import CONFIG_FILENAME

    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]![/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"jsleak {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """jsleak: find leaked credentials in JavaScript resources."""
