"""Obituary Parser CLI - Main entry point.

This module provides the command-line interface for the obituary parser.
"""

import json
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from obituary_parser.config import settings
from obituary_parser.extraction import ObituaryExtractor, quick_scan
from obituary_parser.ingestion import normalize_text
from obituary_parser.logging import setup_logging
from obituary_parser.schemas import FamilyRecord
from obituary_parser.storage import SQLiteGeocodeCache

app = typer.Typer(
    name="obit",
    help="Obituary Parser - Extract family relationships from obituary text",
    add_completion=False,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log rule matches"),
) -> None:
    """Configure logging for every command."""
    setup_logging("DEBUG" if verbose else settings.log_level)


def _collect_files(paths: list[Path], recursive: bool) -> list[Path]:
    files: list[Path] = []
    for path in paths:
        if path.is_file():
            files.append(path)
        elif path.is_dir() and recursive:
            files.extend(sorted(path.rglob("*.txt")))
        elif path.is_dir():
            console.print(
                f"[yellow]Skipping directory {path} (use --recursive to process directories)[/yellow]"
            )
    return files


def _build_extractor(geocode: bool, cache_db: Path | None) -> ObituaryExtractor:
    config = settings.model_copy(
        update={"geocode_enabled": geocode, "geocode_cache_db": cache_db}
    )
    return ObituaryExtractor.from_settings(config)


def _describe(value) -> str:
    if isinstance(value, list):
        return "\n".join(_describe(item) for item in value)
    if isinstance(value, dict):
        name = value.get("name")
        details = ", ".join(
            f"{key}: {_describe(item)}" for key, item in value.items() if key != "name"
        )
        if name is None:
            return details
        return f"{name} ({details})" if details else name
    return str(value)


def _print_record(path: Path, record: FamilyRecord) -> None:
    table = Table(show_header=True, header_style="bold cyan", title=path.name)
    table.add_column("Category", style="dim")
    table.add_column("Extracted")

    for category, value in record.to_dict().items():
        table.add_row(category.replace("_", " ").title(), _describe(value))

    console.print(table)
    console.print()


@app.command()
def parse(
    paths: list[Path] = typer.Argument(
        ..., help="Text files holding one obituary each (or directories with --recursive)", exists=True
    ),
    recursive: bool = typer.Option(
        False, "--recursive", "-r", help="Recursively search directories for .txt files"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of tables"),
    geocode: bool = typer.Option(
        settings.geocode_enabled, "--geocode/--no-geocode", help="Geocode birthplaces"
    ),
    cache_db: Path | None = typer.Option(
        settings.geocode_cache_db, "--cache-db", help="SQLite file for the geocode cache"
    ),
    quick: bool = typer.Option(
        False, "--quick", help="Loose keyword scan returning bare names"
    ),
) -> None:
    """Extract family relationships from obituary text files."""
    files = _collect_files(paths, recursive)
    if not files:
        console.print("[red]No files found to process.[/red]")
        raise typer.Exit(1)

    extractor = _build_extractor(geocode, cache_db)
    results: dict[str, dict | None] = {}

    for path in files:
        try:
            text = path.read_text(encoding="utf-8")
            if quick:
                results[str(path)] = quick_scan(normalize_text(text)) or None
                continue
            record = extractor.extract(text)
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            console.print(f"[red]Error processing {path}: {escape(str(e))}[/red]")
            continue

        results[str(path)] = record.to_dict() if record else None
        if as_json:
            continue
        if record is None:
            console.print(f"[yellow]{path.name}: no family information found[/yellow]\n")
        else:
            _print_record(path, record)

    if as_json:
        console.print_json(json.dumps(results))
    elif quick:
        for name, found in results.items():
            console.print(f"[bold cyan]{name}[/bold cyan]")
            for category, names in (found or {}).items():
                console.print(f"  [dim]{category}:[/dim] {', '.join(names)}")
            console.print()


@app.command("cache-stats")
def cache_stats(
    cache_db: Path = typer.Option(
        settings.geocode_cache_db or Path("./geocode_cache.db"),
        "--cache-db",
        help="SQLite file for the geocode cache",
    ),
) -> None:
    """Display statistics about the geocode cache."""
    console.print("\n[bold cyan]Obituary Parser - Geocode Cache[/bold cyan]\n")

    cache = SQLiteGeocodeCache(db_path=cache_db)

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Metric", style="dim")
    table.add_column("Value", justify="right")

    for key, value in cache.get_stats().items():
        table.add_row(key.replace("_", " ").title(), str(value))

    console.print(table)
    console.print()


@app.command()
def version() -> None:
    """Display version information."""
    from obituary_parser import __version__

    console.print(f"\n[bold cyan]Obituary Parser[/bold cyan] version {__version__}\n")


if __name__ == "__main__":
    app()
