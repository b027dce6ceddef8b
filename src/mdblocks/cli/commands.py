"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from mdblocks.config import CONFIG_FILE, Settings, default_config_yaml, load_config
from mdblocks.core.export import render
from mdblocks.core.extract.extract import parse_file
from mdblocks.core.logging import setup_logging
from mdblocks.core.pipeline import run_extract


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except (ValueError, ValidationError) as e:
        _fail("Invalid configuration", e)
    setup_logging(settings.log_level)
    return settings


def parse_cmd(
    path: Annotated[Path, typer.Argument(help="Markdown file to parse")],
    anchor: Annotated[Optional[str], typer.Option("--anchor", help="Path segment preceding the main category")] = None,
    records: Annotated[bool, typer.Option("--records", help="Print persistence records instead of the parse result")] = False,
    ):
    """Parse a single file and print its content blocks as JSON."""
    settings = _settings(overrides={"anchor": anchor})
    if not path.is_file():
        _fail(f"Not a file: {path}")
    try:
        result = parse_file(path, settings)
    except (OSError, ValueError) as e:
        _fail(f"Failed to parse {path}", e)
    typer.echo(render(result, 'records' if records else 'result'))


def extract_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to extract from")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    anchor: Annotated[Optional[str], typer.Option("--anchor", help="Path segment preceding the main category")] = None,
    fmt: Annotated[Optional[str], typer.Option("--format", help="result or records")] = None,
    workers: Annotated[Optional[int], typer.Option("--workers", help="Parallel parse workers")] = None,
    ):
    """Recursively extract content blocks and write one JSON file per document."""
    settings = _settings(overrides={
        "output_dir": out, "anchor": anchor, "output_format": fmt, "workers": workers,
    })
    output_dir = Path(settings.output_dir)
    summary = run_extract(path, settings, output_dir)

    for src, out_file in summary.outputs:
        typer.echo(f"  {src} -> {out_file}")
    for src, error in summary.errors:
        typer.echo(f"  failed: {src}: {error}", err=True)
    typer.echo(
        f"Extracted {summary.parsed_files} of {summary.processed_files} document(s), "
        f"{summary.total_blocks} block(s) to {output_dir}/"
    )
    if not summary.ok:
        raise typer.Exit(1)


def init_cmd(
    force: Annotated[bool, typer.Option("--force", help="Overwrite an existing config.yaml")] = False,
    ):
    """Write a config.yaml with default settings to the current directory."""
    target = Path(CONFIG_FILE)
    if target.exists() and not force:
        typer.echo(f"{CONFIG_FILE} already exists; use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(default_config_yaml())
    typer.echo(f"Wrote default settings to {CONFIG_FILE}")
