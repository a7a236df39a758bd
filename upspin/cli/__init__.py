"""
Command-Line Interface

Commands:
    upspin-get get   - Download a public file
    upspin-get info  - Show how a path parses and whether it is public

Usage:
    # Download into the current directory as small.jpg
    upspin-get get augie@upspin.io/Images/Augie/small.jpg

    # Download to a chosen file
    upspin-get get augie@upspin.io/Images/Augie/small.jpg -o augie.jpg

    # Use a specific upspin binary and config
    upspin-get --command ~/go/bin/upspin --config-file ~/upspin/config info augie@upspin.io/Images
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from upspin.api.client import Upspin
from upspin.config import UpspinConfig
from upspin.errors import EmptyPathError, UpspinError
from upspin.types.path import UpspinPath

__all__ = ["main", "app"]

app = typer.Typer(
    name="upspin-get",
    help="Download public files from Upspin",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


@app.callback()
def configure(
    ctx: typer.Context,
    command: Optional[str] = typer.Option(
        None,
        "--command", "-c",
        help="upspin executable (default: UPSPIN_COMMAND or 'upspin')",
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config-file",
        help="upspin config file passed as -config",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Log upspin invocations",
    ),
) -> None:
    """Download public files from Upspin."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

    config = UpspinConfig().with_overrides(
        command=command,
        config_file=str(config_file) if config_file else None,
    )
    ctx.obj = Upspin(config)


@app.command()
def get(
    ctx: typer.Context,
    path: str = typer.Argument(
        ...,
        help="Upspin path, e.g. augie@upspin.io/Images/Augie/small.jpg",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output", "-o",
        help="Output file (default: the path's file name in the current directory)",
    ),
) -> None:
    """Download a public file."""
    client: Upspin = ctx.obj

    try:
        result = client.get(path, output)
    except UpspinError as e:
        err_console.print(f"[red]{e}[/]")
        raise typer.Exit(code=1)

    console.print(f"Downloaded file {result.file_name}")


@app.command()
def info(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Upspin path"),
) -> None:
    """Show the parts of a path and whether it is public."""
    client: Upspin = ctx.obj
    parsed = UpspinPath.parse(path)

    try:
        file_name = parsed.file_name
    except EmptyPathError:
        file_name = ""

    public = client.is_public(parsed)

    table = Table(title=parsed.full_path)
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    table.add_row("Owner", parsed.owner)
    table.add_row("Path", parsed.path)
    table.add_row("File name", file_name)
    table.add_row("Public", "[green]yes[/]" if public else "[yellow]no[/]")

    console.print(table)


def main() -> None:
    """Entry point for the CLI."""
    load_dotenv()
    app()
