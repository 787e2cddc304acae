from __future__ import annotations

import asyncio
from pathlib import Path

import typer

from procpick.cli.context import build_context
from procpick.core.result import Err
from procpick.output.console import Style
from procpick.output.errors import attach_error_exit_code, print_attach_error


def platform(
    config: Path | None = typer.Option(None, "--config", help="Path to procpick.toml."),
) -> None:
    """Show the detected platform and the process listing command it uses."""
    ctx = build_context(config, quiet=True)

    ctx.console.print(f"platform: {ctx.platform}")
    result = asyncio.run(ctx.provider().resolve_listing())
    if isinstance(result, Err):
        print_attach_error(result.error, ctx.console)
        raise typer.Exit(code=attach_error_exit_code(result.error))

    listing = result.value
    ctx.console.print(f"listing: {listing.name}")
    ctx.console.print(str(listing.command), Style.DIM)
