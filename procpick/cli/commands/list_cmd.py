from __future__ import annotations

import asyncio
import json
from pathlib import Path

import typer

from procpick.attach.types import AttachItem
from procpick.cli.context import build_context
from procpick.core.result import Err
from procpick.output.errors import attach_error_exit_code, print_attach_error


def list_processes(
    as_json: bool = typer.Option(False, "--json", help="Print items as JSON."),
    python_only: bool = typer.Option(False, "--python-only", help="Only list python processes."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Don't echo executed commands."),
    config: Path | None = typer.Option(None, "--config", help="Path to procpick.toml."),
) -> None:
    """List processes that a debugger can attach to, most relevant first."""
    ctx = build_context(config, quiet=quiet)

    result = asyncio.run(ctx.provider().get_attach_items())
    if isinstance(result, Err):
        print_attach_error(result.error, ctx.console)
        raise typer.Exit(code=attach_error_exit_code(result.error))

    items = result.value
    if python_only:
        items = [item for item in items if item.is_python]

    if as_json:
        typer.echo(json.dumps([item.to_dict() for item in items], indent=2))
        return

    if not items:
        ctx.console.info("no processes found")
        return
    ctx.console.table(("PID", "NAME", "COMMAND LINE"), [_row(item) for item in items])


def _row(item: AttachItem) -> tuple[str, str, str]:
    return (item.description, item.label, item.detail)
