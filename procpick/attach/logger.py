"""Diagnostic recording of the external commands the pipeline runs."""

from __future__ import annotations

import shlex
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Protocol

from procpick.output.console import Style

if TYPE_CHECKING:
    from procpick.output.console import ConsoleProtocol

__all__ = ["ConsoleProcessLogger", "NullProcessLogger", "ProcessLogger"]


class ProcessLogger(Protocol):
    """Fire-and-forget sink for command invocations and diagnostics."""

    def log_process(self, command: str, args: Sequence[str], options: Mapping[str, object]) -> None:
        ...

    def log_message(self, message: str) -> None: ...


class ConsoleProcessLogger:
    """Echo commands to a console in the dim diagnostic style."""

    def __init__(self, console: ConsoleProtocol) -> None:
        self._console = console

    def log_process(self, command: str, args: Sequence[str], options: Mapping[str, object]) -> None:
        line = f"> {shlex.join([command, *args])}"
        if options:
            opts = ", ".join(f"{k}={v}" for k, v in options.items())
            line += f"  ({opts})"
        self._console.print(line, Style.DIM)

    def log_message(self, message: str) -> None:
        self._console.print(message, Style.DIM)


class NullProcessLogger:
    def log_process(self, command: str, args: Sequence[str], options: Mapping[str, object]) -> None:
        pass

    def log_message(self, message: str) -> None:
        pass
