"""Console output abstraction.

Services and the CLI write through ``ConsoleProtocol`` so they do not
depend on Rich directly; tests use ``MockConsole`` to capture output.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
    "OutputRecord",
]


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    ERROR = auto()
    INFO = auto()
    DIM = auto()  # Diagnostics, e.g. echoed commands
    HEADER = auto()


class ConsoleProtocol(Protocol):
    """Protocol for console output."""

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        """Print a message with optional styling."""
        ...

    def error(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...

    def table(self, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
        """Print rows under the given column headers."""
        ...


class RichConsole:
    """Console implementation using Rich.

    Diagnostics and errors go to stderr so that ``procpick list --json``
    keeps stdout machine readable.
    """

    def __init__(self) -> None:
        # Import Rich lazily to avoid import-time dependency
        from rich.console import Console

        self._console = Console()
        self._err_console = Console(stderr=True)
        self._style_map = {
            Style.DEFAULT: "",
            Style.ERROR: "red bold",
            Style.INFO: "cyan",
            Style.DIM: "dim",
            Style.HEADER: "blue bold",
        }

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        console = self._err_console if style == Style.DIM else self._console
        rich_style = self._style_map.get(style, "")
        if rich_style:
            console.print(message, style=rich_style, markup=False, highlight=False)
        else:
            console.print(message, markup=False, highlight=False)

    def error(self, message: str) -> None:
        self._err_console.print(f"[red bold]error:[/red bold] {message}")

    def info(self, message: str) -> None:
        self._console.print(f"[cyan]info:[/cyan] {message}")

    def table(self, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
        from rich.table import Table

        table = Table(box=None, header_style="blue bold", pad_edge=False)
        for header in headers:
            table.add_column(header, overflow="fold")
        for row in rows:
            table.add_row(*row)
        self._console.print(table)


@dataclass
class OutputRecord:
    """A single output record for MockConsole."""

    message: str
    style: Style


def _empty_outputs() -> list[OutputRecord]:
    return []


@dataclass
class MockConsole:
    """Console implementation that captures output for testing."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"error: {message}", Style.ERROR))

    def info(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"info: {message}", Style.INFO))

    def table(self, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
        self.outputs.append(OutputRecord("  ".join(headers), Style.HEADER))
        for row in rows:
            self.outputs.append(OutputRecord("  ".join(row), Style.DEFAULT))

    # Test helpers

    def clear(self) -> None:
        self.outputs.clear()

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        return "\n".join(self.messages)

    def has_error(self) -> bool:
        return any(o.style == Style.ERROR for o in self.outputs)

    def find(self, substring: str) -> list[OutputRecord]:
        """Find all outputs containing a substring."""
        return [o for o in self.outputs if substring in o.message]

    def count(self, style: Style) -> int:
        return sum(1 for o in self.outputs if o.style == style)
