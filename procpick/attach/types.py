"""Data types shared by the attach pipeline."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

__all__ = [
    "AttachItem",
    "ProcessListCommand",
    "ProcessListing",
    "ProcessParser",
]


@dataclass(frozen=True, slots=True)
class AttachItem:
    """A process offered to the user as a debugger attach target.

    Attributes:
        pid: Process id, positive.
        process_name: Short executable/image name, never empty.
        command_line: Full invocation including arguments; empty when the
            listing tool does not expose it.
    """

    pid: int
    process_name: str
    command_line: str = ""

    @property
    def label(self) -> str:
        return self.process_name

    @property
    def description(self) -> str:
        return str(self.pid)

    @property
    def detail(self) -> str:
        return self.command_line

    @property
    def display_label(self) -> str:
        return f"{self.process_name} ({self.pid})"

    @property
    def is_python(self) -> bool:
        """True when the raw process name starts with ``python``."""
        return self.process_name.startswith("python")

    def to_dict(self) -> dict[str, object]:
        return {
            "pid": self.pid,
            "processName": self.process_name,
            "commandLine": self.command_line,
            "displayLabel": self.display_label,
            "description": self.description,
        }


@dataclass(frozen=True, slots=True)
class ProcessListCommand:
    """An external command that prints the process table."""

    command: str
    args: tuple[str, ...]

    @property
    def argv(self) -> tuple[str, ...]:
        return (self.command, *self.args)

    def __str__(self) -> str:
        return " ".join(self.argv)


ProcessParser = Callable[[str], list[AttachItem]]


@dataclass(frozen=True, slots=True)
class ProcessListing:
    """A listing command together with the parser for its output.

    When ``probe`` is set it is run first; if it finds nothing, ``fallback``
    is used instead of this listing.
    """

    name: str
    command: ProcessListCommand
    parse: ProcessParser
    probe: ProcessListCommand | None = None
    fallback: ProcessListing | None = None
