"""Parser for ``wmic process get ... /FORMAT:list`` output.

This is the fallback on Windows machines without PowerShell. Each process
is printed as a block of ``Key=Value`` lines, in alphabetical key order, so
``ProcessId`` is always the last line of a block.
"""

from __future__ import annotations

from dataclasses import dataclass

from .powershell_parser import strip_dos_device_prefix
from .types import AttachItem, ProcessListCommand

__all__ = ["WMIC_COMMAND", "parse_processes"]

WMIC_COMMAND = ProcessListCommand(
    command="wmic",
    args=("process", "get", "Name,ProcessId,CommandLine", "/FORMAT:list"),
)

_NAME_KEY = "Name"
_COMMAND_LINE_KEY = "CommandLine"
_PID_KEY = "ProcessId"


@dataclass
class _Block:
    name: str = ""
    command_line: str = ""
    pid: str = ""

    def to_item(self) -> AttachItem | None:
        try:
            pid = int(self.pid)
        except ValueError:
            return None
        if pid <= 0 or not self.name:
            return None
        return AttachItem(pid=pid, process_name=self.name, command_line=self.command_line)


def parse_processes(output: str) -> list[AttachItem]:
    """Parse WMIC list output into attach items.

    Blocks whose ``ProcessId`` is not a positive integer, or that have no
    ``Name``, are dropped.
    """
    items: list[AttachItem] = []
    block = _Block()

    # wmic writes \r\r\n line endings; splitlines() handles every variant
    for line in output.splitlines():
        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or not key:
            continue
        value = value.strip()

        if key == _NAME_KEY:
            block.name = value
        elif key == _COMMAND_LINE_KEY:
            block.command_line = strip_dos_device_prefix(value)
        elif key == _PID_KEY:
            block.pid = value
            item = block.to_item()
            if item is not None:
                items.append(item)
            block = _Block()

    return items
