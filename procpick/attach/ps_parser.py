"""Parser for ``ps`` output on Linux and macOS.

``ps`` pads a column to the width of its header. Giving the ``comm`` column
a fixed 50 character header makes the command name column fixed width, so
names that contain spaces can still be told apart from the arguments.
"""

from __future__ import annotations

import re

from .types import AttachItem, ProcessListCommand

__all__ = ["PS_DARWIN_COMMAND", "PS_LINUX_COMMAND", "parse_processes"]

COMM_COLUMN_WIDTH = 50
_COMM_COLUMN_TITLE = "a" * COMM_COLUMN_WIDTH
_FORMAT = f"pid=,comm={_COMM_COLUMN_TITLE},args="

PS_LINUX_COMMAND = ProcessListCommand(command="ps", args=("axww", "-o", _FORMAT))

# -c prints the bare executable name in comm instead of its full path
PS_DARWIN_COMMAND = ProcessListCommand(command="ps", args=("axww", "-o", _FORMAT, "-c"))

# pid, whitespace, the name column (ps keeps one of the 50 characters as a
# separator), whitespace, then the arguments.
_PS_LINE = re.compile(rf"^\s*([0-9]+)\s+(.{{{COMM_COLUMN_WIDTH - 1}}})\s+(.*)$")

# Trailing padding may be stripped when the arguments are empty. Only lines
# whose name part fits inside the column can take this form.
_PS_LINE_NO_ARGS = re.compile(r"^\s*([0-9]+)\s+(\S.*)$")


def _parse_line(line: str) -> AttachItem | None:
    match = _PS_LINE.match(line)
    if match is not None:
        pid, name, command_line = match.group(1), match.group(2), match.group(3)
    else:
        match = _PS_LINE_NO_ARGS.match(line)
        if match is None or len(match.group(2)) > COMM_COLUMN_WIDTH - 1:
            return None
        pid, name, command_line = match.group(1), match.group(2), ""

    name = name.strip()
    if int(pid) <= 0 or not name:
        return None
    return AttachItem(pid=int(pid), process_name=name, command_line=command_line.strip())


def parse_processes(output: str) -> list[AttachItem]:
    """Parse ``ps`` output into attach items.

    The first line is the column header. Blank lines and lines that do not
    match the column layout are skipped.
    """
    items: list[AttachItem] = []
    for line in output.splitlines()[1:]:
        line = line.rstrip()
        if not line:
            continue
        item = _parse_line(line)
        if item is not None:
            items.append(item)
    return items
