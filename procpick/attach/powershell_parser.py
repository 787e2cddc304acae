"""Parser for the PowerShell ``Win32_Process`` listing on Windows."""

from __future__ import annotations

import json

from procpick.core.structured import as_obj_list, as_str_dict, get_int

from .types import AttachItem, ProcessListCommand

__all__ = [
    "DOS_DEVICE_PREFIX",
    "POWERSHELL_COMMAND",
    "parse_processes",
    "strip_dos_device_prefix",
]

# Get-CimInstance is missing on old PowerShell versions; Get-WmiObject is
# gone from PowerShell 7. The script picks whichever exists.
_SCRIPT = (
    "$processes = if (Get-Command Get-CimInstance -ErrorAction SilentlyContinue) "
    "{ Get-CimInstance Win32_Process } else { Get-WmiObject Win32_Process }; "
    "$processes | % { @{ name = $_.Name; commandLine = $_.CommandLine; processId = $_.ProcessId } } "
    "| ConvertTo-Json"
)

POWERSHELL_COMMAND = ProcessListCommand(command="powershell", args=("-Command", _SCRIPT))

# Kernel object namespace prefix found on some image paths, e.g. \??\C:\Windows\...
DOS_DEVICE_PREFIX = "\\??\\"


def strip_dos_device_prefix(command_line: str) -> str:
    if command_line.startswith(DOS_DEVICE_PREFIX):
        return command_line[len(DOS_DEVICE_PREFIX) :]
    return command_line


def _parse_entry(entry: object) -> AttachItem | None:
    data = as_str_dict(entry)
    if data is None:
        return None

    pid = get_int(data, "processId")
    # pid 0 is the System Idle Process, which can't be attached to
    if pid is None or pid <= 0:
        return None

    name = data.get("name")
    if not isinstance(name, str) or not name.strip():
        return None

    command_line = data.get("commandLine")
    if not isinstance(command_line, str):
        command_line = ""

    return AttachItem(
        pid=pid,
        process_name=name.strip(),
        command_line=strip_dos_device_prefix(command_line.strip()),
    )


def parse_processes(output: str) -> list[AttachItem]:
    """Parse the JSON printed by ``ConvertTo-Json``.

    ``ConvertTo-Json`` prints a bare object instead of an array when there
    is a single process. Output that is not valid JSON yields no items.
    """
    try:
        document: object = json.loads(output)
    except ValueError:
        return []

    entries = as_obj_list(document)
    if entries is None:
        entries = [document] if as_str_dict(document) is not None else []

    items: list[AttachItem] = []
    for entry in entries:
        item = _parse_entry(entry)
        if item is not None:
            items.append(item)
    return items
