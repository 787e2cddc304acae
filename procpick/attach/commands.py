"""Choice of the process listing mechanism for a platform.

Each platform maps to one ``ProcessListing``, a command paired with the
parser for its output. Windows has a fallback: when PowerShell is not
installed the WMIC listing is used instead.
"""

from __future__ import annotations

from collections.abc import Mapping

from procpick.core.result import Err, Ok, Result
from procpick.platform.detection import Platform, PlatformInfo
from procpick.platform.process import Executor

from . import powershell_parser, ps_parser, wmic_parser
from .errors import UnsupportedPlatform
from .logger import ProcessLogger
from .types import ProcessListCommand, ProcessListing

__all__ = [
    "POWERSHELL",
    "PS_DARWIN",
    "PS_LINUX",
    "WHERE_POWERSHELL_COMMAND",
    "WMIC",
    "listing_for",
    "resolve_fallback",
    "select_listing",
]

WHERE_POWERSHELL_COMMAND = ProcessListCommand(command="where", args=("powershell",))

PS_LINUX = ProcessListing("ps", ps_parser.PS_LINUX_COMMAND, ps_parser.parse_processes)
PS_DARWIN = ProcessListing("ps", ps_parser.PS_DARWIN_COMMAND, ps_parser.parse_processes)
WMIC = ProcessListing("wmic", wmic_parser.WMIC_COMMAND, wmic_parser.parse_processes)
POWERSHELL = ProcessListing(
    "powershell",
    powershell_parser.POWERSHELL_COMMAND,
    powershell_parser.parse_processes,
    probe=WHERE_POWERSHELL_COMMAND,
    fallback=WMIC,
)

_LISTINGS: dict[Platform, ProcessListing] = {
    Platform.MACOS: PS_DARWIN,
    Platform.LINUX: PS_LINUX,
    Platform.WINDOWS: POWERSHELL,
}


def listing_for(platform: Platform) -> ProcessListing | None:
    """Preferred listing for a platform, None if there is none."""
    return _LISTINGS.get(platform)


def select_listing(info: PlatformInfo) -> Result[ProcessListing, UnsupportedPlatform]:
    listing = listing_for(info.platform)
    if listing is None:
        return Err(UnsupportedPlatform(name=info.name))
    return Ok(listing)


async def _probe_failure(
    probe: ProcessListCommand,
    executor: Executor,
    env: Mapping[str, str],
) -> str | None:
    """Run the availability probe. Returns None on success, else the reason it failed."""
    try:
        result = await executor(probe.command, probe.args, env=env, throw_on_stderr=False)
    except Exception as e:  # noqa: BLE001
        return f"check failed ({e})"

    if isinstance(result, Err):
        return f"check failed ({result.error})"
    if not result.value.stdout.strip():
        return "not found"
    return None


async def resolve_fallback(
    listing: ProcessListing,
    executor: Executor,
    env: Mapping[str, str],
    logger: ProcessLogger,
) -> ProcessListing:
    """Swap a listing for its fallback when its probe finds nothing.

    Any failure of the probe counts as "not available"; it is logged and
    never reported to the caller.
    """
    if listing.probe is None or listing.fallback is None:
        return listing

    reason = await _probe_failure(listing.probe, executor, env)
    if reason is None:
        return listing

    logger.log_message(f"{listing.name} {reason}, using {listing.fallback.name} fallback")
    return listing.fallback
