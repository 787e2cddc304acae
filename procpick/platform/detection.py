"""Operating system detection.

Detection is done lazily and cached. Only the three families that have a
process listing mechanism are recognized; everything else is UNKNOWN.
"""

from __future__ import annotations

import sys as _sys
from dataclasses import dataclass
from enum import Enum, auto
from functools import lru_cache

__all__ = ["Platform", "PlatformInfo", "detect", "detect_platform"]


class Platform(Enum):
    """Operating system family."""

    LINUX = auto()
    MACOS = auto()
    WINDOWS = auto()
    UNKNOWN = auto()

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True, slots=True)
class PlatformInfo:
    """Detected platform plus the raw ``sys.platform`` value it came from.

    The raw value is what gets shown to the user when the platform is not
    supported, since ``Platform.UNKNOWN`` alone says nothing useful.
    """

    platform: Platform
    system: str

    @property
    def name(self) -> str:
        """Display name: the family, or the raw system id when unknown."""
        if self.platform == Platform.UNKNOWN:
            return self.system
        return str(self.platform)

    def __str__(self) -> str:
        return self.name


def _classify(system: str) -> Platform:
    system = system.lower()
    if system.startswith("linux"):
        return Platform.LINUX
    if system.startswith("darwin"):
        return Platform.MACOS
    if system.startswith(("win32", "cygwin", "msys")):
        return Platform.WINDOWS
    return Platform.UNKNOWN


@lru_cache(maxsize=1)
def detect_platform() -> Platform:
    """Detect the current operating system (cached)."""
    # NOTE: avoid platform.system() on Windows, it may query WMI and hang.
    return _classify(_sys.platform)


@lru_cache(maxsize=1)
def detect() -> PlatformInfo:
    """Detect platform information (cached)."""
    return PlatformInfo(platform=detect_platform(), system=_sys.platform)
