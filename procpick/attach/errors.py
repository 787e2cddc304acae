from __future__ import annotations

from dataclasses import dataclass

from procpick.platform.process import ProcessError


@dataclass(frozen=True, slots=True)
class UnsupportedPlatform:
    """No process listing mechanism exists for this operating system."""

    name: str

    @property
    def message(self) -> str:
        return f"Operating system '{self.name}' not supported."


@dataclass(frozen=True, slots=True)
class ExecutionFailed:
    """The process listing command could not run or wrote to stderr."""

    error: ProcessError

    @property
    def message(self) -> str:
        return f"Could not retrieve the process list: {self.error}"


AttachError = UnsupportedPlatform | ExecutionFailed
