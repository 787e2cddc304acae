"""Platform abstraction layer."""

from .detection import (
    Platform,
    PlatformInfo,
    detect,
    detect_platform,
)
from .process import (
    ExecOutput,
    Executor,
    ProcessError,
    run_async,
)

__all__ = [
    # detection
    "Platform",
    "PlatformInfo",
    "detect",
    "detect_platform",
    # process
    "ExecOutput",
    "Executor",
    "ProcessError",
    "run_async",
]
