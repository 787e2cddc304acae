"""Process enumeration and ranking for debugger attach pickers."""

from .commands import POWERSHELL, PS_DARWIN, PS_LINUX, WMIC, resolve_fallback, select_listing
from .environment import EnvironmentProvider, StaticEnvironment, merge_environment
from .errors import AttachError, ExecutionFailed, UnsupportedPlatform
from .logger import ConsoleProcessLogger, NullProcessLogger, ProcessLogger
from .provider import AttachProcessProvider
from .ranking import compare_items, sort_attach_items
from .types import AttachItem, ProcessListCommand, ProcessListing

__all__ = [
    # commands
    "POWERSHELL",
    "PS_DARWIN",
    "PS_LINUX",
    "WMIC",
    "resolve_fallback",
    "select_listing",
    # environment
    "EnvironmentProvider",
    "StaticEnvironment",
    "merge_environment",
    # errors
    "AttachError",
    "ExecutionFailed",
    "UnsupportedPlatform",
    # logger
    "ConsoleProcessLogger",
    "NullProcessLogger",
    "ProcessLogger",
    # provider
    "AttachProcessProvider",
    # ranking
    "compare_items",
    "sort_attach_items",
    # types
    "AttachItem",
    "ProcessListCommand",
    "ProcessListing",
]
