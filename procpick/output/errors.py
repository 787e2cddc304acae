"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from procpick.attach.errors import AttachError, ExecutionFailed, UnsupportedPlatform
from procpick.core.errors import ErrorCode
from procpick.output.console import Style

if TYPE_CHECKING:
    from procpick.output.console import ConsoleProtocol

__all__ = ["attach_error_exit_code", "print_attach_error"]


def print_attach_error(error: AttachError, console: ConsoleProtocol) -> None:
    """Print an attach error to the console with appropriate formatting."""
    match error:
        case UnsupportedPlatform():
            console.error(error.message)
        case ExecutionFailed(error=process_error):
            console.error(error.message)
            # with exit 0 the message already carries the stderr text
            if process_error.returncode != 0 and process_error.stderr.strip():
                console.print(process_error.stderr.strip(), Style.DIM)


def attach_error_exit_code(error: AttachError) -> int:
    """Get exit code for an attach error."""
    match error:
        case UnsupportedPlatform():
            return int(ErrorCode.ENV_ERROR)
        case ExecutionFailed():
            return int(ErrorCode.EXEC_ERROR)
