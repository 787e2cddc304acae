"""Exit codes for CLI commands.

The values are process exit codes and should remain stable:
- 0: Success
- 1: User error (bad option, unreadable config file)
- 2: Environment error (unsupported operating system)
- 3: Execution error (the process listing command failed)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands."""

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    EXEC_ERROR = 3

