"""Asynchronous subprocess execution with Result-based error handling.

Usage:
    result = await run_async("ps", ["axww"], env=os.environ.copy())
    match result:
        case Ok(output):
            print(output.stdout)
        case Err(error):
            print(f"Failed: {error}")
"""

from __future__ import annotations

import asyncio
import contextlib
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Protocol

from procpick.core.result import Err, Ok, Result

__all__ = ["ExecOutput", "Executor", "ProcessError", "run_async"]


@dataclass(frozen=True, slots=True)
class ExecOutput:
    """Captured output of a finished process."""

    stdout: str
    stderr: str


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed subprocess execution.

    Attributes:
        command: The command that was executed, arguments included.
        returncode: Exit code of the process, -1 if it never ran to completion.
        stdout: Standard output (may be empty).
        stderr: Standard error, or a description of why the process failed.
    """

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        if self.returncode == 0:
            return f"{cmd_str} wrote to stderr: {self.stderr.strip()}"
        return f"{cmd_str} failed (exit {self.returncode})"


class Executor(Protocol):
    """Callable that runs an external command and captures its output."""

    async def __call__(
        self,
        command: str,
        args: Sequence[str],
        *,
        env: Mapping[str, str] | None = None,
        throw_on_stderr: bool = False,
    ) -> Result[ExecOutput, ProcessError]: ...


def _decode(data: bytes | None) -> str:
    if not data:
        return ""
    return data.decode(errors="replace")


async def run_async(
    command: str,
    args: Sequence[str],
    *,
    env: Mapping[str, str] | None = None,
    throw_on_stderr: bool = False,
    timeout: float | None = None,
) -> Result[ExecOutput, ProcessError]:
    """Execute a command and capture its output.

    Args:
        command: Executable to run (resolved through PATH).
        args: Arguments passed to the executable.
        env: Full environment for the child (inherits the current one if None).
        throw_on_stderr: Treat any stderr output as a failure.
        timeout: Maximum seconds to wait (None for no limit).

    Returns:
        Ok(ExecOutput) on success, Err(ProcessError) on failure.
    """
    cmd = (command, *args)
    try:
        proc = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            env=dict(env) if env is not None else None,
        )
    except OSError as e:
        return Err(ProcessError(command=cmd, returncode=-1, stdout="", stderr=str(e)))

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(proc.communicate(), timeout=timeout)
    except TimeoutError:
        # the child may exit on its own before the kill lands
        with contextlib.suppress(ProcessLookupError):
            proc.kill()
        await proc.wait()
        return Err(
            ProcessError(
                command=cmd,
                returncode=-1,
                stdout="",
                stderr=f"Command timed out after {timeout}s",
            )
        )

    stdout = _decode(stdout_bytes)
    stderr = _decode(stderr_bytes)
    returncode = proc.returncode if proc.returncode is not None else -1

    if returncode != 0 or (throw_on_stderr and stderr):
        return Err(ProcessError(command=cmd, returncode=returncode, stdout=stdout, stderr=stderr))

    return Ok(ExecOutput(stdout=stdout, stderr=stderr))
