"""Attach item provider: list, parse and rank local processes.

The pipeline for one call is:

1. detect the platform (unsupported platforms fail before anything runs)
2. pick the listing for it
3. on Windows, probe for PowerShell and fall back to WMIC if it's missing
4. run the listing command, treating stderr output as a failure
5. parse with the listing's own parser and rank the result
"""

from __future__ import annotations

from procpick.core.result import Err, Ok, Result
from procpick.platform.detection import PlatformInfo, detect
from procpick.platform.process import Executor, run_async

from .commands import resolve_fallback, select_listing
from .environment import EnvironmentProvider, StaticEnvironment, merge_environment
from .errors import AttachError, ExecutionFailed
from .logger import NullProcessLogger, ProcessLogger
from .ranking import sort_attach_items
from .types import AttachItem, ProcessListing

__all__ = ["AttachProcessProvider"]


class AttachProcessProvider:
    """Produce the ranked list of processes a debugger can attach to.

    Every call lists processes afresh; nothing is cached between calls, so
    concurrent calls are independent.
    """

    def __init__(
        self,
        executor: Executor = run_async,
        environment: EnvironmentProvider | None = None,
        logger: ProcessLogger | None = None,
        platform_info: PlatformInfo | None = None,
    ) -> None:
        self._executor = executor
        self._environment = environment or StaticEnvironment()
        self._logger = logger or NullProcessLogger()
        self._platform_info = platform_info

    async def get_attach_items(self) -> Result[list[AttachItem], AttachError]:
        result = await self.get_process_entries()
        if isinstance(result, Err):
            return result
        return Ok(sort_attach_items(result.value))

    async def resolve_listing(self) -> Result[ProcessListing, AttachError]:
        """Work out which listing would be used, running the probe if needed."""
        resolved = await self._resolve()
        if isinstance(resolved, Err):
            return resolved
        listing, _ = resolved.value
        return Ok(listing)

    async def get_process_entries(self) -> Result[list[AttachItem], AttachError]:
        """Unsorted process entries, in the order the listing tool printed them."""
        resolved = await self._resolve()
        if isinstance(resolved, Err):
            return resolved
        listing, env = resolved.value

        cmd = listing.command
        output = await self._executor(cmd.command, cmd.args, env=env, throw_on_stderr=True)
        self._logger.log_process(cmd.command, cmd.args, {"throw_on_stderr": True})

        if isinstance(output, Err):
            return Err(ExecutionFailed(output.error))
        return Ok(listing.parse(output.value.stdout))

    async def _resolve(self) -> Result[tuple[ProcessListing, dict[str, str]], AttachError]:
        # env is fetched once and shared by the probe and the listing
        selected = select_listing(self._platform())
        if isinstance(selected, Err):
            return selected

        env = await self._env()
        listing = await resolve_fallback(selected.value, self._executor, env, self._logger)
        return Ok((listing, env))

    def _platform(self) -> PlatformInfo:
        return self._platform_info or detect()

    async def _env(self) -> dict[str, str]:
        overrides = await self._environment.get_environment_variables()
        return merge_environment(overrides)
