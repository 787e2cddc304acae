from __future__ import annotations

import functools
from dataclasses import dataclass
from pathlib import Path

import typer

from procpick.attach.environment import StaticEnvironment
from procpick.attach.logger import ConsoleProcessLogger, NullProcessLogger, ProcessLogger
from procpick.attach.provider import AttachProcessProvider
from procpick.core.config import CONFIG_FILENAME, Config, load_config
from procpick.core.errors import ErrorCode
from procpick.core.result import Err
from procpick.output.console import ConsoleProtocol, RichConsole
from procpick.platform.detection import PlatformInfo, detect
from procpick.platform.process import Executor, run_async


@dataclass(frozen=True, slots=True)
class CLIContext:
    platform: PlatformInfo
    config: Config
    console: ConsoleProtocol
    quiet: bool = False
    executor: Executor | None = None

    @property
    def logger(self) -> ProcessLogger:
        if self.quiet:
            return NullProcessLogger()
        return ConsoleProcessLogger(self.console)

    def _default_executor(self) -> Executor:
        return functools.partial(run_async, timeout=self.config.exec.timeout)

    def provider(self) -> AttachProcessProvider:
        return AttachProcessProvider(
            executor=self.executor or self._default_executor(),
            environment=StaticEnvironment(self.config.env),
            logger=self.logger,
            platform_info=self.platform,
        )


def _load(config_path: Path | None, console: ConsoleProtocol) -> Config:
    if config_path is None:
        default_path = Path.cwd() / CONFIG_FILENAME
        if not default_path.is_file():
            return Config()
        config_path = default_path

    result = load_config(config_path)
    if isinstance(result, Err):
        console.error(result.error.message)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))
    return result.value


def build_context(config_path: Path | None = None, *, quiet: bool = False) -> CLIContext:
    console = RichConsole()
    return CLIContext(
        platform=detect(),
        config=_load(config_path, console),
        console=console,
        quiet=quiet,
    )
