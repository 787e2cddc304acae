"""Environment for the external commands run by the pipeline."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Protocol

__all__ = ["EnvironmentProvider", "StaticEnvironment", "merge_environment"]


class EnvironmentProvider(Protocol):
    """Supplies environment variable overrides for external commands."""

    async def get_environment_variables(self) -> dict[str, str]: ...


class StaticEnvironment:
    """Overrides fixed at construction, usually the ``[env]`` config table."""

    def __init__(self, overrides: Mapping[str, str] | None = None) -> None:
        self._overrides = dict(overrides or {})

    async def get_environment_variables(self) -> dict[str, str]:
        return dict(self._overrides)


def merge_environment(
    overrides: Mapping[str, str],
    base: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Return ``base`` (the current environment by default) with ``overrides`` applied."""
    env = dict(os.environ if base is None else base)
    env.update(overrides)
    return env
