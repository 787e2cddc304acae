"""Typed configuration loading.

The optional ``procpick.toml`` looks like:

    [exec]
    timeout = 10.0

    [env]
    LANG = "C"
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_float, get_table

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_EXEC_TIMEOUT",
    "Config",
    "ConfigError",
    "ExecConfig",
    "load_config",
]

CONFIG_FILENAME = "procpick.toml"

# Seconds allowed for each external command (probe and listing)
DEFAULT_EXEC_TIMEOUT = 30.0


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class ExecConfig:
    """External command execution settings."""

    timeout: float | None = DEFAULT_EXEC_TIMEOUT


def _empty_env() -> dict[str, str]:
    return {}


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container.

    Attributes:
        exec: Execution settings for the probe and listing commands.
        env: Environment variable overrides merged over ``os.environ``.
    """

    exec: ExecConfig = field(default_factory=ExecConfig)
    env: dict[str, str] = field(default_factory=_empty_env)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML).

        Raises:
            ValueError: If a value has the wrong shape.
        """
        exec_table: StrDict = get_table(data, "exec") or {}
        env_table: StrDict = get_table(data, "env") or {}

        timeout = get_float(exec_table, "timeout")
        if timeout is not None and timeout <= 0:
            raise ValueError(f"exec.timeout must be positive, got {timeout}")

        env: dict[str, str] = {}
        for key, value in env_table.items():
            if not isinstance(value, str):
                raise ValueError(f"env.{key} must be a string")
            env[key] = value

        return cls(
            exec=ExecConfig(timeout=timeout if timeout is not None else DEFAULT_EXEC_TIMEOUT),
            env=env,
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))
