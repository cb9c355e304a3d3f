"""
Calculator configuration.

Values come from the ``[calc]`` table of ``bracketcalc.toml``, then from
``BRACKETCALC_*`` environment variables; command-line options override
both.
"""

import logging
import os
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path

from bracketcalc.core.errors import ConfigError

DEFAULT_CONFIG_FILE = "bracketcalc.toml"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class CalcConfig:
    """Driver settings for the interactive loop."""

    prompt: str = "Type an expression!"
    show_tokens: bool = True
    show_tree: bool = True
    show_reconstructed: bool = True
    fail_fast: bool = False  # abort on the first bad line instead of continuing
    log_level: str = "WARNING"

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


def load_config(path: Path | None = None) -> CalcConfig:
    """Load configuration from a TOML file and the environment.

    Args:
        path: Config file. Defaults to ``bracketcalc.toml`` in the working
            directory; a missing default file is not an error.

    Raises:
        ConfigError: If the file is unreadable, holds unknown keys or
            wrongly typed values, or an environment override is invalid.
    """
    config = CalcConfig()

    if path is None:
        candidate = Path.cwd() / DEFAULT_CONFIG_FILE
        path = candidate if candidate.exists() else None
    elif not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    if path is not None:
        try:
            data = tomllib.loads(path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {path}: {e}") from e
        config = _apply_table(config, data.get("calc", {}), str(path))

    return _apply_env(config)


def _apply_table(config: CalcConfig, table: dict, origin: str) -> CalcConfig:
    if not isinstance(table, dict):
        raise ConfigError(f"[calc] in {origin} must be a table")
    known = {f.name for f in fields(CalcConfig)}
    updates = {}
    for key, value in table.items():
        if key not in known:
            raise ConfigError(f"Unknown key {key!r} in [calc] of {origin}")
        expected = type(getattr(config, key))
        if not isinstance(value, expected):
            raise ConfigError(
                f"Key {key!r} in {origin} must be {expected.__name__}, got {type(value).__name__}"
            )
        updates[key] = value
    return _validated(replace(config, **updates))


def _apply_env(config: CalcConfig) -> CalcConfig:
    updates: dict[str, object] = {}

    prompt = os.environ.get("BRACKETCALC_PROMPT")
    if prompt is not None:
        updates["prompt"] = prompt

    fail_fast = os.environ.get("BRACKETCALC_FAIL_FAST")
    if fail_fast is not None:
        updates["fail_fast"] = _parse_bool("BRACKETCALC_FAIL_FAST", fail_fast)

    log_level = os.environ.get("BRACKETCALC_LOG_LEVEL")
    if log_level is not None:
        updates["log_level"] = log_level

    return _validated(replace(config, **updates))


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}")


def _validated(config: CalcConfig) -> CalcConfig:
    level = config.log_level.upper()
    if level not in _LOG_LEVELS:
        raise ConfigError(f"Unknown log level: {config.log_level!r}")
    return replace(config, log_level=level)


def with_overrides(config: CalcConfig, **updates: object) -> CalcConfig:
    """Return a copy of ``config`` with ``updates`` applied and validated.

    Raises:
        ConfigError: If the resulting log level is unknown.
    """
    return _validated(replace(config, **updates))
