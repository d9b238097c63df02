"""Environment-driven settings for the telemetry layer."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "VIM_EDITOR_"

_TRUE_VALUES = {"1", "true", "yes", "on"}


class ConfigError(ValueError):
    """Raised when an environment variable holds an unusable value."""

    def __init__(self, name: str, raw: str, reason: str) -> None:
        super().__init__(f"{ENV_PREFIX}{name}={raw!r}: {reason}")
        self.name = name
        self.raw = raw


@dataclass(frozen=True, slots=True)
class TelemetrySettings:
    logger_name: str = "vim_editor"
    log_level: str = "INFO"
    log_file: str = ""
    json_format: bool = False
    buffered: bool = False
    buffer_size: int = 2048
    console: bool = True
    colored: bool = True


def _lookup(env: Mapping[str, str], name: str) -> Optional[str]:
    return env.get(f"{ENV_PREFIX}{name}")


def _flag(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = _lookup(env, name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE_VALUES


def _positive_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = _lookup(env, name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigError(name, raw, "expected an integer") from exc
    if value <= 0:
        raise ConfigError(name, raw, "must be positive")
    return value


def load_settings(env: Optional[Mapping[str, str]] = None) -> TelemetrySettings:
    """Build settings from ``VIM_EDITOR_*`` variables (``os.environ`` by default)."""

    source = os.environ if env is None else env
    return TelemetrySettings(
        logger_name=_lookup(source, "LOGGER") or "vim_editor",
        log_level=(_lookup(source, "LOG_LEVEL") or "INFO").upper(),
        log_file=_lookup(source, "LOG_FILE") or "",
        json_format=_flag(source, "LOG_JSON", False),
        buffered=_flag(source, "LOG_BUFFERED", False),
        buffer_size=_positive_int(source, "LOG_BUFFER_SIZE", 2048),
        console=not _flag(source, "DISABLE_CONSOLE", False),
        colored=not _flag(source, "NO_COLOR", False),
    )


__all__ = ["ENV_PREFIX", "ConfigError", "TelemetrySettings", "load_settings"]
