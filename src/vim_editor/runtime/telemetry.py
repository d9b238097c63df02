"""Telemetry services built on telelog.

The rest of the package only touches four entry points:

``configure(...)`` -- adopt a preset, an explicit config, or environment settings
``get_logger(name)`` -- fetch (and cache) a configured logger
``record_event(name, ...)`` -- emit a structured event at a chosen level
``span(name, ...)`` -- profile a block and optionally track it as a component
"""

from __future__ import annotations

from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

from .config import TelemetrySettings, load_settings

tl = cast(Any, telelog)

_LOGGERS: MutableMapping[str, Any] = {}
_CONFIG: Optional[Any] = None
_SETTINGS: Optional[TelemetrySettings] = None


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple, set)):
        return repr(value)
    return str(value)


def _pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), _stringify(value)) for key, value in data.items()]


def config_from_settings(settings: TelemetrySettings) -> Any:
    """Translate ``TelemetrySettings`` into a ``telelog.Config``."""

    config = tl.Config()
    config.with_min_level(settings.log_level)
    config.with_console_output(settings.console)
    if settings.console:
        config.with_colored_output(settings.colored)
    if settings.json_format:
        config.with_json_format(True)
    if settings.log_file:
        config.with_file_output(settings.log_file)
    if settings.buffered:
        config.with_buffering(True)
        config.with_buffer_size(settings.buffer_size)
    config.with_profiling(True)
    return config


def _preset(name: str, settings: TelemetrySettings) -> Any:
    config = tl.Config()
    key = name.lower()
    if key == "development":
        config.with_min_level("DEBUG")
        config.with_console_output(True)
        config.with_colored_output(True)
        config.with_json_format(False)
    elif key == "production":
        config.with_min_level("INFO")
        config.with_console_output(False)
        config.with_file_output(settings.log_file or "vim_editor.log")
        config.with_buffering(True)
    elif key in {"performance", "performance_analysis"}:
        config.with_min_level("DEBUG")
        config.with_console_output(False)
        config.with_json_format(True)
        config.with_buffering(True)
        config.with_file_output(settings.log_file or "vim_editor-performance.log")
    else:
        raise ValueError(f"Unknown preset '{name}'.")
    config.with_profiling(True)
    return config


def configure(
    *,
    config: Optional[Any] = None,
    preset: Optional[str] = None,
    settings: Optional[TelemetrySettings] = None,
) -> None:
    """Replace the active telelog configuration and drop cached loggers.

    ``config`` and ``preset`` are mutually exclusive. Without either, the
    configuration is derived from ``settings`` (environment by default).
    """

    global _CONFIG, _SETTINGS
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    _SETTINGS = settings or load_settings()
    if preset:
        config = _preset(preset, _SETTINGS)
    elif config is None:
        config = config_from_settings(_SETTINGS)
    else:
        config.with_profiling(True)

    _CONFIG = config
    _LOGGERS.clear()


def _active_config() -> Any:
    if _CONFIG is None:
        configure()
    return _CONFIG


def _default_logger_name() -> str:
    if _SETTINGS is None:
        configure()
    return cast(TelemetrySettings, _SETTINGS).logger_name


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` bound to the active configuration."""

    logger_name = name or _default_logger_name()
    if logger_name not in _LOGGERS:
        _LOGGERS[logger_name] = tl.Logger.with_config(logger_name, _active_config())
    return _LOGGERS[logger_name]


def _level_method(logger: Any, level: str) -> Tuple[Any, bool]:
    name = str(level).lower()
    structured = getattr(logger, f"{name}_with", None)
    if structured is not None:
        return structured, True
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    return plain, False


def _emit(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    method, structured = _level_method(logger, level)
    if structured:
        method(message, _pairs(payload))
    else:
        method(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` attached as key/value pairs."""

    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    """Lets the profiled block attach fields reported if the block fails."""

    name: str
    fields: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.fields[key] = _stringify(value)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile the enclosed block, tracked under ``component`` when given.

    ``metadata`` is pushed as logger context while the block runs. An
    escaping exception is logged as ``span::fail`` and re-raised.
    """

    log = get_logger(logger_name)
    handle = SpanHandle(name, {k: _stringify(v) for k, v in (metadata or {}).items()})
    context_keys = list(handle.fields)
    for key in context_keys:
        log.add_context(key, handle.fields[key])
    try:
        with ExitStack() as stack:
            if component:
                stack.enter_context(log.track_component(component))
            stack.enter_context(log.profile(name))
            yield handle
    except Exception as exc:
        payload = {"span": name, "component": component or "", **handle.fields}
        _emit(log, "error", "span::fail", {**payload, "reason": str(exc)})
        raise
    finally:
        for key in context_keys:
            log.remove_context(key)


__all__ = [
    "SpanHandle",
    "config_from_settings",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
