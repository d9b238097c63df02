"""Configuration and telemetry shared by every component."""

from .config import ConfigError, TelemetrySettings, load_settings

__all__ = ["ConfigError", "TelemetrySettings", "load_settings"]
