from __future__ import annotations

import pytest

from vim_editor.runtime import ConfigError, TelemetrySettings, load_settings
from vim_editor.runtime import telemetry


def test_defaults_without_environment() -> None:
    assert load_settings({}) == TelemetrySettings()


def test_settings_read_from_prefixed_variables() -> None:
    settings = load_settings(
        {
            "VIM_EDITOR_LOGGER": "editor-data",
            "VIM_EDITOR_LOG_LEVEL": "debug",
            "VIM_EDITOR_LOG_FILE": "/tmp/editor.log",
            "VIM_EDITOR_LOG_JSON": "yes",
            "VIM_EDITOR_LOG_BUFFERED": "1",
            "VIM_EDITOR_LOG_BUFFER_SIZE": "512",
            "VIM_EDITOR_DISABLE_CONSOLE": "on",
            "VIM_EDITOR_NO_COLOR": "true",
            "UNRELATED": "ignored",
        }
    )

    assert settings.logger_name == "editor-data"
    assert settings.log_level == "DEBUG"
    assert settings.log_file == "/tmp/editor.log"
    assert settings.json_format is True
    assert settings.buffered is True
    assert settings.buffer_size == 512
    assert settings.console is False
    assert settings.colored is False


def test_false_flags() -> None:
    settings = load_settings({"VIM_EDITOR_LOG_JSON": "0", "VIM_EDITOR_NO_COLOR": "no"})

    assert settings.json_format is False
    assert settings.colored is True


@pytest.mark.parametrize("raw", ["many", "0", "-4"])
def test_bad_buffer_size_raises(raw: str) -> None:
    with pytest.raises(ConfigError) as excinfo:
        load_settings({"VIM_EDITOR_LOG_BUFFER_SIZE": raw})

    assert excinfo.value.name == "LOG_BUFFER_SIZE"
    assert isinstance(excinfo.value, ValueError)


def test_load_settings_uses_process_environment(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("VIM_EDITOR_LOG_LEVEL", "warning")

    assert load_settings().log_level == "WARNING"


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError, match="Unknown preset"):
        telemetry.configure(preset="verbose")


def test_span_reraises_block_errors() -> None:
    with pytest.raises(KeyError):
        with telemetry.span("test::failure", component="tests"):
            raise KeyError("boom")
