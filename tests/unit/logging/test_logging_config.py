import pytest
from pydantic import ValidationError

from generix.logging.config import LoggingSettings
from generix.logging.level import LogLevel


@pytest.mark.parametrize(
    "env,expected",
    [
        ({}, LoggingSettings()),
        ({"LEVEL": "DEBUG"}, LoggingSettings(level="DEBUG")),
        ({"LEVEL": "warning"}, LoggingSettings(level="WARNING")),
        ({"JSON_FORMAT": "true"}, LoggingSettings(json_format=True)),
        ({"INCLUDE_TIMESTAMP": "false"}, LoggingSettings(include_timestamp=False)),
        ({"INCLUDE_LEVEL": "false"}, LoggingSettings(include_level=False)),
        ({"CONSOLE_ENABLED": "false"}, LoggingSettings(console_enabled=False)),
        (
            {"FILE_ENABLED": "true", "FILE_PATH": "/tmp/log.txt"},
            LoggingSettings(file_enabled=True, file_path="/tmp/log.txt"),
        ),
    ],
)
def test_logging_settings_env(monkeypatch, env, expected):
    for k, v in env.items():
        monkeypatch.setenv(f"GENERIX_LOGGING_{k}", v)
    settings = LoggingSettings.load()
    for name in LoggingSettings.model_fields:
        assert getattr(settings, name) == getattr(expected, name)


def test_default_settings():
    settings = LoggingSettings()

    assert settings.level == "INFO"
    assert settings.json_format is False
    assert settings.include_timestamp is True
    assert settings.include_level is True
    assert settings.console_enabled is True
    assert settings.file_enabled is False
    assert settings.file_path is None


def test_level_accepts_enum():
    assert LoggingSettings(level=LogLevel.ERROR).level == "ERROR"


def test_logging_settings_type_validation():
    with pytest.raises(ValidationError):
        LoggingSettings.model_validate({"json_format": "notabool"})
    with pytest.raises(ValidationError):
        LoggingSettings.model_validate({"level": 123})
    with pytest.raises(ValidationError):
        LoggingSettings.model_validate({"level": "TRACE"})


def test_log_level_conversions():
    import logging

    assert LogLevel.DEBUG.to_stdlib_level() == logging.DEBUG
    assert LogLevel.CRITICAL.to_stdlib_level() == logging.CRITICAL
    assert LogLevel.from_string("info") is LogLevel.INFO
    with pytest.raises(ValueError):
        LogLevel.from_string("TRACE")
