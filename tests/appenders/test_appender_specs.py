from __future__ import annotations

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

import pytest
from pydantic import ValidationError

from logconf_sdk import (
    ConfigurationWarning,
    ConsoleAppenderSpec,
    FileAppenderSpec,
    LoggingConfig,
    SyslogAppenderSpec,
)


def test_appenders_parse_from_camel_case_json() -> None:
    config = LoggingConfig.model_validate_json(
        """
        {
          "level": "warn",
          "loggers": {"noisy.lib": "error"},
          "appenders": [
            {"type": "console", "target": "stderr"},
            {"type": "file", "currentLogFilename": "/var/log/app.log",
             "archive": false},
            {"type": "syslog", "host": "logs.internal", "facility": "LOCAL3"}
          ]
        }
        """
    )

    console, file, syslog = config.appenders
    assert isinstance(console, ConsoleAppenderSpec)
    assert console.destination == "stderr"
    assert isinstance(file, FileAppenderSpec)
    assert file.destination == "/var/log/app.log"
    assert file.archive is False
    assert isinstance(syslog, SyslogAppenderSpec)
    assert syslog.facility == "local3"
    assert syslog.destination == "logs.internal:514"
    assert config.level_number() == logging.WARNING
    assert config.logger_levels() == {"noisy.lib": logging.ERROR}


def test_default_config_has_console_appender() -> None:
    config = LoggingConfig()

    assert [spec.type for spec in config.appenders] == ["console"]
    assert config.level == "INFO"


@pytest.mark.parametrize(
    "payload",
    [
        {"type": "file"},
        {"type": "unknown"},
        {"type": "console", "target": "printer"},
        {"type": "console", "threshold": "LOUD"},
        {"type": "syslog", "facility": "nowhere"},
        {"type": "file", "currentLogFilename": "a.log", "rotateWhen": "weekly"},
        {"type": "file", "currentLogFilename": "a.log", "bogus": 1},
    ],
)
def test_invalid_appenders_are_rejected(payload: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        LoggingConfig.model_validate({"appenders": [payload]})


def test_invalid_root_level_is_rejected() -> None:
    with pytest.raises(ValidationError):
        LoggingConfig(level="chatty")


def test_appender_name_defaults_to_type() -> None:
    assert ConsoleAppenderSpec().appender_name == "console-appender"
    assert ConsoleAppenderSpec(name="out").appender_name == "out"


def test_console_handler_uses_threshold_and_format() -> None:
    spec = ConsoleAppenderSpec(threshold="warn", log_format="%(message)s")

    handler = spec.build_handler("svc")

    assert handler.level == logging.WARNING
    assert handler.get_name() == "console-appender"
    assert handler.formatter is not None
    assert handler.formatter._fmt == "%(message)s"


def test_file_handler_creates_parent_directories(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "dir" / "app.log"
    spec = FileAppenderSpec(current_log_filename=str(path), archived_file_count=3)

    handler = spec.build_handler("svc")
    try:
        assert isinstance(handler, TimedRotatingFileHandler)
        assert handler.backupCount == 3
        assert path.exists()
    finally:
        handler.close()


def test_file_handler_without_archive_is_plain(tmp_path: Path) -> None:
    spec = FileAppenderSpec(current_log_filename=str(tmp_path / "app.log"),
                            archive=False)

    handler = spec.build_handler("svc")
    try:
        assert type(handler) is logging.FileHandler
    finally:
        handler.close()


def test_file_handler_reports_blocked_parent(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.touch()
    path = str(blocker / "app.log")
    spec = FileAppenderSpec(current_log_filename=path, archive=False)

    with pytest.raises(ConfigurationWarning) as excinfo:
        spec.build_handler("svc")

    assert excinfo.value.destination == path
    assert path in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, OSError)


def test_rotate_when_is_checked_before_opening(tmp_path: Path) -> None:
    path = tmp_path / "app.log"

    with pytest.raises(ValidationError):
        FileAppenderSpec(current_log_filename=str(path), rotate_when="hourly")

    assert not path.exists()
    spec = FileAppenderSpec(current_log_filename=str(path), rotate_when="W6")
    handler = spec.build_handler("svc")
    handler.close()
