from __future__ import annotations

import os
from dataclasses import dataclass

from ..appenders.models import (
    AppenderSpec,
    ConsoleAppenderSpec,
    FileAppenderSpec,
)
from ..core.levels import parse_level
from .config import LoggingConfig, load_logging_config


@dataclass(frozen=True, slots=True)
class LoggingSettings:
    level: str
    logger_name: str
    console_enabled: bool
    console_target: str
    file: str | None
    archive: bool
    rotate_when: str
    backup_count: int
    config_file: str | None

    @classmethod
    def from_env(cls) -> "LoggingSettings":
        level = _get_env_str("LOG_LEVEL", "INFO").upper()
        parse_level(level)
        console_target = _get_env_str("LOG_CONSOLE_TARGET", "stdout").lower()
        if console_target not in {"stdout", "stderr"}:
            raise ValueError(
                f"Invalid LOG_CONSOLE_TARGET: {console_target!r}")
        return cls(
            level=level,
            logger_name=_get_env_str("LOG_NAME", "app"),
            console_enabled=_get_env_bool("LOG_CONSOLE_ENABLED", True),
            console_target=console_target,
            file=_get_env_path("LOG_FILE", None),
            archive=_get_env_bool("LOG_ARCHIVE", True),
            rotate_when=_get_env_str("LOG_ROTATE_WHEN", "midnight"),
            backup_count=_get_env_int("LOG_BACKUP_COUNT", 14),
            config_file=_get_env_path("LOG_CONFIG_FILE", None),
        )

    def to_config(self) -> LoggingConfig:
        """Build the declarative configuration these settings describe.

        ``LOG_CONFIG_FILE`` wins over the individual variables.
        """
        if self.config_file:
            return load_logging_config(self.config_file)
        appenders: list[AppenderSpec] = []
        if self.console_enabled:
            appenders.append(ConsoleAppenderSpec(target=self.console_target))
        if self.file:
            appenders.append(
                FileAppenderSpec(
                    current_log_filename=self.file,
                    archive=self.archive,
                    rotate_when=self.rotate_when,
                    archived_file_count=self.backup_count,
                )
            )
        return LoggingConfig(level=self.level, appenders=appenders)


def load_logging_settings() -> LoggingSettings:
    return LoggingSettings.from_env()


def _get_env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _get_env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return int(value)


def _get_env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    value = value.strip().lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
    raise ValueError(f"Invalid bool env var {name}={value!r}")


def _get_env_path(name: str, default: str | None) -> str | None:
    value = os.getenv(name)
    if value is None:
        return default
    value = value.strip()
    if not value:
        return None
    return value
