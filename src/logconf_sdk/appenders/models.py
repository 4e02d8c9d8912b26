from __future__ import annotations

import logging
import os
import sys
from logging.handlers import SysLogHandler, TimedRotatingFileHandler
from typing import Annotated, Literal

from pydantic import Field, field_validator

from ..core.base_model_impl import BaseModel
from ..core.errors import ConfigurationWarning
from ..core.levels import parse_level

DEFAULT_LOG_FORMAT = "%(levelname)-5s [%(asctime)s] %(name)s: %(message)s"
_ROTATE_WHEN = {"S", "M", "H", "D", "MIDNIGHT"} | {f"W{day}" for day in range(7)}


class _AppenderSpecBase(BaseModel):
    name: str | None = None
    threshold: str = "ALL"
    log_format: str = DEFAULT_LOG_FORMAT

    @field_validator("threshold")
    @classmethod
    def _check_threshold(cls, value: str) -> str:
        parse_level(value)
        return value.upper()

    @property
    def appender_name(self) -> str:
        return self.name or f"{getattr(self, 'type')}-appender"

    @property
    def destination(self) -> str:
        raise NotImplementedError

    def build_handler(self, logger_name: str) -> logging.Handler:
        """Create the handler for this appender.

        Setup problems are raised as :class:`ConfigurationWarning`.
        """
        handler = self._create_handler(logger_name)
        handler.set_name(self.appender_name)
        handler.setLevel(parse_level(self.threshold))
        handler.setFormatter(logging.Formatter(self.log_format))
        return handler

    def _create_handler(self, logger_name: str) -> logging.Handler:
        raise NotImplementedError


class ConsoleAppenderSpec(_AppenderSpecBase):
    type: Literal["console"] = "console"
    target: Literal["stdout", "stderr"] = "stdout"

    @property
    def destination(self) -> str:
        return self.target

    def _create_handler(self, logger_name: str) -> logging.Handler:
        stream = sys.stdout if self.target == "stdout" else sys.stderr
        return logging.StreamHandler(stream)


class FileAppenderSpec(_AppenderSpecBase):
    type: Literal["file"] = "file"
    current_log_filename: str
    archive: bool = True
    rotate_when: str = "midnight"
    archived_file_count: int = Field(default=5, ge=0)

    @field_validator("rotate_when")
    @classmethod
    def _check_rotate_when(cls, value: str) -> str:
        if value.upper() not in _ROTATE_WHEN:
            raise ValueError(f"Invalid rotation interval: {value!r}")
        return value

    @property
    def destination(self) -> str:
        return self.current_log_filename

    def _create_handler(self, logger_name: str) -> logging.Handler:
        path = self.current_log_filename
        parent = os.path.dirname(path)
        if parent:
            try:
                os.makedirs(parent, exist_ok=True)
            except OSError as exc:
                raise ConfigurationWarning(
                    f"Failed to create parent directories for [{path}]",
                    destination=path,
                ) from exc
        try:
            if self.archive:
                return TimedRotatingFileHandler(
                    path,
                    when=self.rotate_when,
                    backupCount=self.archived_file_count,
                    encoding="utf-8",
                )
            return logging.FileHandler(path, encoding="utf-8")
        except OSError as exc:
            raise ConfigurationWarning(
                f"openFile({path}, append=true) call failed",
                destination=path,
            ) from exc


class SyslogAppenderSpec(_AppenderSpecBase):
    type: Literal["syslog"] = "syslog"
    host: str = "localhost"
    port: int = Field(default=514, gt=0, lt=65536)
    facility: str = "local0"

    @field_validator("facility")
    @classmethod
    def _check_facility(cls, value: str) -> str:
        value = value.lower()
        if value not in SysLogHandler.facility_names:
            raise ValueError(f"Invalid syslog facility: {value!r}")
        return value

    @property
    def destination(self) -> str:
        return f"{self.host}:{self.port}"

    def _create_handler(self, logger_name: str) -> logging.Handler:
        handler = SysLogHandler(
            address=(self.host, self.port),
            facility=SysLogHandler.facility_names[self.facility],
        )
        handler.ident = f"{logger_name}: " if logger_name else ""
        return handler


AppenderSpec = Annotated[
    ConsoleAppenderSpec | FileAppenderSpec | SyslogAppenderSpec,
    Field(discriminator="type"),
]
