from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator

from ..appenders.models import AppenderSpec, ConsoleAppenderSpec
from ..core.base_model_impl import BaseModel
from ..core.levels import parse_level


class LoggingConfig(BaseModel):
    """Declarative logging configuration: levels plus appenders."""

    level: str = "INFO"
    loggers: dict[str, str] = Field(default_factory=dict)
    appenders: list[AppenderSpec] = Field(
        default_factory=lambda: [ConsoleAppenderSpec()])

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        parse_level(value)
        return value.upper()

    @field_validator("loggers")
    @classmethod
    def _check_loggers(cls, value: dict[str, str]) -> dict[str, str]:
        for level in value.values():
            parse_level(level)
        return {name: level.upper() for name, level in value.items()}

    def level_number(self) -> int:
        return parse_level(self.level)

    def logger_levels(self) -> dict[str, int]:
        return {name: parse_level(level) for name, level in self.loggers.items()}


def load_logging_config(path: str | Path) -> LoggingConfig:
    text = Path(path).read_text(encoding="utf-8")
    return LoggingConfig.model_validate_json(text)
