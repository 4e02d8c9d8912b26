from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum


class StatusLevel(IntEnum):
    INFO = 0
    WARN = 1
    ERROR = 2


@dataclass(frozen=True, slots=True)
class StatusEvent:
    """A configuration-time message emitted by a logging runtime."""

    level: StatusLevel
    message: str
    origin: str | None = None
    timestamp: datetime = field(default_factory=datetime.now)
    error: BaseException | None = None

    def render(self) -> str:
        clock = self.timestamp.strftime("%H:%M:%S")
        millis = self.timestamp.microsecond // 1000
        origin = f" in {self.origin}" if self.origin else ""
        line = f"{clock},{millis:03d} |-{self.level.name}{origin} - {self.message}"
        if self.error is not None:
            line += f" ({type(self.error).__name__}: {self.error})"
        return line
