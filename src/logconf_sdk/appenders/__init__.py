from .models import (
    DEFAULT_LOG_FORMAT,
    AppenderSpec,
    ConsoleAppenderSpec,
    FileAppenderSpec,
    SyslogAppenderSpec,
)

__all__ = [
    "AppenderSpec",
    "ConsoleAppenderSpec",
    "DEFAULT_LOG_FORMAT",
    "FileAppenderSpec",
    "SyslogAppenderSpec",
]
