from __future__ import annotations


class LoggingConfigError(Exception):
    """Base exception for logging configuration errors."""


class ConfigurationWarning(LoggingConfigError):
    """Raised by an appender that cannot be set up.

    The runtime converts it into an ERROR status event; it never reaches the
    caller of ``configure``.
    """

    def __init__(self, message: str, *, destination: str | None = None) -> None:
        super().__init__(message)
        self.destination = destination


class CaptureAlreadyActiveError(LoggingConfigError):
    """Raised when a status capture is already running on a runtime."""


class ResourceReleaseError(LoggingConfigError):
    """Raised after detaching appenders when one or more failed to close."""

    def __init__(self, message: str, *,
                 errors: tuple[BaseException, ...] = ()) -> None:
        super().__init__(message)
        self.errors = errors
