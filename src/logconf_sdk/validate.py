"""Validate the logging configuration described by the environment.

The configuration is applied to an isolated runtime so the process-wide
logging setup is left alone. Problems are printed to stderr.
"""

from __future__ import annotations

import logging
import sys

from dotenv import find_dotenv, load_dotenv

from .logging.factory import build_logging_configurator
from .logging.settings import load_logging_settings
from .metrics.registry import MetricRegistry
from .runtime.impl.standard import StandardLoggingRuntime
from .status.models import StatusLevel
from .status.printer import DiagnosticStream

_LOGGER = logging.getLogger(__name__)


def validate(errors_stream: DiagnosticStream | None = None) -> int:
    """Return the number of ERROR status events the configuration raised."""
    settings = load_logging_settings()
    configurator = build_logging_configurator(
        settings,
        runtime=StandardLoggingRuntime.isolated(name="validate"),
        errors_stream=errors_stream,
    )
    try:
        configurator.configure(MetricRegistry(), settings.logger_name)
    finally:
        configurator.stop()
    errors = [
        event for event in configurator.last_status
        if event.level >= StatusLevel.ERROR
    ]
    _LOGGER.debug("Validated %d appender(s), %d error(s)",
                  len(configurator.appenders), len(errors))
    return len(errors)


def run() -> int:
    """Load ``.env`` and validate; exit status 1 when errors were reported."""
    load_dotenv(find_dotenv(usecwd=True))
    return 1 if validate(sys.stderr) else 0


if __name__ == "__main__":
    raise SystemExit(run())
