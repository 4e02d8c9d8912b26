from __future__ import annotations

import logging

from .registry import MetricRegistry

DEFAULT_PREFIX = "logging.appender"


class InstrumentedHandler(logging.Handler):
    """Counts every record it sees, in total and per level."""

    def __init__(self, registry: MetricRegistry, *,
                 prefix: str = DEFAULT_PREFIX) -> None:
        super().__init__(level=logging.NOTSET)
        self._registry = registry
        self._prefix = prefix
        for suffix in ("all", "debug", "info", "warning", "error", "critical"):
            registry.counter(f"{prefix}.{suffix}")

    def emit(self, record: logging.LogRecord) -> None:
        self._registry.inc(f"{self._prefix}.all")
        self._registry.inc(f"{self._prefix}.{record.levelname.lower()}")
