from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from ..appenders.models import AppenderSpec
from ..metrics.registry import MetricRegistry
from ..status.manager import StatusManager
from ..status.printer import DiagnosticStream, StatusPrinter


class LoggingRuntimeProtocol(Protocol):
    """Narrow view of a logging runtime used by the configurator."""

    @property
    def status_manager(self) -> StatusManager:
        ...

    @property
    def printer(self) -> StatusPrinter:
        ...

    def current_status_target(self) -> DiagnosticStream:
        """Stream the runtime's status printer currently writes to."""
        ...

    def get_logger(self, name: str | None = None) -> logging.Logger:
        ...

    def set_level(self, logger_name: str | None, level: int) -> None:
        ...

    def apply_appenders(
        self,
        specs: Sequence[AppenderSpec],
        logger_name: str,
        *,
        metrics: MetricRegistry | None = None,
    ) -> list[logging.Handler]:
        ...

    def detach_appenders(self) -> None:
        ...
