from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Mapping
from threading import RLock

from ...appenders.models import AppenderSpec
from ...core.errors import ResourceReleaseError
from ...metrics.registry import MetricRegistry
from ...runtime.context import get_default_runtime
from ...runtime.protocol import LoggingRuntimeProtocol
from ...status.interceptor import StatusInterceptor, get_status_interceptor
from ...status.models import StatusEvent
from ...status.printer import DiagnosticStream
from ..config import LoggingConfig
from ..protocol import LoggingConfiguratorProtocol

_LOGGER = logging.getLogger(__name__)


class DefaultLoggingConfigurator(LoggingConfiguratorProtocol):
    """Applies appenders to a logging runtime and reports what went wrong.

    Status events the runtime emits while configuring are captured instead
    of reaching its default status printer. ERROR events are written, one
    line each, to the configuration errors stream; ``configure`` itself does
    not raise for appender problems.
    """

    def __init__(
        self,
        runtime: LoggingRuntimeProtocol | None = None,
        errors_stream: DiagnosticStream | None = None,
        *,
        interceptor: StatusInterceptor | None = None,
        level: int | None = None,
        loggers: Mapping[str, int] | None = None,
    ) -> None:
        self._runtime = runtime if runtime is not None else get_default_runtime()
        self._errors_stream = (
            errors_stream if errors_stream is not None else sys.stderr
        )
        self._interceptor = interceptor or get_status_interceptor()
        self._level = level
        self._loggers = dict(loggers or {})
        self._appenders: tuple[AppenderSpec, ...] = ()
        self._last_status: tuple[StatusEvent, ...] = ()
        self._lock = RLock()

    @classmethod
    def from_config(
        cls,
        config: LoggingConfig,
        runtime: LoggingRuntimeProtocol | None = None,
        errors_stream: DiagnosticStream | None = None,
        *,
        interceptor: StatusInterceptor | None = None,
    ) -> "DefaultLoggingConfigurator":
        configurator = cls(
            runtime,
            errors_stream,
            interceptor=interceptor,
            level=config.level_number(),
            loggers=config.logger_levels(),
        )
        configurator.set_appenders(config.appenders)
        return configurator

    @property
    def runtime(self) -> LoggingRuntimeProtocol:
        return self._runtime

    @property
    def configuration_errors_stream(self) -> DiagnosticStream:
        return self._errors_stream

    @property
    def appenders(self) -> tuple[AppenderSpec, ...]:
        return self._appenders

    @property
    def last_status(self) -> tuple[StatusEvent, ...]:
        """Status events captured by the most recent ``configure`` call."""
        return self._last_status

    def set_appenders(self, appenders: Iterable[AppenderSpec]) -> None:
        with self._lock:
            self._appenders = tuple(appenders)

    def configure(self, metrics: MetricRegistry | None, name: str) -> None:
        with self._lock:
            with self._interceptor.capture(
                self._runtime, self._errors_stream
            ) as capture:
                try:
                    self._release()
                    self._apply_levels(name)
                    self._runtime.apply_appenders(
                        self._appenders, name, metrics=metrics)
                finally:
                    self._last_status = tuple(capture.events)
                    errors = capture.print_errors()
            _LOGGER.debug(
                "Configured %d appender(s) for %s with %d error(s)",
                len(self._appenders), name, errors,
            )

    def stop(self) -> None:
        with self._lock:
            self._release()

    def _apply_levels(self, name: str) -> None:
        if self._level is not None:
            self._runtime.set_level(name, self._level)
        for logger_name, level in self._loggers.items():
            self._runtime.set_level(logger_name, level)

    def _release(self) -> None:
        try:
            self._runtime.detach_appenders()
        except ResourceReleaseError as exc:
            _LOGGER.warning("Failed to release logging appenders: %s", exc,
                            exc_info=True)
