from __future__ import annotations

import logging
from collections.abc import Sequence
from threading import RLock

from ...appenders.models import AppenderSpec
from ...core.errors import ConfigurationWarning, ResourceReleaseError
from ...metrics.instrumented import InstrumentedHandler
from ...metrics.registry import MetricRegistry
from ...status.manager import PrintingStatusListener, StatusManager
from ...status.printer import DiagnosticStream, StatusPrinter, get_status_printer
from ..protocol import LoggingRuntimeProtocol

_ROOT_NAMES = {"", "root", "ROOT"}


class StandardLoggingRuntime(LoggingRuntimeProtocol):
    """Logging runtime backed by a :mod:`logging` logger hierarchy."""

    def __init__(
        self,
        *,
        root: logging.Logger | None = None,
        manager: logging.Manager | None = None,
        status_manager: StatusManager | None = None,
        printer: StatusPrinter | None = None,
        name: str = "default",
    ) -> None:
        self._root = root or logging.getLogger()
        self._manager = manager or self._root.manager
        self._printer = printer or get_status_printer()
        self._status = status_manager or StatusManager(
            PrintingStatusListener(self._printer))
        self._name = name
        self._lock = RLock()
        self._attached: list[tuple[logging.Logger, logging.Handler]] = []

    @classmethod
    def isolated(
        cls,
        *,
        level: int = logging.WARNING,
        printer: StatusPrinter | None = None,
        name: str = "isolated",
    ) -> "StandardLoggingRuntime":
        """Build a runtime over a private hierarchy, detached from
        :data:`logging.root`."""
        root = logging.RootLogger(level)
        manager = logging.Manager(root)
        root.manager = manager
        return cls(
            root=root,
            manager=manager,
            printer=printer or StatusPrinter(),
            name=name,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def status_manager(self) -> StatusManager:
        return self._status

    @property
    def printer(self) -> StatusPrinter:
        return self._printer

    def current_status_target(self) -> DiagnosticStream:
        return self._printer.stream

    def get_logger(self, name: str | None = None) -> logging.Logger:
        if name is None or name in _ROOT_NAMES:
            return self._root
        return self._manager.getLogger(name)

    def set_level(self, logger_name: str | None, level: int) -> None:
        self.get_logger(logger_name).setLevel(level)

    def attached_handlers(self) -> list[logging.Handler]:
        with self._lock:
            return [handler for _, handler in self._attached]

    def apply_appenders(
        self,
        specs: Sequence[AppenderSpec],
        logger_name: str,
        *,
        metrics: MetricRegistry | None = None,
    ) -> list[logging.Handler]:
        logger = self.get_logger(logger_name)
        attached: list[logging.Handler] = []
        for spec in specs:
            origin = spec.appender_name
            self._status.info(
                f"About to instantiate appender of type [{type(spec).__name__}]",
                origin=origin,
            )
            try:
                handler = spec.build_handler(logger_name)
            except ConfigurationWarning as exc:
                self._status.error(str(exc), origin=origin, error=exc.__cause__)
                continue
            except (OSError, ValueError) as exc:
                self._status.error(
                    f"Could not set up appender writing to [{spec.destination}]",
                    origin=origin,
                    error=exc,
                )
                continue
            self._attach(logger, handler)
            attached.append(handler)
            self._status.info(
                f"Attaching appender named [{origin}] to Logger[{logger.name}]",
                origin=origin,
            )
        if metrics is not None:
            self._attach(logger, InstrumentedHandler(metrics))
        return attached

    def detach_appenders(self) -> None:
        with self._lock:
            attached, self._attached = self._attached, []
        errors: list[BaseException] = []
        failed: list[str] = []
        for logger, handler in attached:
            logger.removeHandler(handler)
            try:
                handler.close()
            except Exception as exc:
                errors.append(exc)
                failed.append(handler.get_name() or type(handler).__name__)
        if errors:
            raise ResourceReleaseError(
                f"failed to close appender(s): {', '.join(failed)}",
                errors=tuple(errors),
            )

    def _attach(self, logger: logging.Logger, handler: logging.Handler) -> None:
        logger.addHandler(handler)
        with self._lock:
            self._attached.append((logger, handler))
