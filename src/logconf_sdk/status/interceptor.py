from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from threading import Lock, RLock
from typing import TYPE_CHECKING
from weakref import WeakKeyDictionary

from ..core.errors import CaptureAlreadyActiveError
from .manager import BufferingStatusListener
from .models import StatusEvent, StatusLevel
from .printer import DiagnosticStream, StatusPrinter, write_line
from .protocol import StatusListenerProtocol

if TYPE_CHECKING:
    from ..runtime.protocol import LoggingRuntimeProtocol


@dataclass(slots=True)
class _CaptureState:
    previous: StatusListenerProtocol
    buffer: BufferingStatusListener


class StatusCapture:
    """Handle for one active capture session."""

    def __init__(self, buffer: BufferingStatusListener,
                 printer: StatusPrinter,
                 target: DiagnosticStream | None = None) -> None:
        self._buffer = buffer
        self._printer = printer
        self._target = target

    @property
    def target(self) -> DiagnosticStream | None:
        return self._target

    @property
    def events(self) -> list[StatusEvent]:
        return self._buffer.events()

    def errors(self) -> list[StatusEvent]:
        return [
            event for event in self._buffer.events()
            if event.level >= StatusLevel.ERROR
        ]

    def print_errors(self) -> int:
        errors = self.errors()
        if self._target is None:
            self._printer.print_events(errors)
        else:
            for event in errors:
                write_line(self._target, event.render())
        return len(errors)


class StatusInterceptor:
    """Temporarily takes over a runtime's status channel.

    Each runtime handle is either idle or capturing. The previous receiver is
    tracked per handle and put back by :meth:`end_capture`, which also resets
    the handle's status printer to the process standard output.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._active: WeakKeyDictionary[
            LoggingRuntimeProtocol, _CaptureState] = WeakKeyDictionary()
        self._handle_locks: WeakKeyDictionary[
            LoggingRuntimeProtocol, RLock] = WeakKeyDictionary()

    def is_capturing(self, runtime: LoggingRuntimeProtocol) -> bool:
        with self._lock:
            return runtime in self._active

    def begin_capture(
        self,
        runtime: LoggingRuntimeProtocol,
        target: DiagnosticStream | None = None,
    ) -> StatusCapture:
        with self._lock:
            if runtime in self._active:
                raise CaptureAlreadyActiveError(
                    f"status capture already active for {runtime!r}")
            buffer = BufferingStatusListener()
            previous = runtime.status_manager.swap_receiver(buffer)
            self._active[runtime] = _CaptureState(previous=previous,
                                                  buffer=buffer)
        return StatusCapture(buffer, runtime.printer, target)

    def end_capture(self, runtime: LoggingRuntimeProtocol) -> list[StatusEvent]:
        with self._lock:
            state = self._active.pop(runtime, None)
        try:
            if state is None:
                return []
            runtime.status_manager.swap_receiver(state.previous)
            return state.buffer.events()
        finally:
            runtime.printer.reset()

    @contextmanager
    def capture(
        self,
        runtime: LoggingRuntimeProtocol,
        target: DiagnosticStream | None = None,
    ) -> Iterator[StatusCapture]:
        with self._handle_lock(runtime):
            session = self.begin_capture(runtime, target)
            try:
                yield session
            finally:
                self.end_capture(runtime)

    def _handle_lock(self, runtime: LoggingRuntimeProtocol) -> RLock:
        with self._lock:
            lock = self._handle_locks.get(runtime)
            if lock is None:
                lock = RLock()
                self._handle_locks[runtime] = lock
            return lock


_default_interceptor = StatusInterceptor()


def get_status_interceptor() -> StatusInterceptor:
    return _default_interceptor
