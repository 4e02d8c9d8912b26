from __future__ import annotations

from threading import Lock, RLock

from .models import StatusEvent, StatusLevel
from .printer import StatusPrinter, get_status_printer
from .protocol import StatusListenerProtocol


class PrintingStatusListener(StatusListenerProtocol):
    """Default receiver: prints WARN and ERROR events through a printer."""

    def __init__(
        self,
        printer: StatusPrinter | None = None,
        *,
        threshold: StatusLevel = StatusLevel.WARN,
    ) -> None:
        self._printer = printer or get_status_printer()
        self._threshold = threshold

    def on_status(self, event: StatusEvent) -> None:
        if event.level >= self._threshold:
            self._printer.print_events((event,))


class BufferingStatusListener(StatusListenerProtocol):
    """Collects events in emission order."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._events: list[StatusEvent] = []

    def on_status(self, event: StatusEvent) -> None:
        with self._lock:
            self._events.append(event)

    def events(self) -> list[StatusEvent]:
        with self._lock:
            return list(self._events)


class StatusManager:
    """Routes runtime status events to the current receiver."""

    def __init__(self, receiver: StatusListenerProtocol | None = None) -> None:
        self._lock = RLock()
        self._receiver: StatusListenerProtocol = (
            receiver or PrintingStatusListener()
        )

    @property
    def receiver(self) -> StatusListenerProtocol:
        with self._lock:
            return self._receiver

    def swap_receiver(
        self, receiver: StatusListenerProtocol
    ) -> StatusListenerProtocol:
        with self._lock:
            previous = self._receiver
            self._receiver = receiver
            return previous

    def add(self, event: StatusEvent) -> None:
        with self._lock:
            receiver = self._receiver
        receiver.on_status(event)

    def info(self, message: str, *, origin: str | None = None) -> None:
        self.add(StatusEvent(StatusLevel.INFO, message, origin=origin))

    def warn(self, message: str, *, origin: str | None = None,
             error: BaseException | None = None) -> None:
        self.add(StatusEvent(StatusLevel.WARN, message, origin=origin,
                             error=error))

    def error(self, message: str, *, origin: str | None = None,
              error: BaseException | None = None) -> None:
        self.add(StatusEvent(StatusLevel.ERROR, message, origin=origin,
                             error=error))
