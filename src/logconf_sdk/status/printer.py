from __future__ import annotations

import io
import sys
from collections.abc import Iterable
from threading import RLock
from typing import IO, Any

from .models import StatusEvent

DiagnosticStream = IO[Any]


def write_line(stream: DiagnosticStream, line: str) -> None:
    """Write one line to a text or binary stream (binary gets UTF-8)."""
    text = line if line.endswith("\n") else line + "\n"
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        stream.write(text.encode("utf-8"))
    else:
        stream.write(text)
    flush = getattr(stream, "flush", None)
    if callable(flush):
        flush()


class StatusPrinter:
    """Prints status events to a swappable target stream.

    An unset target means the process standard output, resolved on every
    access so the printer follows ``sys.stdout``.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._stream: DiagnosticStream | None = None

    @property
    def stream(self) -> DiagnosticStream:
        with self._lock:
            if self._stream is None:
                return sys.stdout
            return self._stream

    def redirect(self, stream: DiagnosticStream) -> None:
        with self._lock:
            self._stream = stream

    def reset(self) -> None:
        with self._lock:
            self._stream = None

    def print_events(self, events: Iterable[StatusEvent]) -> None:
        with self._lock:
            target = self.stream
            for event in events:
                write_line(target, event.render())


_default_printer = StatusPrinter()


def get_status_printer() -> StatusPrinter:
    return _default_printer
