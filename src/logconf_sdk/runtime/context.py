from __future__ import annotations

from threading import Lock

from .impl.standard import StandardLoggingRuntime
from .protocol import LoggingRuntimeProtocol

_LOCK = Lock()
_default_runtime: LoggingRuntimeProtocol | None = None


def get_default_runtime() -> LoggingRuntimeProtocol:
    """Return the process-wide runtime wrapping :data:`logging.root`."""
    global _default_runtime
    with _LOCK:
        if _default_runtime is None:
            _default_runtime = StandardLoggingRuntime()
        return _default_runtime


def set_default_runtime(
    runtime: LoggingRuntimeProtocol | None,
) -> LoggingRuntimeProtocol | None:
    """Bind a different process-wide runtime; returns the previous one.

    Passing ``None`` drops the binding so the next lookup builds a fresh
    runtime over :data:`logging.root`.
    """
    global _default_runtime
    with _LOCK:
        previous = _default_runtime
        _default_runtime = runtime
        return previous
