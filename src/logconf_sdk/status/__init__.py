from .interceptor import StatusCapture, StatusInterceptor, get_status_interceptor
from .manager import (
    BufferingStatusListener,
    PrintingStatusListener,
    StatusManager,
)
from .models import StatusEvent, StatusLevel
from .printer import (
    DiagnosticStream,
    StatusPrinter,
    get_status_printer,
    write_line,
)
from .protocol import StatusListenerProtocol

__all__ = [
    "BufferingStatusListener",
    "DiagnosticStream",
    "PrintingStatusListener",
    "StatusCapture",
    "StatusEvent",
    "StatusInterceptor",
    "StatusLevel",
    "StatusListenerProtocol",
    "StatusManager",
    "StatusPrinter",
    "get_status_interceptor",
    "get_status_printer",
    "write_line",
]
