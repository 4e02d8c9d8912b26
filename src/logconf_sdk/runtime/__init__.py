from .context import get_default_runtime, set_default_runtime
from .impl.standard import StandardLoggingRuntime
from .protocol import LoggingRuntimeProtocol

__all__ = [
    "LoggingRuntimeProtocol",
    "StandardLoggingRuntime",
    "get_default_runtime",
    "set_default_runtime",
]
