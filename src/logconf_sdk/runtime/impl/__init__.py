from .standard import StandardLoggingRuntime

__all__ = ["StandardLoggingRuntime"]
