from .standard import DefaultLoggingConfigurator

__all__ = ["DefaultLoggingConfigurator"]
