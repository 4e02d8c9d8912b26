"""Logging configurator package."""

from .config import LoggingConfig, load_logging_config
from .factory import build_logging_configurator, configure_logging
from .impl.standard import DefaultLoggingConfigurator
from .protocol import LoggingConfiguratorProtocol
from .settings import LoggingSettings, load_logging_settings

__all__ = [
    "DefaultLoggingConfigurator",
    "LoggingConfig",
    "LoggingConfiguratorProtocol",
    "LoggingSettings",
    "build_logging_configurator",
    "configure_logging",
    "load_logging_config",
    "load_logging_settings",
]
