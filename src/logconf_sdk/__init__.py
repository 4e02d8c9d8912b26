"""Public API entry point for logconf_sdk.

Use this module for supported imports. Subpackages are internal.
"""

from .appenders import (
    AppenderSpec,
    ConsoleAppenderSpec,
    FileAppenderSpec,
    SyslogAppenderSpec,
)
from .core import (
    BaseModel,
    CaptureAlreadyActiveError,
    ConfigurationWarning,
    LoggingConfigError,
    ResourceReleaseError,
    parse_level,
)
from .logging import (
    DefaultLoggingConfigurator,
    LoggingConfig,
    LoggingConfiguratorProtocol,
    LoggingSettings,
    build_logging_configurator,
    configure_logging,
    load_logging_config,
    load_logging_settings,
)
from .metrics import InstrumentedHandler, MetricRegistry
from .runtime import (
    LoggingRuntimeProtocol,
    StandardLoggingRuntime,
    get_default_runtime,
    set_default_runtime,
)
from .status import (
    StatusCapture,
    StatusEvent,
    StatusInterceptor,
    StatusLevel,
    StatusManager,
    StatusPrinter,
    get_status_interceptor,
    get_status_printer,
)

__all__ = [
    "AppenderSpec",
    "ConsoleAppenderSpec",
    "FileAppenderSpec",
    "SyslogAppenderSpec",
    "BaseModel",
    "CaptureAlreadyActiveError",
    "ConfigurationWarning",
    "LoggingConfigError",
    "ResourceReleaseError",
    "parse_level",
    "DefaultLoggingConfigurator",
    "LoggingConfig",
    "LoggingConfiguratorProtocol",
    "LoggingSettings",
    "build_logging_configurator",
    "configure_logging",
    "load_logging_config",
    "load_logging_settings",
    "InstrumentedHandler",
    "MetricRegistry",
    "LoggingRuntimeProtocol",
    "StandardLoggingRuntime",
    "get_default_runtime",
    "set_default_runtime",
    "StatusCapture",
    "StatusEvent",
    "StatusInterceptor",
    "StatusLevel",
    "StatusManager",
    "StatusPrinter",
    "get_status_interceptor",
    "get_status_printer",
]
