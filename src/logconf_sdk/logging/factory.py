from __future__ import annotations

from ..metrics.registry import MetricRegistry
from ..runtime.protocol import LoggingRuntimeProtocol
from ..status.printer import DiagnosticStream
from .config import LoggingConfig
from .impl.standard import DefaultLoggingConfigurator
from .settings import LoggingSettings, load_logging_settings


def build_logging_configurator(
    settings: LoggingSettings | None = None,
    *,
    config: LoggingConfig | None = None,
    runtime: LoggingRuntimeProtocol | None = None,
    errors_stream: DiagnosticStream | None = None,
) -> DefaultLoggingConfigurator:
    if config is None:
        resolved = settings or load_logging_settings()
        config = resolved.to_config()
    return DefaultLoggingConfigurator.from_config(
        config, runtime, errors_stream)


def configure_logging(
    settings: LoggingSettings | None = None,
    *,
    config: LoggingConfig | None = None,
    metrics: MetricRegistry | None = None,
    name: str | None = None,
    runtime: LoggingRuntimeProtocol | None = None,
    errors_stream: DiagnosticStream | None = None,
) -> DefaultLoggingConfigurator:
    resolved = settings or load_logging_settings()
    configurator = build_logging_configurator(
        resolved,
        config=config,
        runtime=runtime,
        errors_stream=errors_stream,
    )
    configurator.configure(metrics, name or resolved.logger_name)
    return configurator
