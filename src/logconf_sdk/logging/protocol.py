from __future__ import annotations

from typing import Protocol

from ..metrics.registry import MetricRegistry


class LoggingConfiguratorProtocol(Protocol):
    """Protocol for logging configurators."""

    def configure(self, metrics: MetricRegistry | None, name: str) -> None:
        """Apply logging configuration."""

    def stop(self) -> None:
        """Detach everything :meth:`configure` attached."""
