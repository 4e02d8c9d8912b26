from .instrumented import DEFAULT_PREFIX, InstrumentedHandler
from .registry import Counter, MetricRegistry, render_prometheus_text

__all__ = [
    "Counter",
    "DEFAULT_PREFIX",
    "InstrumentedHandler",
    "MetricRegistry",
    "render_prometheus_text",
]
