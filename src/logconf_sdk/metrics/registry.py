from __future__ import annotations

from dataclasses import dataclass
from threading import Lock


@dataclass(slots=True)
class Counter:
    count: int = 0

    def inc(self, amount: int = 1) -> None:
        self.count += amount


class MetricRegistry:
    """In-memory registry of named counters."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._counters: dict[str, Counter] = {}

    def counter(self, name: str) -> Counter:
        with self._lock:
            return self._counters.setdefault(name, Counter())

    def inc(self, name: str, amount: int = 1) -> None:
        with self._lock:
            counter = self._counters.setdefault(name, Counter())
            counter.inc(amount)

    def names(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(sorted(self._counters))

    def snapshot(self) -> dict[str, int]:
        with self._lock:
            return {
                name: counter.count
                for name, counter in self._counters.items()
            }

    def render_prometheus_text(self, *, namespace: str = "logconf") -> str:
        return render_prometheus_text(self.snapshot(), namespace=namespace)


def render_prometheus_text(
    snapshot: dict[str, int],
    *,
    namespace: str = "logconf",
) -> str:
    lines: list[str] = []
    prefix = namespace.strip("_")
    for name in sorted(snapshot):
        metric = f"{prefix}_{_sanitize(name)}_total"
        lines.append(f"# TYPE {metric} counter")
        lines.append(f"{metric} {snapshot[name]}")
    return "\n".join(lines) + ("\n" if lines else "")


def _sanitize(name: str) -> str:
    return "".join(ch if ch.isalnum() else "_" for ch in name)
