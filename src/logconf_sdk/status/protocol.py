from __future__ import annotations

from typing import Protocol

from .models import StatusEvent


class StatusListenerProtocol(Protocol):
    """Receiver of status events emitted by a logging runtime."""

    def on_status(self, event: StatusEvent) -> None:
        ...
