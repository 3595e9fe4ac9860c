"""Notifications the core publishes to presentation.

Commands queue events while they run and the queue is flushed only once the
command has committed, so subscribers always observe a consistent board.
Within one split the two ``CellChanged`` events precede ``TurnAdvanced``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CellChanged:
    """A cell's owner or power changed."""

    index: int


@dataclass(frozen=True, slots=True)
class TurnAdvanced:
    """It is now ``player``'s turn."""

    player: int


GameEvent = CellChanged | TurnAdvanced
EventHandler = Callable[[GameEvent], None]


@dataclass(slots=True)
class EventQueue:
    """Buffer events during a command and deliver them afterwards."""

    pending: list[GameEvent] = field(default_factory=list)
    handlers: list[EventHandler] = field(default_factory=list)

    def subscribe(self, handler: EventHandler) -> None:
        if handler not in self.handlers:
            self.handlers.append(handler)

    def unsubscribe(self, handler: EventHandler) -> None:
        if handler in self.handlers:
            self.handlers.remove(handler)

    def emit(self, event: GameEvent) -> None:
        self.pending.append(event)

    def flush(self) -> list[GameEvent]:
        """Deliver queued events in order and return them."""

        delivered = list(self.pending)
        self.pending.clear()
        for event in delivered:
            logger.debug("publishing %s", event)
            for handler in list(self.handlers):
                handler(event)
        return delivered
