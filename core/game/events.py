"""Round events published by the engine."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Any, Callable

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Types of round events."""

    # Round flow
    ROUND_STARTED = auto()
    ROUND_ENDED = auto()

    # Deck
    DECK_SHUFFLED = auto()
    DECK_EXHAUSTED = auto()
    CARD_DEALT = auto()

    # Player
    PLAYER_INITIAL_HAND = auto()
    PLAYER_HIT = auto()
    PLAYER_CALLS = auto()

    # Dealer
    DEALER_UPCARD = auto()
    DEALER_REVEALS = auto()

    # Outcome
    PLAYER_WINS = auto()
    PLAYER_LOSES = auto()
    PUSH = auto()


@dataclass(frozen=True)
class GameEvent:
    """
    Immutable round event.

    Events are the only channel between the engine and the console.
    """

    event_type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"{self.event_type.name}: {self.data}"


EventHandler = Callable[[GameEvent], None]


class EventEmitter:
    """Dispatches events to handlers registered per type or for all types."""

    def __init__(self) -> None:
        self._handlers: dict[EventType | None, list[EventHandler]] = {}
        self._event_history: list[GameEvent] = []

    def subscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """
        Subscribe to events.

        Args:
            handler: Function to call when event occurs
            event_type: Specific event type to subscribe to, or None for all events
        """
        self._handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """Remove a handler; unknown handlers are ignored."""
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: GameEvent) -> None:
        """Record an event and call its type-specific, then catch-all, handlers."""
        logger.debug("Event %s", event)
        self._event_history.append(event)

        for handler in self._handlers.get(event.event_type, []):
            handler(event)
        for handler in self._handlers.get(None, []):
            handler(event)

    def emit_new(self, event_type: EventType, **data: Any) -> GameEvent:
        """Create and emit a new event."""
        event = GameEvent(event_type=event_type, data=data)
        self.emit(event)
        return event

    @property
    def history(self) -> list[GameEvent]:
        """Return a copy of the event history."""
        return self._event_history.copy()

    def types(self) -> list[EventType]:
        """Return the types of the emitted events, in order."""
        return [event.event_type for event in self._event_history]
