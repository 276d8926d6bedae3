"""Round engine and state management."""

from core.game.events import GameEvent, EventType
from core.game.state import RoundState
from core.game.engine import BlackjackRound, RoundResult

__all__ = [
    "GameEvent",
    "EventType",
    "RoundState",
    "BlackjackRound",
    "RoundResult",
]
