"""Text rendering of round events."""

import sys
from typing import Callable, TextIO

from core.game.engine import BlackjackRound
from core.game.events import EventType, GameEvent
from core.hand import format_score

RULE = "-----------------"

OUTCOME_MESSAGES = {
    EventType.PLAYER_WINS: "PLAYER WINS!",
    EventType.PLAYER_LOSES: "PLAYER LOSES...",
    EventType.PUSH: "DEALER AND PLAYER TIE NO WIN",
}


class ConsoleRenderer:
    """
    Prints a round as human-readable lines.

    Subscribes to every event of a round and writes the lines for the ones
    it knows about; CARD_DEALT and DECK_SHUFFLED are only logged by the engine.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        """
        Args:
            stream: Where to write; stdout at the time of writing if not given
        """
        self._stream = stream
        self._handlers: dict[EventType, Callable[[GameEvent], None]] = {
            EventType.ROUND_STARTED: self._on_round_started,
            EventType.PLAYER_INITIAL_HAND: self._on_player_initial_hand,
            EventType.DEALER_UPCARD: self._on_dealer_upcard,
            EventType.PLAYER_HIT: self._on_player_hit,
            EventType.DECK_EXHAUSTED: self._on_deck_exhausted,
            EventType.DEALER_REVEALS: self._on_dealer_reveals,
            EventType.PLAYER_CALLS: self._on_player_calls,
            EventType.PLAYER_WINS: self._on_outcome,
            EventType.PLAYER_LOSES: self._on_outcome,
            EventType.PUSH: self._on_outcome,
            EventType.ROUND_ENDED: self._on_round_ended,
        }

    def attach(self, round_: BlackjackRound) -> None:
        """Subscribe to all events of a round."""
        round_.subscribe(self.handle)

    def handle(self, event: GameEvent) -> None:
        handler = self._handlers.get(event.event_type)
        if handler is not None:
            handler(event)

    def _write(self, *lines: str) -> None:
        stream = self._stream or sys.stdout
        for line in lines:
            print(line, file=stream)

    def _banner(self, title: str) -> None:
        self._write(RULE, title, RULE)

    def _write_hand(self, event: GameEvent) -> None:
        self._write(format_score(event.data["hand"], event.data["score"]), event.data["ranks"], "")

    def _on_round_started(self, event: GameEvent) -> None:
        self._banner("First deal.")
        self._write("", "")

    def _on_player_initial_hand(self, event: GameEvent) -> None:
        if event.data["blackjack"]:
            self._write(f"{event.data['hand']} got BLACKJACK!", event.data["ranks"], "")
        else:
            self._write_hand(event)

    def _on_dealer_upcard(self, event: GameEvent) -> None:
        self._write("Known " + format_score(event.data["hand"], event.data["score"]), "")

    def _on_player_hit(self, event: GameEvent) -> None:
        self._write("")
        self._banner("Next deal.")
        self._write("", "")
        self._write_hand(event)

    def _on_deck_exhausted(self, event: GameEvent) -> None:
        self._write("The deck is empty.")

    def _on_dealer_reveals(self, event: GameEvent) -> None:
        self._write("Final " + format_score(event.data["hand"], event.data["score"]))

    def _on_player_calls(self, event: GameEvent) -> None:
        self._write(
            "",
            f"{event.data['hand']} Calls!",
            "Final " + format_score(event.data["hand"], event.data["score"]),
        )

    def _on_outcome(self, event: GameEvent) -> None:
        self._write("", OUTCOME_MESSAGES[event.event_type])

    def _on_round_ended(self, event: GameEvent) -> None:
        self._write("", "")
        self._banner("GAME OVER!")
        self._write("")
