"""Single-round blackjack engine with state machine."""

import logging
from dataclasses import dataclass
from random import Random
from typing import Any, Callable

from transitions import Machine

from config import config as app_config
from core.cards import Card, Deck
from core.hand import BLACKJACK, BUST, Hand, Outcome, evaluate_hands
from core.game.events import EventEmitter, EventType, GameEvent
from core.game.state import RoundState

logger = logging.getLogger(__name__)

_OUTCOME_EVENTS = {
    Outcome.WIN: EventType.PLAYER_WINS,
    Outcome.LOSE: EventType.PLAYER_LOSES,
    Outcome.PUSH: EventType.PUSH,
}


@dataclass(frozen=True)
class RoundResult:
    """Final state of a finished round."""

    outcome: Outcome
    player_score: int
    dealer_score: int
    player_cards: tuple[Card, ...]
    dealer_cards: tuple[Card, ...]


def _snapshot(hand: Hand) -> dict[str, Any]:
    """Event payload describing a hand at this moment."""
    return {
        "hand": hand.name,
        "cards": [str(card) for card in hand.cards],
        "ranks": hand.format_ranks(),
        "score": hand.score,
        "blackjack": hand.is_blackjack,
    }


class BlackjackRound:
    """
    One round of blackjack between a player and a dealer.

    The round is single-use: play() runs it from the opening deal to the
    outcome, and the deck and hands are discarded with the object.
    Communication with a presentation layer happens through events only.
    """

    STATES = [s.name.lower() for s in RoundState]

    TRANSITIONS = [
        {"trigger": "initial_deal_complete", "source": "dealing_initial", "dest": "player_drawing"},
        {"trigger": "player_done", "source": "player_drawing", "dest": "comparison"},
        {"trigger": "resolve", "source": "comparison", "dest": "done"},
    ]

    def __init__(
        self,
        deck: Deck | None = None,
        rng: Random | None = None,
    ) -> None:
        """
        Set up a round.

        Args:
            deck: Deck to deal from; shuffled by play() unless it already is
            rng: Random number generator for a new deck, for reproducible rounds;
                only used when no deck is given

        Raises:
            ValueError: if both deck and rng are given
        """
        if deck is not None and rng is not None:
            raise ValueError("Pass either a deck or an rng for a new deck, not both")

        self.config = app_config.game
        self.deck = deck if deck is not None else Deck(rng=rng)
        self.player = Hand(name="Player")
        self.dealer = Hand(name="Dealer")
        self.events = EventEmitter()

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="dealing_initial",
            auto_transitions=False,
            model_attribute="_machine_state",
            after_state_change="_log_state",
        )

    @property
    def state(self) -> RoundState:
        """Get current round state as enum."""
        return RoundState[self._machine_state.upper()]  # type: ignore

    def _log_state(self) -> None:
        logger.debug("Round state is now %s", self.state)

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to round events."""
        self.events.subscribe(handler, event_type)

    def play(self) -> RoundResult:
        """
        Play the whole round.

        Returns:
            The outcome and final hands

        Raises:
            RuntimeError: if the round has already been played
        """
        if self.state != RoundState.DEALING_INITIAL:
            raise RuntimeError(f"Round already played (state: {self.state})")

        if not self.deck.is_shuffled:
            self.deck.shuffle()
            self.events.emit_new(EventType.DECK_SHUFFLED)

        self._deal_initial_cards()
        self.initial_deal_complete()

        self._play_player()
        self.player_done()

        outcome = self._compare()
        self.resolve()

        self.events.emit_new(EventType.ROUND_ENDED, outcome=outcome.name)
        return RoundResult(
            outcome=outcome,
            player_score=self.player.score,
            dealer_score=self.dealer.score,
            player_cards=tuple(self.player.cards),
            dealer_cards=tuple(self.dealer.cards),
        )

    def _deal_card_to_hand(self, hand: Hand) -> Card | None:
        """Move the top card of the deck into a hand."""
        card = self.deck.draw()
        if card is None:
            logger.warning("Deck exhausted while dealing to %s", hand.name)
            self.events.emit_new(EventType.DECK_EXHAUSTED, hand=hand.name)
            return None

        hand.add_card(card)
        logger.debug("Dealt %s to %s (score %d)", card, hand.name, hand.score)
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card),
            hand=hand.name,
            score=hand.score,
        )
        return card

    def _deal_initial_cards(self) -> None:
        """Deal the player's cards, then the dealer's, announcing the known ones."""
        self.events.emit_new(EventType.ROUND_STARTED)

        for _ in range(self.config.player_initial_cards):
            self._deal_card_to_hand(self.player)
        self.events.emit_new(EventType.PLAYER_INITIAL_HAND, **_snapshot(self.player))

        # Only the dealer's first card is shown
        if self._deal_card_to_hand(self.dealer) is not None:
            self.events.emit_new(EventType.DEALER_UPCARD, **_snapshot(self.dealer))
        for _ in range(self.config.dealer_initial_cards - 1):
            self._deal_card_to_hand(self.dealer)

    def _player_should_hit(self) -> bool:
        score = self.player.score
        return score < self.config.player_stands_at and score != BUST

    def _play_player(self) -> None:
        """Player draws until standing, busting or running out of cards."""
        while self._player_should_hit():
            if self._deal_card_to_hand(self.player) is None:
                break
            self.events.emit_new(EventType.PLAYER_HIT, **_snapshot(self.player))

    def _compare(self) -> Outcome:
        """Reveal the dealer, announce the player's call and settle the round."""
        self.events.emit_new(EventType.DEALER_REVEALS, **_snapshot(self.dealer))

        if not self.player.is_busted and self.player.score != BLACKJACK:
            self.events.emit_new(EventType.PLAYER_CALLS, **_snapshot(self.player))

        outcome = evaluate_hands(self.player, self.dealer)
        logger.info(
            "Round finished: %s (player %d, dealer %d)",
            outcome.name,
            self.player.score,
            self.dealer.score,
        )
        self.events.emit_new(
            _OUTCOME_EVENTS[outcome],
            player_score=self.player.score,
            dealer_score=self.dealer.score,
        )
        return outcome
