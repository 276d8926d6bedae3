"""Hand scoring and display for blackjack."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator

from core.cards import Card

BLACKJACK = 21
BUST = -1  # Score of a hand that is over 21 after every ace counts as 1


class Outcome(Enum):
    """Round outcome from the player's point of view."""

    WIN = auto()
    LOSE = auto()
    PUSH = auto()


def format_score(name: str, score: int) -> str:
    """Format a score line such as 'Player hand value: 17' or 'Player busted!'."""
    if 0 <= score <= BLACKJACK:
        return f"{name} hand value: {score}"
    return f"{name} busted!"


@dataclass
class Hand:
    """A participant's cards with ace-flexible scoring."""

    name: str = "Player"
    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a drawn card to the hand."""
        self.cards.append(card)

    def _total(self) -> tuple[int, int]:
        """Return the best total and the number of aces still counted as 11."""
        total = 0
        soft_aces = 0

        for card in self.cards:
            if card.is_ace:
                soft_aces += 1
            total += card.value

        # Count aces as 1 instead of 11 until the hand fits
        while total > BLACKJACK and soft_aces > 0:
            total -= 10
            soft_aces -= 1

        return total, soft_aces

    @property
    def score(self) -> int:
        """
        Calculate the hand's score.

        Returns the best total that doesn't exceed 21, or BUST when every
        ace has been counted as 1 and the total is still over 21. BUST is a
        marker, not a number to compare against valid totals.
        """
        total, _ = self._total()
        if total > BLACKJACK:
            return BUST
        return total

    @property
    def is_busted(self) -> bool:
        return self.score == BUST

    @property
    def is_soft(self) -> bool:
        """Check if an ace is still counted as 11."""
        total, soft_aces = self._total()
        return soft_aces > 0 and total <= BLACKJACK

    @property
    def is_blackjack(self) -> bool:
        """Check if the hand is a natural blackjack (21 with 2 cards)."""
        return len(self.cards) == 2 and self.score == BLACKJACK

    def format_ranks(self) -> str:
        """Return the card ranks separated by spaces, e.g. 'A 10'."""
        return " ".join(str(card.rank) for card in self.cards)

    def format_score(self) -> str:
        return format_score(self.name, self.score)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        if self.is_busted:
            value_str = "(BUST)"
        elif self.is_blackjack:
            value_str = "(BLACKJACK)"
        elif self.is_soft:
            value_str = f"(soft {self.score})"
        else:
            value_str = f"({self.score})"
        return f"{self.name}: {cards_str} {value_str}"

    def __repr__(self) -> str:
        return f"Hand({self.name!r}, {self.cards!r}, score={self.score})"


def evaluate_hands(player_hand: Hand, dealer_hand: Hand) -> Outcome:
    """
    Compare player and dealer hands.

    A busted player loses whatever the dealer holds. A busted dealer loses
    to any player still in the round. Otherwise the higher score wins.
    """
    if player_hand.is_busted:
        return Outcome.LOSE
    if dealer_hand.is_busted:
        return Outcome.WIN

    player_score = player_hand.score
    dealer_score = dealer_hand.score

    if player_score > dealer_score:
        return Outcome.WIN
    if dealer_score > player_score:
        return Outcome.LOSE
    return Outcome.PUSH
