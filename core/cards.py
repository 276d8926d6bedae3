"""Card and Deck classes - immutable cards and a single-use 52-card deck."""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import Iterator

logger = logging.getLogger(__name__)


class Suit(Enum):
    """Card suits, in deck construction order."""

    HEARTS = auto()
    DIAMONDS = auto()
    CLUBS = auto()
    SPADES = auto()

    def __str__(self) -> str:
        symbols = {
            Suit.HEARTS: "♥",
            Suit.DIAMONDS: "♦",
            Suit.CLUBS: "♣",
            Suit.SPADES: "♠",
        }
        return symbols[self]


class Rank(Enum):
    """Card ranks, Ace low in construction order."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        if 2 <= self.value <= 10:
            return str(self.value)
        return {
            Rank.ACE: "A",
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
        }[self]

    @property
    def blackjack_value(self) -> int:
        """Return the base blackjack value (Ace = 11, face cards = 10)."""
        if self == Rank.ACE:
            return 11
        return min(self.value, 10)

    @property
    def is_ace(self) -> bool:
        return self == Rank.ACE


_RANK_LABELS = {str(rank): rank for rank in Rank}
_RANK_LABELS["T"] = Rank.TEN

_SUIT_LABELS = {
    "H": Suit.HEARTS,
    "♥": Suit.HEARTS,
    "D": Suit.DIAMONDS,
    "♦": Suit.DIAMONDS,
    "C": Suit.CLUBS,
    "♣": Suit.CLUBS,
    "S": Suit.SPADES,
    "♠": Suit.SPADES,
}


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def value(self) -> int:
        """Return the base blackjack value of the card."""
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        return self.rank.is_ace

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a label like 'AS', '10♦' or 'Kh'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str, suit_str = s[:-1], s[-1]
        if rank_str not in _RANK_LABELS:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in _SUIT_LABELS:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(_RANK_LABELS[rank_str], _SUIT_LABELS[suit_str])


class Deck:
    """
    A standard 52-card deck, used for exactly one round.

    Cards are built in suit-major, rank-minor order. The top of the deck is
    the end of the internal list, so drawing is an O(1) pop that leaves the
    remaining order untouched.
    """

    def __init__(self, rng: Random | None = None) -> None:
        """
        Build an ordered deck.

        Args:
            rng: Random number generator used by shuffle(). A fresh Random()
                seeds itself from system entropy.
        """
        self._rng = rng or Random()
        self._cards: list[Card] = [Card(rank, suit) for suit in Suit for rank in Rank]
        self._shuffled = False

    def shuffle(self) -> None:
        """
        Randomly permute the deck.

        Raises:
            RuntimeError: if the deck was already shuffled or a card was drawn
        """
        if self._shuffled:
            raise RuntimeError("Deck has already been shuffled")
        if len(self._cards) != 52:
            raise RuntimeError("Cannot shuffle a deck after cards have been drawn")

        self._rng.shuffle(self._cards)
        self._shuffled = True
        logger.debug("Deck shuffled")

    def draw(self) -> Card | None:
        """Remove and return the top card, or None when the deck is empty."""
        if not self._cards:
            return None
        return self._cards.pop()

    @property
    def is_shuffled(self) -> bool:
        return self._shuffled

    @property
    def is_empty(self) -> bool:
        return not self._cards

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)
