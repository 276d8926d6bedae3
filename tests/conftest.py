"""Pytest fixtures for blackjack round tests."""

from random import Random

import pytest
from hypothesis import strategies as st

from core.cards import Card, Deck, Rank, Suit
from core.hand import Hand
from core.game import BlackjackRound


class StackedRandom:
    """Stand-in rng whose shuffle puts the given cards on top, first card drawn first."""

    def __init__(self, top_cards: list[Card]) -> None:
        self._top = list(top_cards)

    def shuffle(self, x) -> None:
        rest = [card for card in x if card not in self._top]
        x[:] = rest + self._top[::-1]


def cards(*labels: str) -> list[Card]:
    """Build cards from labels like 'AS', '10H'."""
    return [Card.from_string(label) for label in labels]


def hand_of(*labels: str, name: str = "Player") -> Hand:
    """Build a hand from card labels."""
    hand = Hand(name=name)
    for card in cards(*labels):
        hand.add_card(card)
    return hand


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    d = Deck(rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def stacked_round():
    """Factory for a round whose deck deals the given labels first."""

    def _make(*labels: str) -> BlackjackRound:
        return BlackjackRound(deck=Deck(rng=StackedRandom(cards(*labels))))

    return _make


@pytest.fixture
def empty_hand():
    """An empty player hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    return hand_of("AS", "KH")


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return hand_of("AS", "6H")


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return hand_of("10S", "6H")


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return hand_of("10S", "6H", "KC")


@st.composite
def card_strategy(draw):
    """Generate a random card."""
    rank = draw(st.sampled_from(list(Rank)))
    suit = draw(st.sampled_from(list(Suit)))
    return Card(rank, suit)


@st.composite
def hand_strategy(draw, min_cards=0, max_cards=8):
    """Generate a random hand."""
    hand = Hand()
    for card in draw(st.lists(card_strategy(), min_size=min_cards, max_size=max_cards)):
        hand.add_card(card)
    return hand
