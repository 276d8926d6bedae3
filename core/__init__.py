"""Core blackjack round engine - 100% UI-agnostic."""

from core.cards import Card, Deck, Rank, Suit
from core.hand import BUST, Hand, Outcome, evaluate_hands

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "BUST",
    "Hand",
    "Outcome",
    "evaluate_hands",
]
