"""Tests for Hand scoring and evaluation."""

import pytest
from hypothesis import given

from conftest import hand_of, hand_strategy
from core.cards import Card, Rank, Suit
from core.hand import BUST, Hand, Outcome, evaluate_hands, format_score


class TestHand:
    """Tests for the Hand class."""

    def test_empty_hand(self, empty_hand):
        """Test empty hand properties."""
        assert len(empty_hand) == 0
        assert empty_hand.score == 0
        assert not empty_hand.is_soft
        assert not empty_hand.is_blackjack
        assert not empty_hand.is_busted

    def test_add_card(self, empty_hand):
        """Test adding cards to hand."""
        empty_hand.add_card(Card(Rank.TEN, Suit.SPADES))
        assert len(empty_hand) == 1
        assert empty_hand.score == 10

    def test_hard_hand_score(self, hard_16_hand):
        """Test hard hand calculation."""
        assert hard_16_hand.score == 16
        assert not hard_16_hand.is_soft

    def test_soft_hand_score(self, soft_17_hand):
        """Test soft hand calculation."""
        assert soft_17_hand.score == 17
        assert soft_17_hand.is_soft

    def test_ace_king_is_21(self, blackjack_hand):
        """Test that A-K counts the ace as 11."""
        assert blackjack_hand.score == 21
        assert blackjack_hand.is_blackjack
        assert blackjack_hand.is_soft

    def test_ace_ace_nine_is_21(self):
        """Test that A-A-9 counts one ace as 11 and one as 1."""
        assert hand_of("AS", "AH", "9C").score == 21

    def test_king_queen_two_busts(self):
        """Test that K-Q-2 busts with no ace to convert."""
        hand = hand_of("KS", "QH", "2C")
        assert hand.score == BUST
        assert hand.is_busted

    def test_bust_hand(self, bust_hand):
        """Test bust detection."""
        assert bust_hand.is_busted
        assert bust_hand.score == BUST

    def test_not_blackjack_three_cards(self):
        """Test that 21 with 3 cards is not blackjack."""
        hand = hand_of("7S", "7H", "7C")
        assert hand.score == 21
        assert not hand.is_blackjack

    def test_soft_to_hard_transition(self):
        """Test ace switching from 11 to 1."""
        hand = Hand()
        hand.add_card(Card(Rank.ACE, Suit.SPADES))
        assert hand.score == 11
        assert hand.is_soft

        hand.add_card(Card(Rank.FIVE, Suit.HEARTS))
        assert hand.score == 16
        assert hand.is_soft

        hand.add_card(Card(Rank.EIGHT, Suit.CLUBS))
        assert hand.score == 14
        assert not hand.is_soft

    def test_multiple_aces(self):
        """Test hand with multiple aces."""
        hand = hand_of("AS", "AH")
        assert hand.score == 12
        assert hand.is_soft

        hand.add_card(Card(Rank.ACE, Suit.CLUBS))
        assert hand.score == 13

        hand.add_card(Card(Rank.NINE, Suit.DIAMONDS))
        assert hand.score == 12
        assert not hand.is_soft

    def test_score_is_recomputed_after_add(self, hard_16_hand):
        """Test that adding a card is reflected immediately."""
        assert hard_16_hand.score == 16
        hard_16_hand.add_card(Card(Rank.SIX, Suit.CLUBS))
        assert hard_16_hand.score == BUST

    @given(hand_strategy())
    def test_score_is_bust_or_valid_total(self, hand):
        """Test that a score is either the bust marker or 0..21."""
        assert hand.score == BUST or 0 <= hand.score <= 21

    @given(hand_strategy())
    def test_bust_means_minimum_total_over_21(self, hand):
        """Test that only hands whose all-aces-low total exceeds 21 bust."""
        minimum = sum(1 if card.is_ace else card.value for card in hand)
        assert hand.is_busted == (minimum > 21)

    def test_format_ranks(self):
        """Test the ranks display line."""
        assert hand_of("AS", "10H", "KD").format_ranks() == "A 10 K"
        assert Hand().format_ranks() == ""

    def test_format_score(self, hard_16_hand, bust_hand):
        """Test the score display line."""
        assert hard_16_hand.format_score() == "Player hand value: 16"
        assert bust_hand.format_score() == "Player busted!"
        assert hand_of("9S", name="Dealer").format_score() == "Dealer hand value: 9"

    def test_module_format_score(self):
        """Test formatting from a raw score."""
        assert format_score("Dealer", 21) == "Dealer hand value: 21"
        assert format_score("Dealer", 0) == "Dealer hand value: 0"
        assert format_score("Dealer", BUST) == "Dealer busted!"

    def test_str(self, blackjack_hand, bust_hand, soft_17_hand):
        """Test string representation."""
        assert str(blackjack_hand) == "Player: A♠ K♥ (BLACKJACK)"
        assert str(bust_hand).endswith("(BUST)")
        assert str(soft_17_hand).endswith("(soft 17)")


class TestEvaluateHands:
    """Tests for comparing player and dealer hands."""

    @pytest.mark.parametrize(
        "player, dealer, expected",
        [
            (("10S", "9H"), ("10C", "7D"), Outcome.WIN),
            (("10S", "7H"), ("10C", "9D"), Outcome.LOSE),
            (("10S", "8H"), ("9C", "9D"), Outcome.PUSH),
            (("AS", "KH"), ("10C", "QD"), Outcome.WIN),
        ],
    )
    def test_compare_scores(self, player, dealer, expected):
        """Test the higher score wins and equal scores push."""
        assert evaluate_hands(hand_of(*player), hand_of(*dealer, name="Dealer")) == expected

    def test_player_bust_loses_to_anything(self, bust_hand):
        """Test a busted player loses even against a busted dealer."""
        dealer_bust = hand_of("KS", "QH", "5C", name="Dealer")
        assert evaluate_hands(bust_hand, dealer_bust) == Outcome.LOSE
        assert evaluate_hands(bust_hand, hand_of("2S", name="Dealer")) == Outcome.LOSE

    def test_dealer_bust_loses(self):
        """Test a busted dealer loses to a standing player."""
        dealer_bust = hand_of("KS", "QH", "5C", name="Dealer")
        assert evaluate_hands(hand_of("2S", "3H"), dealer_bust) == Outcome.WIN
