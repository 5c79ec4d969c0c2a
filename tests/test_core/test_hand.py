"""
Tests for base hand evaluation.
"""

import itertools

import pytest
from videopoker.core.card import Card, Rank, Suit, parse_cards
from videopoker.core.hand import (
    HandRank, evaluate_hand, winning_cards, get_hand_description,
    quad_rank, kicker_rank,
)
from videopoker.core.wild import is_wild


class TestHandEvaluation:
    """Tests for evaluate_hand under the base rules."""

    def test_royal_flush(self, royal_flush):
        """Test royal flush detection."""
        assert evaluate_hand(royal_flush) == HandRank.ROYAL_FLUSH

    def test_straight_flush(self, straight_flush):
        """Test straight flush detection."""
        assert evaluate_hand(straight_flush) == HandRank.STRAIGHT_FLUSH

    def test_steel_wheel_is_straight_flush(self):
        """A-2-3-4-5 suited is a straight flush, not a royal."""
        assert evaluate_hand(parse_cards("Ah 2h 3h 4h 5h")) == HandRank.STRAIGHT_FLUSH

    def test_four_of_a_kind(self):
        """Test four of a kind detection."""
        assert evaluate_hand(parse_cards("9s 9h 9d 9c Ks")) == HandRank.FOUR_OF_A_KIND

    def test_full_house(self):
        """Test full house detection."""
        assert evaluate_hand(parse_cards("Ks Kh Kd 7c 7s")) == HandRank.FULL_HOUSE

    def test_flush(self):
        """Test flush detection."""
        assert evaluate_hand(parse_cards("As Js 8s 6s 2s")) == HandRank.FLUSH

    def test_straight(self):
        """Test straight detection."""
        assert evaluate_hand(parse_cards("9s 8h 7d 6c 5s")) == HandRank.STRAIGHT

    def test_wheel_straight(self, wheel_straight):
        """Test wheel (A-2-3-4-5) straight detection."""
        assert evaluate_hand(wheel_straight) == HandRank.STRAIGHT

    def test_broadway_straight(self):
        """Test A-high straight detection."""
        assert evaluate_hand(parse_cards("As Kh Qd Jc Ts")) == HandRank.STRAIGHT

    def test_no_wraparound_straight(self):
        """Q-K-A-2-3 is not a straight."""
        assert evaluate_hand(parse_cards("Qs Kh Ad 2c 3s")) == HandRank.HIGH_CARD

    def test_three_of_a_kind(self):
        """Test three of a kind detection."""
        assert evaluate_hand(parse_cards("7s 7h 7d Kc 2s")) == HandRank.THREE_OF_A_KIND

    def test_two_pair(self):
        """Test two pair detection."""
        assert evaluate_hand(parse_cards("Ks Kh 7d 7c 2s")) == HandRank.TWO_PAIR

    def test_low_two_pair(self):
        """Two pair does not need high cards."""
        assert evaluate_hand(parse_cards("3s 3h 2d 2c 9s")) == HandRank.TWO_PAIR

    @pytest.mark.parametrize("pair", ["J", "Q", "K", "A"])
    def test_jacks_or_better(self, pair):
        """A pair of Jacks or better pays."""
        hand = parse_cards(f"{pair}s {pair}h 7d 4c 2s")
        assert evaluate_hand(hand) == HandRank.JACKS_OR_BETTER

    @pytest.mark.parametrize("pair", ["2", "7", "T"])
    def test_low_pair_is_high_card(self, pair):
        """A pair below Jacks does not pay."""
        hand = parse_cards(f"{pair}s {pair}h Kd 4c 3s")
        assert evaluate_hand(hand) == HandRank.HIGH_CARD

    def test_high_card(self):
        """Test high card detection."""
        assert evaluate_hand(parse_cards("As Kh 8d 5c 3s")) == HandRank.HIGH_CARD

    def test_wrong_hand_size(self):
        """Only five-card hands are evaluated."""
        with pytest.raises(ValueError):
            evaluate_hand(parse_cards("As Kh 8d 5c"))
        with pytest.raises(ValueError):
            evaluate_hand(parse_cards("As Kh 8d 5c 3s 2s"))
        with pytest.raises(ValueError):
            evaluate_hand([])

    def test_order_does_not_matter(self):
        """Every permutation of a hand gives the same category."""
        for text, expected in [
            ("Ks Kh Kd 7c 7s", HandRank.FULL_HOUSE),
            ("Ah 2c 3d 4s 5h", HandRank.STRAIGHT),
            ("Qs Qh 7d 4c 2s", HandRank.JACKS_OR_BETTER),
        ]:
            for perm in itertools.permutations(parse_cards(text)):
                assert evaluate_hand(list(perm)) == expected


class TestWinningCards:
    """Tests for winning card selection."""

    def test_full_hand_categories(self, royal_flush, wheel_straight):
        """Five-card categories use the whole hand."""
        assert winning_cards(royal_flush, HandRank.ROYAL_FLUSH) == royal_flush
        assert winning_cards(wheel_straight, HandRank.STRAIGHT) == wheel_straight

    def test_four_of_a_kind(self):
        hand = parse_cards("9s Kd 9h 9d 9c")
        assert winning_cards(hand, HandRank.FOUR_OF_A_KIND) == parse_cards("9s 9h 9d 9c")

    def test_three_of_a_kind(self):
        hand = parse_cards("7s Kc 7h 2s 7d")
        assert winning_cards(hand, HandRank.THREE_OF_A_KIND) == parse_cards("7s 7h 7d")

    def test_two_pair_keeps_hand_order(self):
        """Winning cards follow the order of the hand."""
        hand = parse_cards("7d Ks 2s Kh 7c")
        assert winning_cards(hand, HandRank.TWO_PAIR) == parse_cards("7d Ks Kh 7c")

    def test_jacks_or_better_only_the_pair(self):
        hand = parse_cards("Qs 4c Qh 7d 2s")
        assert winning_cards(hand, HandRank.JACKS_OR_BETTER) == parse_cards("Qs Qh")

    def test_high_card_is_empty(self):
        hand = parse_cards("As Kh 8d 5c 3s")
        assert winning_cards(hand, HandRank.HIGH_CARD) == []

    def test_wrong_size_is_empty(self):
        assert winning_cards(parse_cards("As Ks Qs Js"), HandRank.FLUSH) == []


class TestQuadHelpers:
    """Tests for quad_rank and kicker_rank."""

    def test_quad_and_kicker(self):
        hand = parse_cards("As Ah Ad Ac 3s")
        assert quad_rank(hand) == Rank.ACE
        assert kicker_rank(hand) == Rank.THREE

    def test_no_quads(self):
        hand = parse_cards("As Ah Ad 3c 3s")
        assert quad_rank(hand) is None
        assert kicker_rank(hand) is None


class TestHandDescription:
    """Tests for human-readable descriptions."""

    def test_four_of_a_kind(self):
        assert get_hand_description(parse_cards("As Ah Ad Ac 3s")) == "Four of a Kind, Aces"

    def test_full_house(self):
        desc = get_hand_description(parse_cards("Ks Kh Kd 7c 7s"))
        assert desc == "Full House, Kings full of Sevens"

    def test_pair(self):
        assert get_hand_description(parse_cards("Js Jh 7d 4c 2s")) == "Pair of Jacks"

    def test_wheel(self, wheel_straight):
        assert get_hand_description(wheel_straight) == "Straight, Five high"

    def test_flush(self):
        assert get_hand_description(parse_cards("As Js 8s 6s 2s")) == "Flush, Ace high"

    def test_two_pair(self):
        desc = get_hand_description(parse_cards("7d Ks 2s Kh 7c"))
        assert desc == "Two Pair, Kings and Sevens"

    def test_explicit_rank(self):
        """Variants can pass their own category."""
        hand = parse_cards("As Ah Ad Ac 3s")
        assert get_hand_description(hand, HandRank.FOUR_ACES_WITH_KICKER) == "Four Aces with 2, 3 or 4"

    def test_incomplete(self):
        assert get_hand_description([Card(Rank.ACE, Suit.SPADES)]) == "Incomplete hand"

    @pytest.mark.parametrize("text,rank,expected", [
        ("2s 2h 3d 4c 5h", HandRank.STRAIGHT, "Straight"),
        ("2s Ah Kd Qc Jh", HandRank.STRAIGHT, "Straight"),
        ("2s 7h 7d 7c Kh", HandRank.FOUR_OF_A_KIND, "Four of a Kind"),
        ("2s Kh Kd 7c 7h", HandRank.FULL_HOUSE, "Full House"),
    ])
    def test_wild_cards_give_category_only(self, text, rank, expected):
        """Natural ranks do not describe a hand completed by wild cards."""
        assert get_hand_description(parse_cards(text), rank, is_wild=is_wild) == expected

    def test_no_wild_cards_keeps_detail(self):
        hand = parse_cards("9s 8h 7d 6c 5s")
        assert get_hand_description(hand, HandRank.STRAIGHT, is_wild=is_wild) == "Straight, Nine high"
