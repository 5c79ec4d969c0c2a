"""
Tests for Double Double Bonus (bonus quads) evaluation.
"""

import pytest
from videopoker.core.card import parse_cards
from videopoker.core.hand import HandRank
from videopoker.core.variants import BONUS_QUADS, refine_four_of_a_kind


class TestBonusQuadsEvaluation:
    """Four of a kind is split by quad rank and kicker."""

    @pytest.mark.parametrize("text,expected", [
        ("As Ah Ad Ac 2s", HandRank.FOUR_ACES_WITH_KICKER),
        ("As Ah Ad Ac 3s", HandRank.FOUR_ACES_WITH_KICKER),
        ("As Ah Ad Ac 4s", HandRank.FOUR_ACES_WITH_KICKER),
        ("As Ah Ad Ac 5s", HandRank.FOUR_ACES),
        ("As Ah Ad Ac Ks", HandRank.FOUR_ACES),
        ("3s 3h 3d 3c As", HandRank.FOUR_TWOS_THREES_FOURS_WITH_KICKER),
        ("2s 2h 2d 2c 4s", HandRank.FOUR_TWOS_THREES_FOURS_WITH_KICKER),
        ("4s 4h 4d 4c 2s", HandRank.FOUR_TWOS_THREES_FOURS_WITH_KICKER),
        ("4s 4h 4d 4c 9s", HandRank.FOUR_TWOS_THREES_FOURS),
        ("5s 5h 5d 5c As", HandRank.FOUR_FIVES_THROUGH_KINGS),
        ("Ks Kh Kd Kc 2s", HandRank.FOUR_FIVES_THROUGH_KINGS),
    ])
    def test_four_of_a_kind_split(self, text, expected):
        assert BONUS_QUADS.evaluate_hand(parse_cards(text)) == expected

    @pytest.mark.parametrize("text,expected", [
        ("As Ks Qs Js Ts", HandRank.ROYAL_FLUSH),
        ("Ks Kh Kd 7c 7s", HandRank.FULL_HOUSE),
        ("Ks Kh 7d 7c 2s", HandRank.TWO_PAIR),
        ("Js Jh 7d 4c 2s", HandRank.JACKS_OR_BETTER),
        ("Ts Th 7d 4c 2s", HandRank.HIGH_CARD),
    ])
    def test_other_hands_use_base_rules(self, text, expected):
        assert BONUS_QUADS.evaluate_hand(parse_cards(text)) == expected

    def test_refine_requires_quads(self):
        with pytest.raises(ValueError):
            refine_four_of_a_kind(parse_cards("Ks Kh Kd 7c 7s"))


class TestBonusQuadsPayouts:
    """Bonus quads paytable."""

    def test_four_aces_with_kicker(self):
        hand = parse_cards("As Ah Ad Ac 3s")
        rank = BONUS_QUADS.evaluate_hand(hand)
        assert BONUS_QUADS.calculate_payout(rank, 1) == 400
        assert BONUS_QUADS.calculate_payout(rank, 5) == 2000

    def test_four_aces(self):
        rank = BONUS_QUADS.evaluate_hand(parse_cards("As Ah Ad Ac Ks"))
        assert BONUS_QUADS.calculate_payout(rank, 1) == 160
        assert BONUS_QUADS.calculate_payout(rank, 5) == 800

    def test_low_quads(self):
        with_kicker = BONUS_QUADS.evaluate_hand(parse_cards("3s 3h 3d 3c As"))
        without = BONUS_QUADS.evaluate_hand(parse_cards("3s 3h 3d 3c 9s"))
        assert BONUS_QUADS.calculate_payout(with_kicker, 1) == 160
        assert BONUS_QUADS.calculate_payout(without, 1) == 80

    def test_middle_quads(self):
        rank = BONUS_QUADS.evaluate_hand(parse_cards("9s 9h 9d 9c As"))
        assert BONUS_QUADS.calculate_payout(rank, 2) == 100

    def test_two_pair_pays_one_per_credit(self):
        rank = BONUS_QUADS.evaluate_hand(parse_cards("Ks Kh 7d 7c 2s"))
        assert BONUS_QUADS.calculate_payout(rank, 4) == 4


class TestBonusQuadsWinningCards:
    """Kicker categories include the kicker."""

    def test_kicker_category_uses_whole_hand(self):
        hand = parse_cards("As Ah 3s Ad Ac")
        rank = BONUS_QUADS.evaluate_hand(hand)
        assert BONUS_QUADS.winning_cards(hand, rank) == hand

    def test_flat_category_uses_the_quads(self):
        hand = parse_cards("9s Kh 9h 9d 9c")
        rank = BONUS_QUADS.evaluate_hand(hand)
        assert BONUS_QUADS.winning_cards(hand, rank) == parse_cards("9s 9h 9d 9c")

    def test_base_categories(self):
        hand = parse_cards("Ks 4c Kh 7d 2s")
        assert BONUS_QUADS.winning_cards(hand, HandRank.JACKS_OR_BETTER) == parse_cards("Ks Kh")
