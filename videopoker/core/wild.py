"""
Deuces Wild hand evaluation.

Every Two substitutes for any card. Hands with wild cards are classified by
trying categories from the most to the least valuable:

1. Four Deuces (checked first, it does not depend on the other card)
2. Five of a Kind: all natural cards share one rank
3. Wild Royal Flush: natural cards suited, distinct, all Ten or higher
4. Straight Flush: natural cards suited and a wild straight
5. Four of a Kind: largest natural group + deuces >= 4
6. Full House: exactly one deuce with two natural pairs
7. Flush: natural cards suited
8. Straight: distinct natural ranks spanning less than five values
9. Three of a Kind: largest natural group + deuces >= 3

Hands without deuces use the base rules, except that the variant pays
nothing below three of a kind.
"""

from __future__ import annotations
from typing import List, Tuple
from collections import Counter

from videopoker.core.card import Card, Rank
from videopoker.core.rules import HAND_SIZE
from videopoker.core.hand import (
    HandRank, check_hand_size, evaluate_hand, winning_cards as base_winning_cards,
)


WILD_RANK = Rank.TWO

# Base categories that do not pay when no deuce is held
_UNPAID_NATURAL_RANKS = frozenset({
    HandRank.JACKS_OR_BETTER,
    HandRank.TWO_PAIR,
    HandRank.HIGH_CARD,
})

# Categories won by the whole hand
_FULL_HAND_RANKS = frozenset({
    HandRank.ROYAL_FLUSH,
    HandRank.WILD_ROYAL_FLUSH,
    HandRank.FIVE_OF_A_KIND,
    HandRank.STRAIGHT_FLUSH,
    HandRank.FULL_HOUSE,
    HandRank.FLUSH,
    HandRank.STRAIGHT,
})

_GROUP_SIZES = {
    HandRank.FOUR_OF_A_KIND: 4,
    HandRank.THREE_OF_A_KIND: 3,
}


def is_wild(card: Card) -> bool:
    """Deuces are wild."""
    return card.rank == WILD_RANK


def split_wilds(cards: List[Card]) -> Tuple[List[Card], List[Card]]:
    """Split a hand into (deuces, natural cards), keeping hand order."""
    deuces = [c for c in cards if is_wild(c)]
    naturals = [c for c in cards if not is_wild(c)]
    return deuces, naturals


def evaluate_deuces_wild(cards: List[Card]) -> HandRank:
    """
    Classify a five-card hand with deuces wild.

    Raises:
        ValueError: If not exactly 5 cards provided
    """
    check_hand_size(cards)

    deuces, naturals = split_wilds(cards)
    num_deuces = len(deuces)

    if num_deuces == 4:
        return HandRank.FOUR_DEUCES

    if num_deuces == 0:
        natural_rank = evaluate_hand(cards)
        if natural_rank in _UNPAID_NATURAL_RANKS:
            return HandRank.HIGH_CARD
        return natural_rank

    rank_counts = Counter(c.rank for c in naturals)
    max_group = max(rank_counts.values())

    if len(rank_counts) == 1:
        return HandRank.FIVE_OF_A_KIND

    if _is_wild_royal_flush(naturals):
        return HandRank.WILD_ROYAL_FLUSH

    if _is_suited(naturals) and _is_wild_straight(naturals):
        return HandRank.STRAIGHT_FLUSH

    if max_group + num_deuces >= 4:
        return HandRank.FOUR_OF_A_KIND

    if num_deuces == 1 and sorted(rank_counts.values()) == [2, 2]:
        return HandRank.FULL_HOUSE

    if _is_suited(naturals):
        return HandRank.FLUSH

    if _is_wild_straight(naturals):
        return HandRank.STRAIGHT

    if max_group + num_deuces >= 3:
        return HandRank.THREE_OF_A_KIND

    return HandRank.HIGH_CARD


def deuces_wild_winning_cards(cards: List[Card], hand_rank: HandRank) -> List[Card]:
    """
    Return the cards that justify ``hand_rank`` with deuces wild.

    For four and three of a kind the deuces are listed first, followed by just
    enough cards of the largest natural group to complete the category.
    """
    if cards is None or len(cards) != HAND_SIZE or hand_rank == HandRank.HIGH_CARD:
        return []

    if hand_rank in _FULL_HAND_RANKS:
        return list(cards)

    deuces, naturals = split_wilds(cards)

    if hand_rank == HandRank.FOUR_DEUCES:
        return deuces

    if hand_rank in _GROUP_SIZES:
        if not deuces:
            return base_winning_cards(cards, hand_rank)
        rank_counts = Counter(c.rank for c in naturals)
        # Largest group; the higher rank wins a tie
        group_rank = max(rank_counts, key=lambda r: (rank_counts[r], r))
        needed = _GROUP_SIZES[hand_rank] - len(deuces)
        group = [c for c in naturals if c.rank == group_rank][:needed]
        return deuces + group

    return list(cards)


def _is_suited(naturals: List[Card]) -> bool:
    return len({c.suit for c in naturals}) == 1


def _is_wild_royal_flush(naturals: List[Card]) -> bool:
    if not _is_suited(naturals):
        return False
    if any(c.rank < Rank.TEN for c in naturals):
        return False
    return len({c.rank for c in naturals}) == len(naturals)


def _is_wild_straight(naturals: List[Card]) -> bool:
    """
    Distinct natural ranks that fit in a five-value window.

    With at most four natural cards in a five-card hand, the deuces always
    cover the gaps inside such a window. Ace is tried high, then low.
    """
    ranks = [int(c.rank) for c in naturals]
    if len(set(ranks)) != len(ranks):
        return False

    if max(ranks) - min(ranks) < 5:
        return True

    if Rank.ACE in ranks:
        low_ranks = [1 if r == Rank.ACE else r for r in ranks]
        return max(low_ranks) - min(low_ranks) < 5

    return False
