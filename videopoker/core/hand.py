"""
Hand Evaluation for five-card draw video poker.

This module classifies exactly five cards under the base (no wild cards)
rules and selects the cards that make up the win.

Base categories, checked in this order (the order is the precedence):
1. Royal Flush: T J Q K A of one suit
2. Straight Flush: 5 consecutive cards of same suit
3. Four of a Kind: 4 cards of same rank
4. Full House: 3 of a kind + pair
5. Flush: 5 cards of same suit
6. Straight: 5 consecutive cards
7. Three of a Kind: 3 cards of same rank
8. Two Pair: 2 different pairs
9. Jacks or Better: a pair of Jacks, Queens, Kings or Aces
10. High Card: nothing that pays

Note: Ace can be low in A-2-3-4-5 straight (wheel). A-2-3-4-5 suited is a
straight flush, not a royal.

Variant-specific categories (wild deuces, bonus quads) live in the same
HandRank enum but are produced by the variants, not by this module.
"""

from __future__ import annotations
from typing import Callable, List, Optional
from enum import Enum, auto
from collections import Counter

from videopoker.core.card import Card, Rank
from videopoker.core.rules import HAND_SIZE


class HandRank(Enum):
    """
    Hand categories.

    Members are not ordered by value; each variant's paytable decides what a
    category pays.
    """
    HIGH_CARD = auto()
    JACKS_OR_BETTER = auto()
    TWO_PAIR = auto()
    THREE_OF_A_KIND = auto()
    STRAIGHT = auto()
    FLUSH = auto()
    FULL_HOUSE = auto()
    FOUR_OF_A_KIND = auto()
    STRAIGHT_FLUSH = auto()
    ROYAL_FLUSH = auto()
    # Wild deuces
    FIVE_OF_A_KIND = auto()
    WILD_ROYAL_FLUSH = auto()
    FOUR_DEUCES = auto()
    # Bonus quads
    FOUR_ACES = auto()
    FOUR_ACES_WITH_KICKER = auto()
    FOUR_TWOS_THREES_FOURS = auto()
    FOUR_TWOS_THREES_FOURS_WITH_KICKER = auto()
    FOUR_FIVES_THROUGH_KINGS = auto()


# Hand rank names for display
HAND_RANK_NAMES = {
    HandRank.HIGH_CARD: "High Card",
    HandRank.JACKS_OR_BETTER: "Jacks or Better",
    HandRank.TWO_PAIR: "Two Pair",
    HandRank.THREE_OF_A_KIND: "Three of a Kind",
    HandRank.STRAIGHT: "Straight",
    HandRank.FLUSH: "Flush",
    HandRank.FULL_HOUSE: "Full House",
    HandRank.FOUR_OF_A_KIND: "Four of a Kind",
    HandRank.STRAIGHT_FLUSH: "Straight Flush",
    HandRank.ROYAL_FLUSH: "Royal Flush",
    HandRank.FIVE_OF_A_KIND: "Five of a Kind",
    HandRank.WILD_ROYAL_FLUSH: "Wild Royal Flush",
    HandRank.FOUR_DEUCES: "Four Deuces",
    HandRank.FOUR_ACES: "Four Aces",
    HandRank.FOUR_ACES_WITH_KICKER: "Four Aces with 2, 3 or 4",
    HandRank.FOUR_TWOS_THREES_FOURS: "Four 2s, 3s or 4s",
    HandRank.FOUR_TWOS_THREES_FOURS_WITH_KICKER: "Four 2s, 3s or 4s with A-4",
    HandRank.FOUR_FIVES_THROUGH_KINGS: "Four 5s through Kings",
}

# Categories won by all five cards
FULL_HAND_RANKS = frozenset({
    HandRank.ROYAL_FLUSH,
    HandRank.STRAIGHT_FLUSH,
    HandRank.FULL_HOUSE,
    HandRank.FLUSH,
    HandRank.STRAIGHT,
})

WHEEL_RANKS = [Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE, Rank.ACE]


def check_hand_size(cards: List[Card]) -> None:
    """Raise ValueError unless exactly five cards are given."""
    if cards is None or len(cards) != HAND_SIZE:
        count = 0 if cards is None else len(cards)
        raise ValueError(f"Hand must contain exactly {HAND_SIZE} cards, got {count}")


def evaluate_hand(cards: List[Card]) -> HandRank:
    """
    Classify a five-card hand under the base rules.

    Args:
        cards: Exactly 5 Card objects, in any order

    Returns:
        The HandRank category

    Raises:
        ValueError: If not exactly 5 cards provided
    """
    check_hand_size(cards)

    sorted_cards = sorted(cards, key=lambda c: c.rank)
    ranks = [c.rank for c in sorted_cards]

    is_flush = _is_flush(sorted_cards)
    is_straight = _is_straight(ranks)

    rank_counts = Counter(ranks)
    counts = sorted(rank_counts.values(), reverse=True)

    if is_flush and is_straight:
        if ranks[0] == Rank.TEN and ranks[-1] == Rank.ACE:
            return HandRank.ROYAL_FLUSH
        return HandRank.STRAIGHT_FLUSH

    if counts[0] == 4:
        return HandRank.FOUR_OF_A_KIND

    if len(rank_counts) == 2 and counts[0] == 3:
        return HandRank.FULL_HOUSE

    if is_flush:
        return HandRank.FLUSH

    if is_straight:
        return HandRank.STRAIGHT

    if counts[0] == 3:
        return HandRank.THREE_OF_A_KIND

    if counts.count(2) == 2:
        return HandRank.TWO_PAIR

    if _jacks_or_better_rank(rank_counts) is not None:
        return HandRank.JACKS_OR_BETTER

    return HandRank.HIGH_CARD


def winning_cards(cards: List[Card], hand_rank: HandRank) -> List[Card]:
    """
    Return the cards that justify ``hand_rank`` under the base rules.

    The result keeps the order of ``cards``. Hands of the wrong size and
    non-paying categories give an empty list.
    """
    if cards is None or len(cards) != HAND_SIZE:
        return []

    if hand_rank in FULL_HAND_RANKS:
        return list(cards)

    rank_counts = Counter(c.rank for c in cards)

    if hand_rank == HandRank.FOUR_OF_A_KIND:
        return _cards_in_group(cards, rank_counts, 4)

    if hand_rank == HandRank.THREE_OF_A_KIND:
        return _cards_in_group(cards, rank_counts, 3)

    if hand_rank == HandRank.TWO_PAIR:
        return _cards_in_group(cards, rank_counts, 2)

    if hand_rank == HandRank.JACKS_OR_BETTER:
        pair_rank = _jacks_or_better_rank(rank_counts)
        return [c for c in cards if c.rank == pair_rank]

    return []


def quad_rank(cards: List[Card]) -> Optional[Rank]:
    """Return the rank that appears four times, if any."""
    for rank, count in Counter(c.rank for c in cards).items():
        if count == 4:
            return rank
    return None


def kicker_rank(cards: List[Card]) -> Optional[Rank]:
    """Return the rank that appears exactly once in a four of a kind."""
    if quad_rank(cards) is None:
        return None
    for rank, count in Counter(c.rank for c in cards).items():
        if count == 1:
            return rank
    return None


def _is_flush(cards: List[Card]) -> bool:
    """All cards share one suit."""
    return all(c.suit == cards[0].suit for c in cards)


def _is_straight(sorted_ranks: List[Rank]) -> bool:
    """Check five ascending ranks for a straight, including the wheel."""
    if all(sorted_ranks[i + 1] == sorted_ranks[i] + 1 for i in range(len(sorted_ranks) - 1)):
        return True
    return list(sorted_ranks) == WHEEL_RANKS


def _jacks_or_better_rank(rank_counts: Counter) -> Optional[Rank]:
    """Return the rank of a pair of Jacks or better, if present."""
    for rank, count in rank_counts.items():
        if count == 2 and rank >= Rank.JACK:
            return rank
    return None


def _cards_in_group(cards: List[Card], rank_counts: Counter, count: int) -> List[Card]:
    """Cards whose rank appears exactly ``count`` times."""
    return [c for c in cards if rank_counts[c.rank] == count]


def get_hand_description(
    cards: List[Card],
    hand_rank: Optional[HandRank] = None,
    is_wild: Optional[Callable[[Card], bool]] = None,
) -> str:
    """
    Get a human-readable description of the hand.

    ``hand_rank`` defaults to the base evaluation; variants pass their own.
    When ``is_wild`` marks any card as wild, only the category name is
    given, since the natural ranks no longer say which cards were made.
    """
    if cards is None or len(cards) != HAND_SIZE:
        return "Incomplete hand"

    if hand_rank is None:
        hand_rank = evaluate_hand(cards)
    base_name = HAND_RANK_NAMES[hand_rank]
    if is_wild is not None and any(is_wild(c) for c in cards):
        return base_name
    rank_counts = Counter(c.rank for c in cards)

    if hand_rank in (HandRank.STRAIGHT, HandRank.STRAIGHT_FLUSH, HandRank.FLUSH):
        ranks = sorted(rank_counts)
        if hand_rank != HandRank.FLUSH and ranks == WHEEL_RANKS:
            return f"{base_name}, Five high"
        return f"{base_name}, {_rank_name(ranks[-1])} high"
    elif hand_rank == HandRank.FOUR_OF_A_KIND and quad_rank(cards) is not None:
        return f"{base_name}, {_rank_name(quad_rank(cards))}s"
    elif hand_rank == HandRank.FULL_HOUSE and len(rank_counts) == 2:
        trips = max(rank_counts, key=rank_counts.get)
        pair = min(rank_counts, key=rank_counts.get)
        return f"{base_name}, {_rank_name(trips)}s full of {_rank_name(pair)}s"
    elif hand_rank == HandRank.THREE_OF_A_KIND and max(rank_counts.values()) == 3:
        trips = max(rank_counts, key=rank_counts.get)
        return f"{base_name}, {_rank_name(trips)}s"
    elif hand_rank == HandRank.TWO_PAIR:
        pairs = sorted([r for r, c in rank_counts.items() if c == 2], reverse=True)
        return f"{base_name}, {_rank_name(pairs[0])}s and {_rank_name(pairs[1])}s"
    elif hand_rank == HandRank.JACKS_OR_BETTER:
        return f"Pair of {_rank_name(_jacks_or_better_rank(rank_counts))}s"
    elif hand_rank == HandRank.HIGH_CARD:
        return f"{base_name}, {_rank_name(max(rank_counts))}"
    return base_name


def _rank_name(rank: Rank) -> str:
    """Get the name of a rank."""
    names = {
        Rank.TWO: "Two", Rank.THREE: "Three", Rank.FOUR: "Four",
        Rank.FIVE: "Five", Rank.SIX: "Six", Rank.SEVEN: "Seven",
        Rank.EIGHT: "Eight", Rank.NINE: "Nine", Rank.TEN: "Ten",
        Rank.JACK: "Jack", Rank.QUEEN: "Queen", Rank.KING: "King",
        Rank.ACE: "Ace"
    }
    return names[rank]
