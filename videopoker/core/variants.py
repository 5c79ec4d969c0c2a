"""
Game variants.

The set of variants is closed: Standard (Jacks or Better), Wild Deuces and
Bonus Quads (Double Double Bonus). Each variant is a frozen record carrying
its fixed paytable; evaluation, payouts, winning-card selection and the wild
card predicate dispatch on the variant kind.

Usage:
    variant = get_variant("wild_deuces")
    rank = variant.evaluate_hand(hand)
    credits = variant.calculate_payout(rank, bet=5)
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Union

from videopoker.core.card import Card, Rank
from videopoker.core.hand import (
    HandRank, HAND_RANK_NAMES, check_hand_size, evaluate_hand as base_evaluate,
    get_hand_description,
    winning_cards as base_winning_cards, quad_rank, kicker_rank,
)
from videopoker.core.paytable import (
    Paytable, PaytableRow, rows_by_rank,
    JACKS_OR_BETTER_PAYTABLE, DEUCES_WILD_PAYTABLE, DOUBLE_DOUBLE_BONUS_PAYTABLE,
)
from videopoker.core.rules import MIN_BET, MAX_BET
from videopoker.core.wild import (
    evaluate_deuces_wild, deuces_wild_winning_cards, is_wild,
)


class VariantKind(Enum):
    """The supported rule variants."""
    STANDARD = "standard"
    WILD_DEUCES = "wild_deuces"
    BONUS_QUADS = "bonus_quads"


LOW_QUAD_RANKS = frozenset({Rank.TWO, Rank.THREE, Rank.FOUR})
# Kickers that upgrade quad Aces / quad 2s-4s
ACES_KICKERS = LOW_QUAD_RANKS
LOW_QUAD_KICKERS = frozenset({Rank.ACE, Rank.TWO, Rank.THREE, Rank.FOUR})

KICKER_QUAD_RANKS = frozenset({
    HandRank.FOUR_ACES_WITH_KICKER,
    HandRank.FOUR_TWOS_THREES_FOURS_WITH_KICKER,
})
FLAT_QUAD_RANKS = frozenset({
    HandRank.FOUR_ACES,
    HandRank.FOUR_TWOS_THREES_FOURS,
    HandRank.FOUR_FIVES_THROUGH_KINGS,
})


@dataclass(frozen=True)
class GameVariant:
    """A rule variant and its fixed paytable."""
    kind: VariantKind
    name: str
    rows: Paytable

    def evaluate_hand(self, hand: List[Card]) -> HandRank:
        """Classify five cards under this variant's rules."""
        return evaluate_for(self, hand)

    def calculate_payout(self, rank: HandRank, bet: int) -> int:
        """Credits won by ``rank`` for a bet of 1-5."""
        return payout_for(self, rank, bet)

    def winning_cards(self, hand: List[Card], rank: HandRank) -> List[Card]:
        """Cards that make up the win, in hand order."""
        return winning_cards_for(self, hand, rank)

    def is_card_wild(self, card: Card) -> bool:
        return self.kind == VariantKind.WILD_DEUCES and is_wild(card)

    def describe_hand(self, hand: List[Card], rank: HandRank) -> str:
        """Readable description of a classified hand, e.g. "Pair of Jacks"."""
        return get_hand_description(hand, rank, is_wild=self.is_card_wild)

    def paytable(self) -> List[PaytableRow]:
        """Paytable rows in display order (best hand first)."""
        return list(self.rows)

    def hand_name(self, rank: HandRank) -> str:
        """Paytable name of a category, or its generic name if it does not pay."""
        row = rows_by_rank(self.rows).get(rank)
        return row.display_name if row else HAND_RANK_NAMES[rank]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "kind": self.kind.value,
            "name": self.name,
            "paytable": [row.to_dict() for row in self.rows],
        }


STANDARD = GameVariant(VariantKind.STANDARD, "Jacks or Better", JACKS_OR_BETTER_PAYTABLE)
WILD_DEUCES = GameVariant(VariantKind.WILD_DEUCES, "Deuces Wild", DEUCES_WILD_PAYTABLE)
BONUS_QUADS = GameVariant(VariantKind.BONUS_QUADS, "Double Double Bonus", DOUBLE_DOUBLE_BONUS_PAYTABLE)

VARIANTS: Dict[VariantKind, GameVariant] = {
    STANDARD.kind: STANDARD,
    WILD_DEUCES.kind: WILD_DEUCES,
    BONUS_QUADS.kind: BONUS_QUADS,
}


def available_variants() -> List[GameVariant]:
    """All variants, Standard first."""
    return list(VARIANTS.values())


def get_variant(name: Union[str, VariantKind]) -> GameVariant:
    """
    Look up a variant by kind, kind value ("wild_deuces") or display name
    ("Deuces Wild"). String lookups ignore case.

    Raises:
        ValueError: If no variant matches
    """
    if isinstance(name, VariantKind):
        return VARIANTS[name]

    key = name.strip().lower()
    for variant in VARIANTS.values():
        if key in (variant.kind.value, variant.kind.name.lower(), variant.name.lower()):
            return variant
    raise ValueError(f"Unknown game variant: {name}")


def evaluate_for(variant: GameVariant, hand: List[Card]) -> HandRank:
    """Dispatch hand evaluation on the variant kind."""
    if variant.kind == VariantKind.WILD_DEUCES:
        return evaluate_deuces_wild(hand)

    rank = base_evaluate(hand)
    if variant.kind == VariantKind.BONUS_QUADS and rank == HandRank.FOUR_OF_A_KIND:
        return refine_four_of_a_kind(hand)
    return rank


def payout_for(variant: GameVariant, rank: HandRank, bet: int) -> int:
    """
    Look up the payout in the variant's paytable.

    Raises:
        ValueError: If bet is outside 1-5
    """
    if not MIN_BET <= bet <= MAX_BET:
        raise ValueError(f"Bet must be {MIN_BET}-{MAX_BET}, got {bet}")
    row = rows_by_rank(variant.rows).get(rank)
    return row.payout(bet) if row else 0


def winning_cards_for(variant: GameVariant, hand: List[Card], rank: HandRank) -> List[Card]:
    """Dispatch winning-card selection on the variant kind."""
    if variant.kind == VariantKind.WILD_DEUCES:
        return deuces_wild_winning_cards(hand, rank)

    if variant.kind == VariantKind.BONUS_QUADS:
        if rank in KICKER_QUAD_RANKS:
            return list(hand)
        if rank in FLAT_QUAD_RANKS:
            return base_winning_cards(hand, HandRank.FOUR_OF_A_KIND)

    return base_winning_cards(hand, rank)


def refine_four_of_a_kind(hand: List[Card]) -> HandRank:
    """
    Split a four of a kind into the Double Double Bonus categories.

    Aces with a 2, 3 or 4 kicker and 2s/3s/4s with an A-4 kicker pay a
    bonus; 5s through Kings pay a flat rate whatever the kicker.
    """
    check_hand_size(hand)
    quads = quad_rank(hand)
    if quads is None:
        raise ValueError("Hand is not a four of a kind")
    kicker = kicker_rank(hand)

    if quads == Rank.ACE:
        if kicker in ACES_KICKERS:
            return HandRank.FOUR_ACES_WITH_KICKER
        return HandRank.FOUR_ACES

    if quads in LOW_QUAD_RANKS:
        if kicker in LOW_QUAD_KICKERS:
            return HandRank.FOUR_TWOS_THREES_FOURS_WITH_KICKER
        return HandRank.FOUR_TWOS_THREES_FOURS

    return HandRank.FOUR_FIVES_THROUGH_KINGS
