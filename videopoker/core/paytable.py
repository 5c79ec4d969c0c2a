"""
Fixed paytables.

Each row lists the credits paid for bets of 1 to 5. The tables are static
data: the royal flush column at 5 credits is the jackpot and is not a linear
extrapolation of the smaller bets.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Tuple

from videopoker.core.hand import HandRank
from videopoker.core.rules import MIN_BET, MAX_BET


@dataclass(frozen=True)
class PaytableRow:
    """One payable hand category and its payouts for bets 1-5."""
    display_name: str
    rank: HandRank
    payouts: Tuple[int, int, int, int, int]

    def payout(self, bet: int) -> int:
        """Credits paid for ``bet`` (1-5)."""
        if not MIN_BET <= bet <= MAX_BET:
            raise ValueError(f"Bet must be {MIN_BET}-{MAX_BET}, got {bet}")
        return self.payouts[bet - MIN_BET]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.display_name,
            "rank": self.rank.name,
            "payouts": list(self.payouts),
        }


Paytable = Tuple[PaytableRow, ...]


# Standard 9/6 Jacks or Better
JACKS_OR_BETTER_PAYTABLE: Paytable = (
    PaytableRow("Royal Flush", HandRank.ROYAL_FLUSH, (250, 500, 750, 1000, 4000)),
    PaytableRow("Straight Flush", HandRank.STRAIGHT_FLUSH, (50, 100, 150, 200, 250)),
    PaytableRow("4 of a Kind", HandRank.FOUR_OF_A_KIND, (25, 50, 75, 100, 125)),
    PaytableRow("Full House", HandRank.FULL_HOUSE, (9, 18, 27, 36, 45)),
    PaytableRow("Flush", HandRank.FLUSH, (6, 12, 18, 24, 30)),
    PaytableRow("Straight", HandRank.STRAIGHT, (4, 8, 12, 16, 20)),
    PaytableRow("3 of a Kind", HandRank.THREE_OF_A_KIND, (3, 6, 9, 12, 15)),
    PaytableRow("Two Pair", HandRank.TWO_PAIR, (2, 4, 6, 8, 10)),
    PaytableRow("Jacks or Better", HandRank.JACKS_OR_BETTER, (1, 2, 3, 4, 5)),
)

# "Not So Ugly Ducks" Deuces Wild
DEUCES_WILD_PAYTABLE: Paytable = (
    PaytableRow("Natural Royal Flush", HandRank.ROYAL_FLUSH, (250, 500, 750, 1000, 4000)),
    PaytableRow("Four Deuces", HandRank.FOUR_DEUCES, (200, 400, 600, 800, 1000)),
    PaytableRow("Wild Royal Flush", HandRank.WILD_ROYAL_FLUSH, (25, 50, 75, 100, 125)),
    PaytableRow("Five of a Kind", HandRank.FIVE_OF_A_KIND, (16, 32, 48, 64, 80)),
    PaytableRow("Straight Flush", HandRank.STRAIGHT_FLUSH, (10, 20, 30, 40, 50)),
    PaytableRow("Four of a Kind", HandRank.FOUR_OF_A_KIND, (4, 8, 12, 16, 20)),
    PaytableRow("Full House", HandRank.FULL_HOUSE, (4, 8, 12, 16, 20)),
    PaytableRow("Flush", HandRank.FLUSH, (3, 6, 9, 12, 15)),
    PaytableRow("Straight", HandRank.STRAIGHT, (2, 4, 6, 8, 10)),
    PaytableRow("Three of a Kind", HandRank.THREE_OF_A_KIND, (1, 2, 3, 4, 5)),
)

# 9/6 Double Double Bonus
DOUBLE_DOUBLE_BONUS_PAYTABLE: Paytable = (
    PaytableRow("Royal Flush", HandRank.ROYAL_FLUSH, (250, 500, 750, 1000, 4000)),
    PaytableRow("Straight Flush", HandRank.STRAIGHT_FLUSH, (50, 100, 150, 200, 250)),
    PaytableRow("4 Aces w/ 2,3,4", HandRank.FOUR_ACES_WITH_KICKER, (400, 800, 1200, 1600, 2000)),
    PaytableRow("4 Aces", HandRank.FOUR_ACES, (160, 320, 480, 640, 800)),
    PaytableRow("4 2s,3s,4s w/ A-4", HandRank.FOUR_TWOS_THREES_FOURS_WITH_KICKER, (160, 320, 480, 640, 800)),
    PaytableRow("4 2s,3s,4s", HandRank.FOUR_TWOS_THREES_FOURS, (80, 160, 240, 320, 400)),
    PaytableRow("4 5s thru Kings", HandRank.FOUR_FIVES_THROUGH_KINGS, (50, 100, 150, 200, 250)),
    PaytableRow("Full House", HandRank.FULL_HOUSE, (9, 18, 27, 36, 45)),
    PaytableRow("Flush", HandRank.FLUSH, (6, 12, 18, 24, 30)),
    PaytableRow("Straight", HandRank.STRAIGHT, (4, 8, 12, 16, 20)),
    PaytableRow("3 of a Kind", HandRank.THREE_OF_A_KIND, (3, 6, 9, 12, 15)),
    PaytableRow("Two Pair", HandRank.TWO_PAIR, (1, 2, 3, 4, 5)),
    PaytableRow("Jacks or Better", HandRank.JACKS_OR_BETTER, (1, 2, 3, 4, 5)),
)


def rows_by_rank(paytable: Paytable) -> Dict[HandRank, PaytableRow]:
    """Index a paytable by hand category."""
    return {row.rank: row for row in paytable}
