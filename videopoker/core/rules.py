"""
Video Poker Rules and Constants.

1. Every hand is dealt from a freshly reset and shuffled 52-card deck.

2. Bets range from 1 to 5 credits. Paytables list one payout per bet size;
   the top-tier hand pays a jackpot only at the maximum bet.

3. Double-up: position 0 of the double-up hand is the banker card, positions
   1-4 are the player's face-down choices. Only ranks are compared.

4. A bankroll that is empty when the game is reset is topped up so play can
   continue.
"""

from enum import Enum, auto


class GameState(Enum):
    """States of a video poker round."""
    WAITING_FOR_BET = auto()  # No hand in progress
    DEALT = auto()            # Five cards dealt, holds may be toggled
    DOUBLE_UP = auto()        # Banker card shown, player picks a card
    GAME_OVER = auto()        # Hand scored, may double up or collect


class DoubleUpOutcome(Enum):
    """Result of a single double-up pick."""
    WIN = "WIN"
    PUSH = "PUSH"
    LOSS = "LOSS"


# Hand layout
HAND_SIZE = 5
BANKER_INDEX = 0

# Betting
MIN_BET = 1
MAX_BET = 5

# Bankroll
DEFAULT_CREDITS = 100
TOP_UP_CREDITS = 100


def is_valid_bet(amount: int) -> bool:
    """Check that a bet is one of the paytable's bet sizes."""
    return MIN_BET <= amount <= MAX_BET


def is_hold_index(index: int) -> bool:
    """Any hand position may be held."""
    return 0 <= index < HAND_SIZE


def is_double_up_pick(index: int) -> bool:
    """The player picks one of the face-down cards, never the banker card."""
    return BANKER_INDEX < index < HAND_SIZE
