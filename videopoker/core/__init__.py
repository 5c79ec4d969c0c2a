"""
VideoPoker Core - Pure Python Video Poker Game Logic

This module contains all game logic without any network or storage
dependencies.
"""

from videopoker.core.card import Card, Deck, Rank, Suit
from videopoker.core.bankroll import Bankroll
from videopoker.core.exceptions import (
    VideoPokerError, InvalidStateError, InsufficientCreditsError, InsufficientCardsError,
)
from videopoker.core.hand import HandRank, evaluate_hand
from videopoker.core.paytable import PaytableRow
from videopoker.core.rules import GameState, DoubleUpOutcome
from videopoker.core.variants import (
    GameVariant, VariantKind, STANDARD, WILD_DEUCES, BONUS_QUADS,
    get_variant, available_variants,
)
from videopoker.core.game import VideoPokerGame, GameSnapshot, DoubleUpResult

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "Bankroll",
    "VideoPokerError",
    "InvalidStateError",
    "InsufficientCreditsError",
    "InsufficientCardsError",
    "HandRank",
    "evaluate_hand",
    "PaytableRow",
    "GameState",
    "DoubleUpOutcome",
    "GameVariant",
    "VariantKind",
    "STANDARD",
    "WILD_DEUCES",
    "BONUS_QUADS",
    "get_variant",
    "available_variants",
    "VideoPokerGame",
    "GameSnapshot",
    "DoubleUpResult",
]
