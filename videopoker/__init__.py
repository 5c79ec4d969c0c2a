"""
VideoPoker - Single-player Video Poker Engine

A standalone video poker project with:
- Pure Python game core (cards, hand evaluation, rule variants, round state machine)
- JSON bankroll storage
- FastAPI server exposing the game to a presentation layer

Usage:
    from videopoker.core import VideoPokerGame, get_variant
    game = VideoPokerGame(get_variant("deuces wild"), initial_credits=100)
"""

__version__ = "0.1.0"

from videopoker.core.card import Card, Deck
from videopoker.core.game import VideoPokerGame
from videopoker.core.hand import HandRank, evaluate_hand
from videopoker.core.variants import GameVariant, get_variant

__all__ = [
    "Card",
    "Deck",
    "VideoPokerGame",
    "HandRank",
    "evaluate_hand",
    "GameVariant",
    "get_variant",
    "__version__",
]
