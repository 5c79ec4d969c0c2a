"""
Pytest configuration and shared fixtures for VideoPoker tests.
"""

import pytest
from videopoker.core.card import Card, Deck, Rank, Suit, parse_cards
from videopoker.core.game import VideoPokerGame
from videopoker.core.variants import STANDARD, WILD_DEUCES, BONUS_QUADS


class StackedDeck(Deck):
    """
    Deck whose top cards are fixed.

    After every reset the given cards come first, followed by the rest of
    the deck in canonical order. Shuffling does nothing.
    """

    def __init__(self, top_cards):
        self._top_cards = list(top_cards)
        super().__init__(shuffle=False)

    def reset(self) -> None:
        super().reset()
        rest = [c for c in self._cards if c not in self._top_cards]
        self._cards = list(self._top_cards) + rest

    def shuffle(self) -> None:
        pass


def cards(text):
    """Shorthand for parse_cards."""
    return parse_cards(text)


@pytest.fixture
def deck():
    """Create a fresh shuffled deck."""
    return Deck(shuffle=True)


@pytest.fixture
def unshuffled_deck():
    """Create a fresh unshuffled deck."""
    return Deck(shuffle=False)


@pytest.fixture
def standard_game():
    """Jacks or Better game with 100 credits."""
    return VideoPokerGame(variant=STANDARD, initial_credits=100)


@pytest.fixture
def stacked_game():
    """
    Factory for a game dealing from a stacked deck.

    Usage: stacked_game("As Ks Qs Js 3d", "Ts", variant=STANDARD, credits=100)
    The first five cards are the deal, the rest are the draw cards.
    """
    def _make(*stack, variant=STANDARD, credits=100):
        top = []
        for part in stack:
            top.extend(cards(part))
        return VideoPokerGame(variant=variant, initial_credits=credits, deck=StackedDeck(top))
    return _make


@pytest.fixture
def royal_flush():
    """Create a royal flush hand."""
    return [
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.KING, Suit.SPADES),
        Card(Rank.QUEEN, Suit.SPADES),
        Card(Rank.JACK, Suit.SPADES),
        Card(Rank.TEN, Suit.SPADES),
    ]


@pytest.fixture
def straight_flush():
    """Create a straight flush (9-high)."""
    return [
        Card(Rank.NINE, Suit.HEARTS),
        Card(Rank.EIGHT, Suit.HEARTS),
        Card(Rank.SEVEN, Suit.HEARTS),
        Card(Rank.SIX, Suit.HEARTS),
        Card(Rank.FIVE, Suit.HEARTS),
    ]


@pytest.fixture
def wheel_straight():
    """Create a wheel straight (A-2-3-4-5)."""
    return [
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.TWO, Suit.HEARTS),
        Card(Rank.THREE, Suit.DIAMONDS),
        Card(Rank.FOUR, Suit.CLUBS),
        Card(Rank.FIVE, Suit.SPADES),
    ]


@pytest.fixture(params=[STANDARD, WILD_DEUCES, BONUS_QUADS], ids=lambda v: v.kind.value)
def any_variant(request):
    """Each game variant in turn."""
    return request.param
