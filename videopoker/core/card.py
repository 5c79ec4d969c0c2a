"""
Card and Deck classes for video poker.

Cards are immutable values ordered by rank, then suit. The deck is a single
52-card shoe that is reset and reshuffled before every hand.

Shuffling uses a Fisher-Yates pass driven by the ``secrets`` CSPRNG, which
returns uniformly distributed integers in a bounded range (no modulo bias).
"""

from __future__ import annotations
import re
import secrets
from dataclasses import dataclass
from typing import Callable, List, Optional
from enum import IntEnum

from videopoker.core.exceptions import InsufficientCardsError


class Suit(IntEnum):
    """Card suits. The integer value is the tie-break order."""
    CLUBS = 0     # ♣
    DIAMONDS = 1  # ♦
    HEARTS = 2    # ♥
    SPADES = 3    # ♠


class Rank(IntEnum):
    """Card ranks from 2 to Ace (14)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


# Display characters, in enum order
RANK_CHARS = dict(zip(Rank, "23456789TJQKA"))
SUIT_CHARS = dict(zip(Suit, "cdhs"))
SUIT_SYMBOLS = dict(zip(Suit, "♣♦♥♠"))

# Parsing lookups; "10" is accepted for Ten
CHAR_TO_RANK = {char: rank for rank, char in RANK_CHARS.items()}
CHAR_TO_RANK["10"] = Rank.TEN
CHAR_TO_SUIT = {char: suit for suit, char in SUIT_CHARS.items()}
CHAR_TO_SUIT.update({symbol: suit for suit, symbol in SUIT_SYMBOLS.items()})

DECK_SIZE = len(Suit) * len(Rank)

# One card token: rank ("10" or a single character) followed by a suit
_CARD_TOKEN = re.compile(r"(10|[2-9TJQKAtjqka])([cdhsCDHS♣♦♥♠])")


@dataclass(frozen=True, order=True)
class Card:
    """
    A playing card.

    Field order makes the generated comparisons rank-first, then suit
    (Clubs < Diamonds < Hearts < Spades). Equality is structural, so two
    instances of the same rank and suit are interchangeable.

    Examples:
        Card(Rank.ACE, Suit.SPADES)
        Card.from_string("As") == Card.from_string("A♠")
        Card.from_int(51)  # Ace of Spades, last in canonical order
    """

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        # Normalise plain ints to the enums; raises ValueError when out of range.
        object.__setattr__(self, "rank", Rank(self.rank))
        object.__setattr__(self, "suit", Suit(self.suit))

    @classmethod
    def from_string(cls, s: str) -> Card:
        """
        Parse one card such as "As", "Td", "10h" or "Q♦".

        Raises:
            ValueError: If the rank or suit is not recognised
        """
        text = s.strip()
        rank = CHAR_TO_RANK.get(text[:-1].upper())
        if rank is None:
            raise ValueError(f"Invalid card {s!r}: unknown rank")
        suit = CHAR_TO_SUIT.get(text[-1:].lower())
        if suit is None:
            raise ValueError(f"Invalid card {s!r}: unknown suit")
        return cls(rank, suit)

    @classmethod
    def from_int(cls, card_int: int) -> Card:
        """Create a card from its canonical deck position (0-51)."""
        if not 0 <= card_int < DECK_SIZE:
            raise ValueError(f"Card position must be 0-{DECK_SIZE - 1}, got {card_int}")
        suit_index, rank_offset = divmod(card_int, len(Rank))
        return cls(Rank(Rank.TWO + rank_offset), Suit(suit_index))

    def to_int(self) -> int:
        """Canonical deck position (0-51)."""
        return self.suit * len(Rank) + (self.rank - Rank.TWO)

    @property
    def short_str(self) -> str:
        """ASCII form, e.g. 'As'."""
        return RANK_CHARS[self.rank] + SUIT_CHARS[self.suit]

    @property
    def color(self) -> str:
        return "red" if self.suit in (Suit.DIAMONDS, Suit.HEARTS) else "black"

    def to_dict(self) -> dict:
        """JSON form used by the server."""
        return {
            "rank": RANK_CHARS[self.rank],
            "suit": SUIT_SYMBOLS[self.suit],
            "value": int(self.rank),
            "text": str(self),
            "color": self.color,
        }

    def __str__(self) -> str:
        return RANK_CHARS[self.rank] + SUIT_SYMBOLS[self.suit]

    def __repr__(self) -> str:
        return f"Card({self.short_str})"


class Deck:
    """
    A 52-card deck dealt from the front.

    Usage:
        deck = Deck()
        deck.reset()
        deck.shuffle()
        hand = deck.deal_cards(5)
        deck.replace_cards(hand, [hand[1], hand[3]])

    ``randbelow`` is the bounded uniform integer source used by the shuffle;
    it defaults to ``secrets.randbelow``.
    """

    def __init__(
        self,
        shuffle: bool = False,
        randbelow: Optional[Callable[[int], int]] = None,
    ):
        self._randbelow = randbelow or secrets.randbelow
        self.reset()
        if shuffle:
            self.shuffle()

    def reset(self) -> None:
        """Restore all 52 cards in canonical order (suits outer, ranks inner)."""
        self._cards: List[Card] = [Card.from_int(i) for i in range(DECK_SIZE)]
        self._dealt: List[Card] = []

    def shuffle(self) -> None:
        """Fisher-Yates shuffle of the remaining cards, in place."""
        cards = self._cards
        n = len(cards)
        while n > 1:
            k = self._randbelow(n)
            n -= 1
            cards[k], cards[n] = cards[n], cards[k]

    def deal_cards(self, count: int) -> List[Card]:
        """
        Deal ``count`` cards from the top of the deck, preserving their order.

        Raises:
            ValueError: If count is negative.
            InsufficientCardsError: If not enough cards remain.
        """
        if count < 0:
            raise ValueError(f"Cannot deal a negative number of cards ({count})")
        if count > len(self._cards):
            raise InsufficientCardsError(count, len(self._cards))

        dealt = self._cards[:count]
        del self._cards[:count]
        self._dealt += dealt
        return dealt

    def deal_one(self) -> Card:
        return self.deal_cards(1)[0]

    def replace_cards(self, hand: List[Card], cards_to_replace: List[Card]) -> None:
        """
        Replace cards in ``hand`` with freshly dealt ones, in place.

        Each card is located by value at the time it is processed, so the
        order of ``cards_to_replace`` does not need to follow hand positions.
        Cards that are not in the hand are ignored.
        """
        for card in cards_to_replace:
            if card in hand:
                hand[hand.index(card)] = self.deal_one()

    def mark_dealt(self, cards: List[Card]) -> None:
        """
        Take specific cards out of the deck as if they had been dealt.

        Raises:
            ValueError: If ``cards`` repeats a card or names one that is not
                left in the deck. The deck is unchanged.
        """
        if len(set(cards)) != len(cards):
            raise ValueError(f"Duplicate cards: {cards}")
        missing = [card for card in cards if card not in self._cards]
        if missing:
            raise ValueError(f"Cards not in the deck: {missing}")

        self._cards = [card for card in self._cards if card not in cards]
        self._dealt += cards

    @property
    def remaining(self) -> int:
        return len(self._cards)

    @property
    def dealt_cards(self) -> List[Card]:
        """Cards dealt since the last reset, in dealing order."""
        return list(self._dealt)

    def __len__(self) -> int:
        return self.remaining

    def __repr__(self) -> str:
        return f"Deck(remaining={self.remaining}, dealt={len(self._dealt)})"


def parse_cards(cards_str: str) -> List[Card]:
    """
    Parse several cards, e.g. "As Kh 10d", "AsKhTd" or "A♠ K♥ T♦".

    Raises:
        ValueError: If any part of the string is not a card
    """
    text = "".join(cards_str.split())
    cards = []
    pos = 0
    while pos < len(text):
        match = _CARD_TOKEN.match(text, pos)
        if match is None:
            raise ValueError(f"Cannot parse card at position {pos}: {text[pos:]!r}")
        cards.append(Card.from_string(match.group(0)))
        pos = match.end()
    return cards
