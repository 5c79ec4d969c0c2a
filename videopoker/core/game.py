"""
Video Poker Game Engine - State Machine Implementation.

This module implements one player's video poker session. It handles:
- Betting against the bankroll
- Dealing, holding and drawing a five-card hand
- Scoring through the active game variant
- The double-up side game (banker card against a face-down pick)
- Collecting and resetting, with a top-up when the bankroll is empty

States:
    WAITING_FOR_BET --place_bet--> DEALT --draw--> GAME_OVER
    GAME_OVER --start_double_up--> DOUBLE_UP --play_double_up--> GAME_OVER
    GAME_OVER / DOUBLE_UP --collect--> WAITING_FOR_BET
    GAME_OVER --place_bet--> DEALT

Winnings are credited as soon as they are known (on draw and on a won
double-up), so collecting never moves credits.
"""

from __future__ import annotations
from typing import List, Dict, Optional, Tuple, Any
from dataclasses import dataclass, field
import logging

from videopoker.core.bankroll import Bankroll
from videopoker.core.card import Card, Deck
from videopoker.core.exceptions import InvalidStateError, InsufficientCreditsError
from videopoker.core.hand import HandRank
from videopoker.core.paytable import PaytableRow
from videopoker.core.rules import (
    GameState, DoubleUpOutcome,
    HAND_SIZE, BANKER_INDEX, DEFAULT_CREDITS, TOP_UP_CREDITS, MIN_BET, MAX_BET,
    is_valid_bet, is_hold_index, is_double_up_pick,
)
from videopoker.core.variants import GameVariant, STANDARD


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DoubleUpResult:
    """Result of a double-up pick. A push counts as won."""
    outcome: DoubleUpOutcome
    banker_card: Card
    player_card: Card
    last_win: int

    @property
    def won(self) -> bool:
        return self.outcome != DoubleUpOutcome.LOSS

    def to_dict(self) -> Dict[str, Any]:
        return {
            "outcome": self.outcome.value,
            "won": self.won,
            "banker_card": self.banker_card.to_dict(),
            "player_card": self.player_card.to_dict(),
            "last_win": self.last_win,
        }


@dataclass(frozen=True)
class GameSnapshot:
    """Immutable view of a game after an operation."""
    variant: str
    state: GameState
    credits: int
    current_bet: int
    last_win: int
    last_hand_rank: Optional[HandRank]
    hand_name: Optional[str]
    hand: Tuple[Card, ...] = ()
    held: Tuple[bool, ...] = ()
    winning_cards: Tuple[Card, ...] = field(default=())

    def to_dict(self, hide_face_down: bool = True) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Args:
            hide_face_down: If True, the player's double-up cards are sent as
                None while the pick is pending
        """
        hand = [card.to_dict() for card in self.hand]
        if hide_face_down and self.state == GameState.DOUBLE_UP:
            hand = [c if i == BANKER_INDEX else None for i, c in enumerate(hand)]

        return {
            "variant": self.variant,
            "state": self.state.name,
            "credits": self.credits,
            "current_bet": self.current_bet,
            "last_win": self.last_win,
            "last_hand_rank": self.last_hand_rank.name if self.last_hand_rank else None,
            "hand_name": self.hand_name,
            "hand": hand,
            "held": list(self.held),
            "winning_cards": [card.to_dict() for card in self.winning_cards],
        }


class VideoPokerGame:
    """
    Video poker game engine implementing a state machine.

    Usage:
        game = VideoPokerGame(variant=get_variant("standard"), initial_credits=100)
        game.place_bet(5)
        game.toggle_hold(0)
        game.draw()

        if game.last_win > 0:
            game.start_double_up()
            result = game.play_double_up(2)

        game.collect()

    Every operation validates its state and arguments before changing
    anything. Invalid transitions raise InvalidStateError.
    """

    def __init__(
        self,
        variant: GameVariant = STANDARD,
        initial_credits: int = DEFAULT_CREDITS,
        deck: Optional[Deck] = None,
    ):
        """
        Initialize a new game.

        Args:
            variant: Rule variant used for scoring
            initial_credits: Starting bankroll (must not be negative)
            deck: Optional deck to deal from (tests inject stacked decks)
        """
        self.variant = variant
        self._bankroll = Bankroll(initial_credits)
        self._deck = deck if deck is not None else Deck()

        self._state = GameState.WAITING_FOR_BET
        self._hand: List[Card] = []
        self._held: List[bool] = []
        self._current_bet = 0
        self._last_win = 0
        self._last_hand_rank: Optional[HandRank] = None
        self._winning_cards: List[Card] = []

        self.round_number = 0
        # Actions of the current round, for replay and debugging
        self.history: List[Dict[str, Any]] = []

    @classmethod
    def restore(
        cls,
        variant: GameVariant = STANDARD,
        credits: int = DEFAULT_CREDITS,
        state: GameState = GameState.WAITING_FOR_BET,
        hand: Optional[List[Card]] = None,
        held: Optional[List[bool]] = None,
        current_bet: int = 0,
        last_win: int = 0,
        last_hand_rank: Optional[HandRank] = None,
        deck: Optional[Deck] = None,
    ) -> VideoPokerGame:
        """
        Build a game directly in a given state.

        This is the supported way to set up a scenario (for example a
        double-up with a known banker card) without replaying a round.
        The hand's cards are taken out of the deck. Without an injected
        deck, the rest of a fresh deck is shuffled.

        Raises:
            ValueError: If the hand, held mask or amounts are inconsistent,
                or the hand repeats a card or holds one the deck does not
        """
        hand = list(hand or [])
        if hand and len(hand) != HAND_SIZE:
            raise ValueError(f"Hand must contain exactly {HAND_SIZE} cards, got {len(hand)}")
        if state in (GameState.DEALT, GameState.DOUBLE_UP) and not hand:
            raise ValueError(f"State {state.name} requires a hand")

        held = list(held) if held is not None else [False] * len(hand)
        if len(held) != len(hand):
            raise ValueError("Held mask must have one entry per card")
        if current_bet < 0 or last_win < 0:
            raise ValueError("Bet and win amounts cannot be negative")
        if state == GameState.DEALT and not is_valid_bet(current_bet):
            raise ValueError(f"Bet must be {MIN_BET}-{MAX_BET}, got {current_bet}")
        if state == GameState.DOUBLE_UP and last_win <= 0:
            raise ValueError("A double-up needs a positive last win")
        # The last win is already part of the credits
        if last_win > credits:
            raise ValueError(f"Last win {last_win} exceeds credits {credits}")

        game = cls(variant=variant, initial_credits=credits, deck=deck)
        game._deck.mark_dealt(hand)
        if deck is None:
            game._deck.shuffle()
        game._state = state
        game._hand = hand
        game._held = held
        game._current_bet = current_bet
        game._last_win = last_win
        game._last_hand_rank = last_hand_rank
        logger.debug(f"Restored game in state {state.name} with {credits} credits")
        return game

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def credits(self) -> int:
        return self._bankroll.credits

    @property
    def hand(self) -> List[Card]:
        """Copy of the current hand (index 0 is the banker card in double-up)."""
        return list(self._hand)

    @property
    def held(self) -> List[bool]:
        """Copy of the held mask."""
        return list(self._held)

    @property
    def current_bet(self) -> int:
        return self._current_bet

    @property
    def last_win(self) -> int:
        return self._last_win

    @property
    def last_hand_rank(self) -> Optional[HandRank]:
        return self._last_hand_rank

    @property
    def deck(self) -> Deck:
        return self._deck

    def paytable(self) -> List[PaytableRow]:
        """The active variant's paytable."""
        return self.variant.paytable()

    def winning_cards(self) -> List[Card]:
        """Cards that made the last drawn hand pay (empty otherwise)."""
        return list(self._winning_cards)

    def can_double_up(self) -> bool:
        return self._state == GameState.GAME_OVER and self._last_win > 0

    def snapshot(self) -> GameSnapshot:
        """Immutable view of the current state."""
        rank = self._last_hand_rank
        return GameSnapshot(
            variant=self.variant.name,
            state=self._state,
            credits=self.credits,
            current_bet=self._current_bet,
            last_win=self._last_win,
            last_hand_rank=rank,
            hand_name=self.variant.hand_name(rank) if rank else None,
            hand=tuple(self._hand),
            held=tuple(self._held),
            winning_cards=tuple(self._winning_cards),
        )

    def get_state(self) -> Dict[str, Any]:
        """Current state as a JSON-ready dictionary."""
        state = self.snapshot().to_dict()
        state["round_number"] = self.round_number
        state["can_double_up"] = self.can_double_up()
        return state

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def place_bet(self, amount: int) -> None:
        """
        Bet and deal a new hand.

        Args:
            amount: Credits to bet (1-5)

        Raises:
            InvalidStateError: Unless waiting for a bet or after a hand
            ValueError: If amount is outside 1-5
            InsufficientCreditsError: If the bankroll cannot cover the bet
        """
        self._require_state("place bet", GameState.WAITING_FOR_BET, GameState.GAME_OVER)
        if not is_valid_bet(amount):
            raise ValueError(f"Bet must be {MIN_BET}-{MAX_BET}, got {amount}")
        if not self._bankroll.can_bet(amount):
            raise InsufficientCreditsError(amount, self.credits)

        self._bankroll.bet(amount)
        self._current_bet = amount
        self.round_number += 1
        self.history = []
        logger.info(f"Round #{self.round_number}: bet {amount} on {self.variant.name}")

        self._deal_fresh_hand()
        self._last_win = 0
        self._last_hand_rank = None
        self._winning_cards = []
        self._state = GameState.DEALT

        self._log_action("DEAL", {
            "bet": amount,
            "hand": [c.short_str for c in self._hand],
        })

    def toggle_hold(self, index: int) -> bool:
        """
        Flip the hold flag of one card.

        Returns:
            The new hold flag for that position

        Raises:
            InvalidStateError: Unless a hand has been dealt
            IndexError: If index is outside 0-4
        """
        self._require_state("toggle hold", GameState.DEALT)
        if not is_hold_index(index):
            raise IndexError(f"Card index must be 0-{HAND_SIZE - 1}, got {index}")

        self._held[index] = not self._held[index]
        logger.debug(f"Card {index} ({self._hand[index]}) held={self._held[index]}")
        return self._held[index]

    def draw(self) -> int:
        """
        Replace every card that is not held, score the hand and pay out.

        Returns:
            Credits won (0 for a losing hand)

        Raises:
            InvalidStateError: Unless a hand has been dealt
        """
        self._require_state("draw", GameState.DEALT)

        cards_to_replace = [
            card for card, is_held in zip(self._hand, self._held) if not is_held
        ]
        self._deck.replace_cards(self._hand, cards_to_replace)

        rank = self.variant.evaluate_hand(self._hand)
        payout = self.variant.calculate_payout(rank, self._current_bet)
        self._bankroll.add_win(payout)

        self._last_hand_rank = rank
        self._last_win = payout
        self._winning_cards = self.variant.winning_cards(self._hand, rank) if payout else []
        self._state = GameState.GAME_OVER

        logger.info(
            f"Round #{self.round_number}: {self.variant.describe_hand(self._hand, rank)} "
            f"pays {payout} (credits {self.credits})"
        )
        self._log_action("DRAW", {
            "replaced": len(cards_to_replace),
            "hand": [c.short_str for c in self._hand],
            "rank": rank.name,
            "payout": payout,
        })
        return payout

    def start_double_up(self) -> None:
        """
        Deal a double-up hand: a face-up banker card and four face-down picks.

        Raises:
            InvalidStateError: Unless the last hand won something
        """
        if not self.can_double_up():
            raise InvalidStateError("start double up", self._state)

        self._deal_fresh_hand()
        self._winning_cards = []
        self._state = GameState.DOUBLE_UP

        logger.info(f"Double-up for {self._last_win}: banker shows {self._hand[BANKER_INDEX]}")
        self._log_action("DOUBLE_UP_START", {
            "stake": self._last_win,
            "banker_card": self._hand[BANKER_INDEX].short_str,
        })

    def play_double_up(self, index: int) -> DoubleUpResult:
        """
        Pick a face-down card against the banker card.

        Only ranks are compared. A higher card doubles the last win (the
        extra half is credited now), a lower card takes the last win back
        from the bankroll, and equal ranks are a push.

        Args:
            index: Position of the picked card (1-4)

        Raises:
            InvalidStateError: Unless a double-up hand is in play
            IndexError: If index is outside 1-4
        """
        self._require_state("play double up", GameState.DOUBLE_UP)
        if not is_double_up_pick(index):
            raise IndexError(f"Double-up pick must be {BANKER_INDEX + 1}-{HAND_SIZE - 1}, got {index}")

        banker_card = self._hand[BANKER_INDEX]
        player_card = self._hand[index]

        if player_card.rank > banker_card.rank:
            stake = self._last_win
            self._bankroll.add_win(stake)
            self._last_win = stake * 2
            outcome = DoubleUpOutcome.WIN
        elif player_card.rank < banker_card.rank:
            self._bankroll.bet(self._last_win)
            self._last_win = 0
            outcome = DoubleUpOutcome.LOSS
        else:
            outcome = DoubleUpOutcome.PUSH

        self._state = GameState.GAME_OVER

        logger.info(
            f"Double-up {outcome.value}: {player_card} vs banker {banker_card}, "
            f"win now {self._last_win} (credits {self.credits})"
        )
        self._log_action("DOUBLE_UP", {
            "pick": index,
            "player_card": player_card.short_str,
            "banker_card": banker_card.short_str,
            "outcome": outcome.value,
            "last_win": self._last_win,
        })
        return DoubleUpResult(outcome, banker_card, player_card, self._last_win)

    def collect(self) -> int:
        """
        End the round. Winnings are already in the bankroll.

        Returns:
            The amount collected (the last win)

        Raises:
            InvalidStateError: Unless a hand or double-up has finished
        """
        self._require_state("collect", GameState.DOUBLE_UP, GameState.GAME_OVER)

        collected = self._last_win
        self._state = GameState.WAITING_FOR_BET
        logger.info(f"Round #{self.round_number}: collected {collected} (credits {self.credits})")
        self._log_action("COLLECT", {"amount": collected})
        return collected

    def reset(self) -> None:
        """
        Return to waiting for a bet from any state.

        An empty bankroll is topped up so play can continue.
        """
        self._hand = []
        self._held = []
        self._winning_cards = []
        self._state = GameState.WAITING_FOR_BET

        if self.credits <= 0:
            self._bankroll.deposit(TOP_UP_CREDITS)
            logger.info(f"Bankroll empty, topped up with {TOP_UP_CREDITS} credits")
        self._log_action("RESET", {"credits": self.credits})

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require_state(self, operation: str, *allowed: GameState) -> None:
        if self._state not in allowed:
            raise InvalidStateError(operation, self._state)

    def _deal_fresh_hand(self) -> None:
        """Reset and shuffle the deck, deal five cards, clear holds."""
        self._deck.reset()
        self._deck.shuffle()
        self._hand = self._deck.deal_cards(HAND_SIZE)
        self._held = [False] * HAND_SIZE

    def _log_action(self, action: str, details: Dict[str, Any]) -> None:
        """Log an action to the round history."""
        self.history.append({
            "action": action,
            "state": self._state.name,
            **details
        })

    def __repr__(self) -> str:
        return (
            f"VideoPokerGame({self.variant.name}, state={self._state.name}, "
            f"credits={self.credits}, last_win={self._last_win})"
        )
