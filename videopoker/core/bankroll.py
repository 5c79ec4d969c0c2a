"""
Player bankroll.

A single non-negative credit balance. Bets are refused rather than clamped,
so the balance can never go below zero.
"""

from __future__ import annotations
import logging

from videopoker.core.exceptions import InsufficientCreditsError


logger = logging.getLogger(__name__)


class Bankroll:
    """
    The player's credits.

    Attributes:
        credits: Current balance (never negative)
    """

    def __init__(self, initial_credits: int):
        if initial_credits < 0:
            raise ValueError(f"Initial credits cannot be negative, got {initial_credits}")
        self._credits = initial_credits

    @property
    def credits(self) -> int:
        return self._credits

    def can_bet(self, amount: int) -> bool:
        """Check that ``amount`` is positive and covered by the balance."""
        return self._credits >= amount and amount > 0

    def bet(self, amount: int) -> None:
        """
        Take a bet out of the balance.

        Raises:
            InsufficientCreditsError: If the amount is not positive or exceeds
                the balance. The balance is left untouched.
        """
        if not self.can_bet(amount):
            raise InsufficientCreditsError(amount, self._credits)
        self._credits -= amount
        logger.debug(f"Bet {amount}, credits now {self._credits}")

    def add_win(self, amount: int) -> None:
        """Credit a win. Zero is allowed (a losing hand)."""
        if amount < 0:
            raise ValueError(f"Win amount cannot be negative, got {amount}")
        self._credits += amount
        if amount:
            logger.debug(f"Won {amount}, credits now {self._credits}")

    def deposit(self, amount: int) -> None:
        """Add fresh credits to the balance."""
        if amount <= 0:
            raise ValueError(f"Deposit amount must be positive, got {amount}")
        self._credits += amount
        logger.info(f"Deposited {amount}, credits now {self._credits}")

    def __repr__(self) -> str:
        return f"Bankroll(credits={self._credits})"
