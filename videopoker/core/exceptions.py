"""
Video poker error types.

Invalid arguments are reported with the built-in ``ValueError`` and
``IndexError``. The classes below cover the conditions that are specific to
the game: a transition attempted from the wrong state, a bet the bankroll
cannot cover, and a deck asked for more cards than it holds.
"""


class VideoPokerError(Exception):
    """Base class for video poker errors."""


class InvalidStateError(VideoPokerError):
    """An operation was attempted from a state that does not allow it."""

    def __init__(self, operation: str, state) -> None:
        self.operation = operation
        self.state = state
        state_name = getattr(state, "name", state)
        super().__init__(f"Cannot {operation} in state {state_name}")


class InsufficientCreditsError(VideoPokerError):
    """The bankroll refused a bet (non-positive or larger than the balance)."""

    def __init__(self, amount: int, credits: int) -> None:
        self.amount = amount
        self.credits = credits
        super().__init__(
            f"Cannot bet {amount}: invalid amount or insufficient credits ({credits})"
        )


class InsufficientCardsError(VideoPokerError, ValueError):
    """The deck was asked for more cards than remain."""

    def __init__(self, requested: int, remaining: int) -> None:
        self.requested = requested
        self.remaining = remaining
        super().__init__(f"Cannot deal {requested} cards, only {remaining} remain")
