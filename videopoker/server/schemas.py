"""
Pydantic schemas for API request/response validation.
"""

from typing import List, Optional
from pydantic import BaseModel, Field

from videopoker.core.rules import MIN_BET, MAX_BET, HAND_SIZE


# ============= Request Schemas =============

class NewGameRequest(BaseModel):
    """Request to start a new game session."""
    variant: Optional[str] = Field(
        default=None, description="standard, wild_deuces or bonus_quads (or a display name)"
    )
    credits: Optional[int] = Field(
        default=None, ge=0, description="Starting credits; defaults to the saved bankroll"
    )


class BetRequest(BaseModel):
    """Request to bet and deal."""
    amount: int = Field(..., ge=MIN_BET, le=MAX_BET)


class CardIndexRequest(BaseModel):
    """Request naming one hand position (hold toggle or double-up pick)."""
    index: int = Field(..., ge=0, lt=HAND_SIZE)


# ============= Response Schemas =============

class CardSchema(BaseModel):
    """Card representation."""
    rank: str
    suit: str
    value: int
    text: str
    color: str


class GameStateSchema(BaseModel):
    """Complete game state."""
    variant: str
    state: str
    credits: int
    current_bet: int
    last_win: int
    last_hand_rank: Optional[str] = None
    hand_name: Optional[str] = None
    hand: List[Optional[CardSchema]] = []
    held: List[bool] = []
    winning_cards: List[CardSchema] = []
    round_number: int = 0
    can_double_up: bool = False


class PaytableRowSchema(BaseModel):
    """One paytable row."""
    name: str
    rank: str
    payouts: List[int]


class VariantSchema(BaseModel):
    """A game variant and its paytable."""
    kind: str
    name: str
    paytable: List[PaytableRowSchema]


class DoubleUpResultSchema(BaseModel):
    """Result of a double-up pick."""
    outcome: str
    won: bool
    banker_card: CardSchema
    player_card: CardSchema
    last_win: int


class ActionResultSchema(BaseModel):
    """Result of an action."""
    success: bool
    message: str
    state: GameStateSchema
    payout: Optional[int] = None
    double_up: Optional[DoubleUpResultSchema] = None
