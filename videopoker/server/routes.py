"""
HTTP API Routes for VideoPoker.

One game session per application, kept on ``app.state``. Each action maps to
one engine operation and answers with the resulting game state.
"""

from contextlib import contextmanager
from typing import Dict, Any, List
import logging

from fastapi import APIRouter, HTTPException, Request

from videopoker.config import config
from videopoker.core.exceptions import InvalidStateError, InsufficientCreditsError
from videopoker.core.game import VideoPokerGame
from videopoker.core.variants import available_variants, get_variant
from videopoker.server.schemas import (
    NewGameRequest, BetRequest, CardIndexRequest,
    ActionResultSchema, GameStateSchema, PaytableRowSchema, VariantSchema,
)
from videopoker.storage import BankrollStore


logger = logging.getLogger(__name__)

router = APIRouter()


def get_game(request: Request) -> VideoPokerGame:
    """Get the current game instance."""
    game = getattr(request.app.state, "game", None)
    if game is None:
        raise HTTPException(status_code=400, detail="Game not initialized")
    return game


def get_store(request: Request) -> BankrollStore:
    """Get the bankroll store configured for the application."""
    return request.app.state.store


@contextmanager
def game_errors():
    """Translate engine errors into HTTP errors."""
    try:
        yield
    except InvalidStateError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except (ValueError, IndexError, InsufficientCreditsError) as e:
        raise HTTPException(status_code=400, detail=str(e))


def _result(game: VideoPokerGame, message: str, **extra: Any) -> Dict[str, Any]:
    return {
        "success": True,
        "message": message,
        "state": game.get_state(),
        **extra,
    }


@router.get("/variants", response_model=List[VariantSchema])
async def list_variants() -> List[Dict[str, Any]]:
    """List the available game variants with their paytables."""
    return [variant.to_dict() for variant in available_variants()]


@router.post("/new_game", response_model=ActionResultSchema)
async def new_game(req: NewGameRequest, request: Request) -> Dict[str, Any]:
    """
    Start a new game session.

    Credits default to the saved bankroll.
    """
    with game_errors():
        variant = get_variant(req.variant or config.default_variant)
        credits = req.credits
        if credits is None:
            credits = get_store(request).load().credits
        game = VideoPokerGame(variant=variant, initial_credits=credits)

    request.app.state.game = game
    logger.info(f"New {variant.name} game with {credits} credits")
    return _result(game, f"{variant.name} started with {credits} credits")


@router.get("/state", response_model=GameStateSchema)
async def get_game_state(request: Request) -> Dict[str, Any]:
    """Get the current game state."""
    return get_game(request).get_state()


@router.get("/paytable", response_model=List[PaytableRowSchema])
async def get_paytable(request: Request) -> List[Dict[str, Any]]:
    """Get the active variant's paytable."""
    return [row.to_dict() for row in get_game(request).paytable()]


@router.post("/bet", response_model=ActionResultSchema)
async def place_bet(req: BetRequest, request: Request) -> Dict[str, Any]:
    """Bet and deal a new hand."""
    game = get_game(request)
    with game_errors():
        game.place_bet(req.amount)
    return _result(game, f"Bet {req.amount}")


@router.post("/hold", response_model=ActionResultSchema)
async def toggle_hold(req: CardIndexRequest, request: Request) -> Dict[str, Any]:
    """Toggle the hold flag of one card."""
    game = get_game(request)
    with game_errors():
        held = game.toggle_hold(req.index)
    return _result(game, f"Card {req.index} {'held' if held else 'released'}")


@router.post("/draw", response_model=ActionResultSchema)
async def draw(request: Request) -> Dict[str, Any]:
    """Replace the cards that are not held and score the hand."""
    game = get_game(request)
    with game_errors():
        payout = game.draw()
    name = game.variant.hand_name(game.last_hand_rank)
    message = f"{name} pays {payout}" if payout else "No win"
    return _result(game, message, payout=payout)


@router.post("/double_up/start", response_model=ActionResultSchema)
async def start_double_up(request: Request) -> Dict[str, Any]:
    """Risk the last win on a double-up."""
    game = get_game(request)
    with game_errors():
        game.start_double_up()
    return _result(game, f"Double-up for {game.last_win}")


@router.post("/double_up/pick", response_model=ActionResultSchema)
async def play_double_up(req: CardIndexRequest, request: Request) -> Dict[str, Any]:
    """Pick a face-down card against the banker card."""
    game = get_game(request)
    with game_errors():
        result = game.play_double_up(req.index)
    return _result(
        game,
        f"Double-up {result.outcome.value.lower()}",
        double_up=result.to_dict(),
    )


@router.post("/collect", response_model=ActionResultSchema)
async def collect(request: Request) -> Dict[str, Any]:
    """End the round."""
    game = get_game(request)
    with game_errors():
        amount = game.collect()
    return _result(game, f"Collected {amount}", payout=amount)


@router.post("/reset", response_model=ActionResultSchema)
async def reset(request: Request) -> Dict[str, Any]:
    """Return to waiting for a bet, topping up an empty bankroll."""
    game = get_game(request)
    game.reset()
    return _result(game, "Game reset")


@router.post("/save")
async def save(request: Request) -> Dict[str, Any]:
    """Persist the current credits."""
    game = get_game(request)
    data = get_store(request).save(game.credits)
    return {
        "success": True,
        "credits": data.credits,
        "last_played": data.last_played.isoformat(),
    }
