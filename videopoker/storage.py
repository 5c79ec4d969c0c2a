"""
Bankroll persistence.

The player's credits survive between sessions in a small JSON record:

    {"credits": 250, "last_played": "2026-10-19T20:15:00"}

Loading never fails: a missing, unreadable or corrupt file, or one holding
no credits, yields the default bankroll.
"""

from __future__ import annotations
from datetime import datetime
from pathlib import Path
from typing import Optional, Union
import logging

from pydantic import BaseModel, Field, ValidationError

from videopoker.config import config
from videopoker.core.rules import DEFAULT_CREDITS


logger = logging.getLogger(__name__)


class SaveData(BaseModel):
    """Persisted bankroll record."""
    credits: int = DEFAULT_CREDITS
    last_played: datetime = Field(default_factory=datetime.now)


class BankrollStore:
    """
    Loads and saves the bankroll record.

    Usage:
        store = BankrollStore()
        game = VideoPokerGame(variant, initial_credits=store.load().credits)
        ...
        store.save(game.credits)
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path or config.save_path)

    def load(self) -> SaveData:
        """Read the saved record, falling back to the default bankroll."""
        if not self.path.exists():
            logger.info(f"No save file at {self.path}, starting with {DEFAULT_CREDITS} credits")
            return SaveData()

        try:
            data = SaveData.model_validate_json(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            logger.warning(f"Ignoring unreadable save file {self.path}: {e}")
            return SaveData()

        if data.credits <= 0:
            logger.info(f"Saved bankroll is empty, starting with {DEFAULT_CREDITS} credits")
            return SaveData()

        return data

    def save(self, credits: int) -> SaveData:
        """Write ``credits`` with the current time."""
        data = SaveData(credits=credits, last_played=datetime.now())
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(data.model_dump_json(), encoding="utf-8")
        logger.info(f"Saved {credits} credits to {self.path}")
        return data
