"""Application configuration."""
import os
from typing import List
from dataclasses import dataclass, field
from dotenv import load_dotenv

load_dotenv()


def _default_save_path() -> str:
    return os.path.join(os.path.expanduser("~"), ".videopoker", "savegame.json")


@dataclass
class Config:
    """Application configuration loaded from environment variables."""

    # Bankroll storage
    save_path: str = field(
        default_factory=lambda: os.getenv("VIDEOPOKER_SAVE_PATH", _default_save_path())
    )

    # Game settings
    default_variant: str = field(
        default_factory=lambda: os.getenv("VIDEOPOKER_VARIANT", "standard")
    )

    # Server
    host: str = field(default_factory=lambda: os.getenv("VIDEOPOKER_HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.getenv("VIDEOPOKER_PORT", "8000")))

    # Comma-separated origins allowed by CORS
    cors_origins: List[str] = field(
        default_factory=lambda: [
            origin.strip()
            for origin in os.getenv("VIDEOPOKER_CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]
    )

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("VIDEOPOKER_LOG_LEVEL", "INFO"))


config = Config()
