"""
FastAPI Application Entry Point for VideoPoker.

This module creates and configures the FastAPI application with:
- HTTP routes for the game session
- Bankroll saving on shutdown
- CORS middleware for development front-ends
"""

from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from videopoker import __version__
from videopoker.config import config
from videopoker.server.routes import router
from videopoker.storage import BankrollStore

# Configure logging
logging.basicConfig(
    level=getattr(logging, config.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("VideoPoker server starting up...")
    yield
    game = getattr(app.state, "game", None)
    if game is not None:
        app.state.store.save(game.credits)
    logger.info("VideoPoker server shutting down...")


def create_app(store: Optional[BankrollStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: Bankroll store; defaults to the configured save path

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="VideoPoker",
        description="Single-player video poker engine API",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=config.cors_origins != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.store = store or BankrollStore()
    app.state.game = None

    app.include_router(router)

    return app


# Create the application instance
app = create_app()


def main():
    """Run the server (for use as entry point)."""
    import uvicorn
    uvicorn.run(
        "videopoker.server.app:app",
        host=config.host,
        port=config.port,
        reload=False,
    )


if __name__ == "__main__":
    main()
