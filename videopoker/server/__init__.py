"""
VideoPoker Server - FastAPI Server Layer
"""

from videopoker.server.app import app, create_app

__all__ = ["app", "create_app"]
