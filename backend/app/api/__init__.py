"""
API module.
"""

from .routes import standings_router

__all__ = [
    "standings_router",
]
