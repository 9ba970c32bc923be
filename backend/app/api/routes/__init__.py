"""
API route modules.
"""

from .standings_routes import router as standings_router

__all__ = ["standings_router"]
