"""
Core utilities, enums, and settings.
"""

from .sports import Sport, ESPN_SPORT_CODES, SLEEPER_SPORT_CODES, get_current_season

__all__ = [
    "Sport",
    "ESPN_SPORT_CODES",
    "SLEEPER_SPORT_CODES",
    "get_current_season",
]
