"""
Fantasy sports season data providers.

Provides a unified interface for reading league settings and weekly
matchups from different fantasy sports platforms.
"""

from typing import Optional

from .base import (
    SeasonDataProvider,
    LeagueNotFoundError,
    LeaguePrivateError,
    PlatformError,
    PROVIDER_ERRORS
)
from .espn import ESPNProvider
from .sleeper import SleeperProvider
from ..core.sports import Sport


def get_provider(
    platform: str,
    sport: Optional[Sport] = None,
    season: Optional[int] = None
) -> SeasonDataProvider:
    """
    Get the appropriate provider for a fantasy sports platform.

    Args:
        platform: Platform name ('sleeper', 'espn')
        sport: The sport type (defaults to football)
        season: The season year (ESPN only; Sleeper league ids are per season)

    Returns:
        Season data provider instance

    Raises:
        ValueError: If the platform or sport is not supported
    """
    if sport is None:
        sport = Sport.FOOTBALL

    platform_lower = platform.lower()

    if platform_lower == "sleeper":
        return SleeperProvider(sport=sport)

    if platform_lower == "espn":
        return ESPNProvider(sport=sport, season=season)

    supported = "sleeper, espn"
    raise ValueError(f"Unsupported platform: {platform}. Supported: {supported}")


__all__ = [
    "SeasonDataProvider",
    "LeagueNotFoundError",
    "LeaguePrivateError",
    "PlatformError",
    "PROVIDER_ERRORS",
    "ESPNProvider",
    "SleeperProvider",
    "get_provider",
    "Sport",
]
