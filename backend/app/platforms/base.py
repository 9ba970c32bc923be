"""
Abstract base class for season data providers.

This provides a common interface for reading league settings and weekly
matchups from different fantasy sports platforms (Sleeper, ESPN).
"""

from abc import ABC, abstractmethod
from typing import List

from .errors import (
    LeagueNotFoundError,
    LeaguePrivateError,
    PlatformError,
    PROVIDER_ERRORS
)
from ..simulator.models import LeagueSettings, Matchup, ScheduledMatchup, TeamId


class SeasonDataProvider(ABC):
    """Abstract base class for season data providers."""

    @property
    @abstractmethod
    def platform_name(self) -> str:
        """Return the platform name (e.g., 'espn', 'sleeper')."""
        pass

    @abstractmethod
    async def get_current_week(self, league_id: str) -> int:
        """
        Get the first week of the season that hasn't been completed.

        Args:
            league_id: The league identifier

        Returns:
            The current week number (1-based)
        """
        pass

    @abstractmethod
    async def get_league_settings(self, league_id: str) -> LeagueSettings:
        """
        Fetch league settings including playoff configuration.

        Args:
            league_id: The league identifier

        Returns:
            LeagueSettings with slot count, last regular-season week and team ids

        Raises:
            LeagueNotFoundError: If the league doesn't exist
            LeaguePrivateError: If the league is private/inaccessible
        """
        pass

    @abstractmethod
    async def get_historical_matchups(self, league_id: str, week: int) -> List[Matchup]:
        """
        Fetch the scored matchup entries for a completed week.

        Args:
            league_id: The league identifier
            week: The week number

        Returns:
            One Matchup per team entry; an empty list if the week has no data
        """
        pass

    @abstractmethod
    async def get_future_matchups(self, league_id: str, week: int) -> List[ScheduledMatchup]:
        """
        Fetch the scheduled pairings for a remaining week.

        Args:
            league_id: The league identifier
            week: The week number

        Returns:
            One ScheduledMatchup per pairing; an empty list if none are known
        """
        pass

    def normalize_team_id(self, raw: str) -> TeamId:
        """
        Convert a team id received as text into the platform's id type.

        Raises:
            ValueError: If the id isn't valid for this platform
        """
        return int(raw)


__all__ = [
    "SeasonDataProvider",
    "LeagueNotFoundError",
    "LeaguePrivateError",
    "PlatformError",
    "PROVIDER_ERRORS",
]
