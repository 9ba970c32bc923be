"""
Sleeper Fantasy platform provider.

Fetches league data from Sleeper's public API for fantasy football and basketball.
Sleeper has a free, public, read-only API requiring no authentication.
"""

import httpx
from collections import defaultdict
from typing import Any, Dict, List

from .base import (
    SeasonDataProvider,
    LeagueNotFoundError,
    PlatformError
)
from ..simulator.models import LeagueSettings, Matchup, ScheduledMatchup
from ..core.config import PROVIDER_TIMEOUT
from ..core.sports import Sport, SLEEPER_SPORT_CODES

DEFAULT_PLAYOFF_WEEK_START = 15


class SleeperProvider(SeasonDataProvider):
    """Sleeper Fantasy provider supporting football and basketball."""

    BASE_URL = "https://api.sleeper.app/v1"

    def __init__(self, sport: Sport = Sport.FOOTBALL, timeout: float = PROVIDER_TIMEOUT):
        """
        Initialize the Sleeper provider.

        Args:
            sport: The sport type (football or basketball)
            timeout: HTTP request timeout in seconds
        """
        if sport not in SLEEPER_SPORT_CODES:
            raise ValueError(f"Sleeper does not support {sport.value} leagues")
        self.sport = sport
        self.timeout = timeout

    def _get_sport_code(self) -> str:
        """Get the Sleeper API sport code for the current sport."""
        return SLEEPER_SPORT_CODES[self.sport]

    @property
    def platform_name(self) -> str:
        return "sleeper"

    async def _fetch_json(self, endpoint: str) -> Any:
        """
        Fetch JSON data from Sleeper API.

        Args:
            endpoint: The API endpoint (e.g., "/league/123456")

        Returns:
            JSON response data

        Raises:
            LeagueNotFoundError: If the resource doesn't exist
            PlatformError: If there's an API error
        """
        url = f"{self.BASE_URL}{endpoint}"

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                response = await client.get(url)

                if response.status_code == 404:
                    raise LeagueNotFoundError(f"Resource not found: {endpoint}")

                # Sleeper returns null for non-existent leagues
                if response.status_code == 200 and response.text == "null":
                    raise LeagueNotFoundError(f"League not found: {endpoint}")

                response.raise_for_status()
                return response.json()

            except httpx.HTTPStatusError as e:
                raise PlatformError(f"Sleeper API error: {e}")
            except httpx.RequestError as e:
                raise PlatformError(f"Network error: {e}")
            except ValueError as e:
                raise PlatformError(f"Invalid JSON from Sleeper: {e}")

    async def _get_state(self) -> Dict[str, Any]:
        """Get the current sport state including current week."""
        return await self._fetch_json(f"/state/{self._get_sport_code()}")

    async def _fetch_week(self, league_id: str, week: int) -> Dict[Any, List[Dict]]:
        """Fetch one week of matchups grouped by matchup_id."""
        entries = await self._fetch_json(f"/league/{league_id}/matchups/{week}")

        groups: Dict[Any, List[Dict]] = defaultdict(list)
        for entry in entries or []:
            matchup_id = entry.get("matchup_id")
            # Null matchup_id marks a roster with no opponent this week
            if matchup_id is not None:
                groups[matchup_id].append(entry)
        return groups

    async def get_current_week(self, league_id: str) -> int:
        state = await self._get_state()
        return int(state.get("week") or 1)

    async def get_league_settings(self, league_id: str) -> LeagueSettings:
        """
        Fetch league settings, rosters, and team names.

        Returns:
            LeagueSettings
        """
        league = await self._fetch_json(f"/league/{league_id}")
        if not league:
            raise LeagueNotFoundError(f"League {league_id} not found")

        rosters = await self._fetch_json(f"/league/{league_id}/rosters")
        users = await self._fetch_json(f"/league/{league_id}/users")

        if not rosters:
            raise LeagueNotFoundError(f"No rosters found for league {league_id}")

        # Build user_id -> display name mapping
        user_names: Dict[str, str] = {}
        for user in users or []:
            user_id = user.get("user_id")
            # Try metadata.team_name first, then display_name
            metadata = user.get("metadata") or {}
            user_names[user_id] = metadata.get("team_name") or user.get("display_name")

        team_ids = []
        team_names = {}
        for roster in rosters:
            roster_id = roster.get("roster_id")
            if roster_id is None:
                continue
            team_ids.append(roster_id)
            team_names[roster_id] = user_names.get(roster.get("owner_id")) or f"Team {roster_id}"

        settings = league.get("settings", {}) or {}
        playoff_week_start = settings.get("playoff_week_start") or DEFAULT_PLAYOFF_WEEK_START

        return LeagueSettings(
            playoff_slot_count=settings.get("playoff_teams") or len(team_ids) // 2,
            last_regular_season_week=playoff_week_start - 1,
            team_ids=team_ids,
            league_name=league.get("name", f"League {league_id}"),
            team_names=team_names
        )

    async def get_historical_matchups(self, league_id: str, week: int) -> List[Matchup]:
        groups = await self._fetch_week(league_id, week)

        matchups: List[Matchup] = []
        for matchup_id, group in groups.items():
            for entry in group:
                matchups.append(Matchup(
                    week=week,
                    matchup_id=matchup_id,
                    team_id=entry.get("roster_id"),
                    points=float(entry.get("points", 0) or 0)
                ))
        return matchups

    async def get_future_matchups(self, league_id: str, week: int) -> List[ScheduledMatchup]:
        groups = await self._fetch_week(league_id, week)

        pairings: List[ScheduledMatchup] = []
        for group in groups.values():
            if len(group) != 2:
                continue

            team1_id = group[0].get("roster_id")
            team2_id = group[1].get("roster_id")
            if team1_id is None or team2_id is None:
                continue

            pairings.append(ScheduledMatchup(week=week, team_a_id=team1_id, team_b_id=team2_id))
        return pairings
