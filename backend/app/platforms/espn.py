"""
ESPN Fantasy platform provider.

Fetches league data from ESPN's fantasy API. Public leagues need no
credentials; private leagues need the espn_s2 and SWID cookies.
"""

import asyncio
import httpx
from typing import Any, Dict, List, Optional

from .base import (
    SeasonDataProvider,
    LeagueNotFoundError,
    LeaguePrivateError,
    PlatformError
)
from ..simulator.models import LeagueSettings, Matchup, ScheduledMatchup
from ..core.config import ESPN_S2, ESPN_SWID, PROVIDER_TIMEOUT
from ..core.sports import Sport, ESPN_SPORT_CODES, get_current_season

DEFAULT_PLAYOFF_TEAMS = 6
DEFAULT_REGULAR_SEASON_WEEKS = 14


class ESPNProvider(SeasonDataProvider):
    """ESPN Fantasy provider for a single season."""

    BASE_URL = "https://lm-api-reads.fantasy.espn.com/apis/v3/games/{sport_code}/seasons/{season}/segments/0/leagues/{league_id}"
    VIEWS = ["mTeam", "mSettings", "mMatchupScore", "mStatus"]

    def __init__(
        self,
        sport: Sport = Sport.FOOTBALL,
        season: Optional[int] = None,
        espn_s2: str = ESPN_S2,
        swid: str = ESPN_SWID,
        timeout: float = PROVIDER_TIMEOUT
    ):
        """
        Initialize the ESPN provider.

        Args:
            sport: The sport type
            season: The season year (defaults to the current season)
            espn_s2: espn_s2 cookie for private leagues
            swid: SWID cookie for private leagues
            timeout: HTTP request timeout in seconds
        """
        self.sport = sport
        self.season = season or get_current_season(sport)
        self.timeout = timeout
        self._cookies = {"espn_s2": espn_s2, "SWID": swid} if espn_s2 and swid else None
        self._league_cache: Dict[str, Dict[str, Any]] = {}
        self._cache_lock = asyncio.Lock()

    def _get_sport_code(self) -> str:
        """Get the ESPN API sport code for the current sport."""
        return ESPN_SPORT_CODES[self.sport]

    @property
    def platform_name(self) -> str:
        return "espn"

    def _get_url(self, league_id: str) -> str:
        """Build the API URL for a league."""
        return self.BASE_URL.format(
            sport_code=self._get_sport_code(),
            season=self.season,
            league_id=league_id
        )

    async def _fetch_league_data(self, league_id: str) -> Dict[str, Any]:
        """
        Fetch league data from ESPN API.

        Raises:
            LeagueNotFoundError: If the league doesn't exist
            LeaguePrivateError: If the league is private
            PlatformError: If there's an API error
        """
        url = self._get_url(league_id)
        params = {"view": self.VIEWS}

        async with httpx.AsyncClient(timeout=self.timeout, cookies=self._cookies) as client:
            try:
                response = await client.get(url, params=params)

                if response.status_code == 404:
                    raise LeagueNotFoundError(
                        f"League {league_id} not found for season {self.season}"
                    )

                if response.status_code == 401:
                    raise LeaguePrivateError(
                        f"League {league_id} is private. Set ESPN_S2 and ESPN_SWID to access it."
                    )

                response.raise_for_status()
                return response.json()

            except httpx.HTTPStatusError as e:
                raise PlatformError(f"ESPN API error: {e}")
            except httpx.RequestError as e:
                raise PlatformError(f"Network error: {e}")
            except ValueError as e:
                raise PlatformError(f"Invalid JSON from ESPN: {e}")

    async def _get_league(self, league_id: str) -> Dict[str, Any]:
        """Get the league payload, fetching it once per provider instance."""
        async with self._cache_lock:
            if league_id not in self._league_cache:
                self._league_cache[league_id] = await self._fetch_league_data(league_id)
            return self._league_cache[league_id]

    async def _get_week_schedule(self, league_id: str, week: int) -> List[Dict[str, Any]]:
        data = await self._get_league(league_id)
        return [m for m in data.get("schedule", []) if m.get("matchupPeriodId") == week]

    async def get_current_week(self, league_id: str) -> int:
        data = await self._get_league(league_id)
        status = data.get("status", {})
        return int(status.get("currentMatchupPeriod") or 1)

    async def get_league_settings(self, league_id: str) -> LeagueSettings:
        data = await self._get_league(league_id)

        settings = data.get("settings", {})
        schedule_settings = settings.get("scheduleSettings", {})

        team_ids = []
        team_names = {}
        for team_data in data.get("teams", []):
            team_id = team_data["id"]
            team_ids.append(team_id)
            location_name = " ".join(
                part for part in (team_data.get("location"), team_data.get("nickname")) if part
            )
            team_names[team_id] = team_data.get("name") or location_name or f"Team {team_id}"

        return LeagueSettings(
            playoff_slot_count=schedule_settings.get("playoffTeamCount", DEFAULT_PLAYOFF_TEAMS),
            last_regular_season_week=schedule_settings.get(
                "matchupPeriodCount", DEFAULT_REGULAR_SEASON_WEEKS
            ),
            team_ids=team_ids,
            league_name=settings.get("name", f"League {league_id}"),
            team_names=team_names
        )

    async def get_historical_matchups(self, league_id: str, week: int) -> List[Matchup]:
        """
        Split each scheduled game into home and away entries.

        A bye has no away side and becomes a single entry.
        """
        matchups: List[Matchup] = []
        for game in await self._get_week_schedule(league_id, week):
            for side in ("home", "away"):
                entry = game.get(side)
                if not entry or entry.get("teamId") is None:
                    continue
                matchups.append(Matchup(
                    week=week,
                    matchup_id=game.get("id"),
                    team_id=entry["teamId"],
                    points=float(entry.get("totalPoints", 0) or 0)
                ))
        return matchups

    async def get_future_matchups(self, league_id: str, week: int) -> List[ScheduledMatchup]:
        pairings: List[ScheduledMatchup] = []
        for game in await self._get_week_schedule(league_id, week):
            home_id = (game.get("home") or {}).get("teamId")
            away_id = (game.get("away") or {}).get("teamId")
            if home_id is None or away_id is None:
                continue
            pairings.append(ScheduledMatchup(week=week, team_a_id=home_id, team_b_id=away_id))
        return pairings
