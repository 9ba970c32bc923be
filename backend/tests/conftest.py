"""
Shared fixtures and helpers for the standings tests.
"""

from typing import Dict, List, Optional

import pytest

from app.platforms.base import SeasonDataProvider, PlatformError
from app.simulator.models import LeagueSettings, Matchup, ScheduledMatchup, TeamRecord


def make_week(week: int, *games) -> List[Matchup]:
    """Build a week's entries from (matchup_id, team_a, points_a, team_b, points_b) tuples."""
    entries = []
    for matchup_id, team_a, points_a, team_b, points_b in games:
        entries.append(Matchup(week=week, matchup_id=matchup_id, team_id=team_a, points=points_a))
        entries.append(Matchup(week=week, matchup_id=matchup_id, team_id=team_b, points=points_b))
    return entries


def make_record(team_id, wins=0, losses=0, ties=0, points_for=0.0, points_against=0.0) -> TeamRecord:
    return TeamRecord(
        team_id=team_id,
        wins=wins,
        losses=losses,
        ties=ties,
        points_for=points_for,
        points_against=points_against
    )


class FakeProvider(SeasonDataProvider):
    """In-memory provider; weeks listed in failing_weeks or failing_future_weeks raise `error`."""

    def __init__(
        self,
        settings: LeagueSettings,
        current_week: int,
        history: Optional[Dict[int, List[Matchup]]] = None,
        schedule: Optional[Dict[int, List[ScheduledMatchup]]] = None,
        failing_weeks=(),
        schedule_fails: bool = False,
        failing_future_weeks=(),
        error: Exception = None
    ):
        self.settings = settings
        self.current_week = current_week
        self.history = history or {}
        self.schedule = schedule or {}
        self.failing_weeks = set(failing_weeks)
        self.schedule_fails = schedule_fails
        self.failing_future_weeks = set(failing_future_weeks)
        self.error = error
        self.historical_calls: List[int] = []
        self.future_calls: List[int] = []

    @property
    def platform_name(self) -> str:
        return "fake"

    async def get_current_week(self, league_id: str) -> int:
        return self.current_week

    async def get_league_settings(self, league_id: str) -> LeagueSettings:
        return self.settings

    async def get_historical_matchups(self, league_id: str, week: int) -> List[Matchup]:
        self.historical_calls.append(week)
        if week in self.failing_weeks:
            raise self.error or PlatformError(f"week {week} unavailable")
        return self.history.get(week, [])

    async def get_future_matchups(self, league_id: str, week: int) -> List[ScheduledMatchup]:
        self.future_calls.append(week)
        if self.schedule_fails:
            raise PlatformError("schedule unavailable")
        if week in self.failing_future_weeks:
            raise self.error or PlatformError(f"schedule for week {week} unavailable")
        return self.schedule.get(week, [])


@pytest.fixture
def four_team_history() -> Dict[int, List[Matchup]]:
    """Three completed weeks for teams 1-4; team 1 undefeated, team 4 winless."""
    return {
        1: make_week(1, (1, 1, 120.0, 2, 100.0), (2, 3, 95.0, 4, 90.0)),
        2: make_week(2, (1, 1, 130.0, 3, 105.0), (2, 2, 110.0, 4, 80.0)),
        3: make_week(3, (1, 1, 115.0, 4, 85.0), (2, 2, 100.0, 3, 99.0)),
    }


@pytest.fixture
def four_team_settings() -> LeagueSettings:
    return LeagueSettings(
        playoff_slot_count=2,
        last_regular_season_week=6,
        team_ids=[1, 2, 3, 4],
        league_name="Test League",
        team_names={1: "Alpha", 2: "Beta", 3: "Gamma", 4: "Delta"}
    )


@pytest.fixture
def four_team_schedule() -> Dict[int, List[ScheduledMatchup]]:
    return {
        4: [ScheduledMatchup(4, 1, 2), ScheduledMatchup(4, 3, 4)],
        5: [ScheduledMatchup(5, 1, 3), ScheduledMatchup(5, 2, 4)],
        6: [ScheduledMatchup(6, 1, 4), ScheduledMatchup(6, 2, 3)],
    }
