"""
Data models for the standings and playoff probability engine.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union

TeamId = Union[int, str]


@dataclass
class TeamRecord:
    """Cumulative record and point totals for one team."""

    team_id: TeamId
    wins: int = 0
    losses: int = 0
    ties: int = 0
    points_for: float = 0.0
    points_against: float = 0.0
    name: Optional[str] = None

    @property
    def games_played(self) -> int:
        return self.wins + self.losses + self.ties

    @property
    def points_per_game(self) -> float:
        games = self.games_played
        if games == 0:
            return 0.0
        return self.points_for / games

    @property
    def win_pct(self) -> float:
        games = self.games_played
        if games == 0:
            return 0.0
        return (self.wins + 0.5 * self.ties) / games

    @property
    def record_str(self) -> str:
        return f"{self.wins}-{self.losses}-{self.ties}"

    def copy(self) -> 'TeamRecord':
        """Create a copy of this record for simulation."""
        return TeamRecord(
            team_id=self.team_id,
            wins=self.wins,
            losses=self.losses,
            ties=self.ties,
            points_for=self.points_for,
            points_against=self.points_against,
            name=self.name
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "team_id": self.team_id,
            "name": self.name,
            "wins": self.wins,
            "losses": self.losses,
            "ties": self.ties,
            "points_for": self.points_for,
            "points_against": self.points_against,
            "record": self.record_str,
            "games_played": self.games_played,
            "points_per_game": self.points_per_game,
            "win_pct": self.win_pct
        }


@dataclass
class Matchup:
    """One team's scored entry in a weekly matchup."""

    week: int
    matchup_id: Union[int, str]
    team_id: TeamId
    points: float = 0.0


@dataclass
class ScheduledMatchup:
    """An unplayed pairing from the remaining schedule."""

    week: int
    team_a_id: TeamId
    team_b_id: TeamId

    def to_dict(self) -> dict:
        return {
            "week": self.week,
            "team_a_id": self.team_a_id,
            "team_b_id": self.team_b_id
        }


@dataclass(frozen=True)
class RankedStanding:
    """A team record decorated with its standings and power positions."""

    record: TeamRecord
    standing_rank: int
    power_rank: int

    @property
    def team_id(self) -> TeamId:
        return self.record.team_id

    def to_dict(self) -> dict:
        data = self.record.to_dict()
        data["standing_rank"] = self.standing_rank
        data["power_rank"] = self.power_rank
        return data


class PlayoffStatus(str, Enum):
    """Whether a team currently holds a playoff slot."""
    IN = "IN"
    OUT = "OUT"


class ProbabilityMethod(str, Enum):
    """Which path produced a playoff probability."""
    FINAL = "final"
    SIMULATION = "simulation"
    HEURISTIC = "heuristic"


@dataclass(frozen=True)
class PlayoffProbabilityResult:
    """Playoff qualification estimate for one team."""

    probability: int
    current_rank: int
    playoff_slot_count: int
    weeks_remaining: int
    status: PlayoffStatus
    method: ProbabilityMethod

    def to_dict(self) -> dict:
        return {
            "probability": self.probability,
            "current_rank": self.current_rank,
            "playoff_slot_count": self.playoff_slot_count,
            "weeks_remaining": self.weeks_remaining,
            "status": self.status.value,
            "method": self.method.value
        }


@dataclass
class LeagueSettings:
    """League configuration needed by the estimator."""

    playoff_slot_count: int
    last_regular_season_week: int
    team_ids: List[TeamId]
    league_name: Optional[str] = None
    team_names: Dict[TeamId, str] = field(default_factory=dict)


class WeekFetchStatus(str, Enum):
    """Outcome of fetching one week of matchup data."""
    OK = "ok"
    EMPTY = "empty"
    FAILED = "failed"


@dataclass
class WeekResult:
    """Tagged result of a single week fetch.

    EMPTY and FAILED are treated the same downstream (the week is skipped),
    but are kept apart so callers and tests can tell them apart.
    """

    week: int
    status: WeekFetchStatus
    matchups: list = field(default_factory=list)
    error: Optional[str] = None

    @property
    def usable(self) -> bool:
        return self.status == WeekFetchStatus.OK


@dataclass
class StandingsReport:
    """Everything produced for a single standings request."""

    target_team_id: TeamId
    current_week: int
    standings: List[RankedStanding]
    power_rankings: List[RankedStanding]
    playoff_probability: PlayoffProbabilityResult
    skipped_weeks: List[int] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "target_team_id": self.target_team_id,
            "current_week": self.current_week,
            "standings": [s.to_dict() for s in self.standings],
            "power_rankings": [s.to_dict() for s in self.power_rankings],
            "playoff_probability": self.playoff_probability.to_dict(),
            "skipped_weeks": list(self.skipped_weeks)
        }


class TargetTeamNotFoundError(LookupError):
    """Raised when the requested team has no record in the league."""
    pass


# Type aliases for weekly inputs
WeeklyMatchups = Dict[int, List[Matchup]]
FutureSchedule = Dict[int, List[ScheduledMatchup]]
