"""
Fantasy Standings & Playoff Probability Engine

Aggregates weekly results into standings and estimates playoff odds by
Monte Carlo simulation, with a heuristic fallback.
"""

from .models import (
    TeamRecord,
    Matchup,
    ScheduledMatchup,
    RankedStanding,
    PlayoffStatus,
    ProbabilityMethod,
    PlayoffProbabilityResult,
    LeagueSettings,
    WeekFetchStatus,
    WeekResult,
    StandingsReport,
    TargetTeamNotFoundError,
)
from .aggregator import aggregate, apply_result, group_matchups, merge_records
from .ranking import rank_standings, power_rankings, sort_standings, standing_position
from .engine import simulate_season, run_trial, round_half_up
from .estimator import (
    heuristic_probability,
    estimate_playoff_probability,
    compute_standings_and_probability,
)

__all__ = [
    # Models
    "TeamRecord",
    "Matchup",
    "ScheduledMatchup",
    "RankedStanding",
    "PlayoffStatus",
    "ProbabilityMethod",
    "PlayoffProbabilityResult",
    "LeagueSettings",
    "WeekFetchStatus",
    "WeekResult",
    "StandingsReport",
    "TargetTeamNotFoundError",
    # Aggregation
    "aggregate",
    "apply_result",
    "group_matchups",
    "merge_records",
    # Ranking
    "rank_standings",
    "power_rankings",
    "sort_standings",
    "standing_position",
    # Engine
    "simulate_season",
    "run_trial",
    "round_half_up",
    # Estimator
    "heuristic_probability",
    "estimate_playoff_probability",
    "compute_standings_and_probability",
]
