"""
Playoff probability estimation and the standings pipeline.

Builds records from match history, ranks them, and estimates the target
team's playoff chances by simulation when a future schedule is available,
otherwise by a heuristic formula.
"""

import asyncio
import logging
import random
from typing import TYPE_CHECKING, Dict, List, Mapping, Optional, Tuple

from .aggregator import aggregate
from .engine import round_half_up, simulate_season
from .models import (
    FutureSchedule,
    LeagueSettings,
    PlayoffProbabilityResult,
    PlayoffStatus,
    ProbabilityMethod,
    StandingsReport,
    TargetTeamNotFoundError,
    TeamId,
    TeamRecord,
    WeekFetchStatus,
    WeekResult,
)
from .ranking import power_rankings, rank_standings, standing_position
from ..core.config import SIMULATION_ITERATIONS
from ..platforms.errors import PROVIDER_ERRORS

if TYPE_CHECKING:
    from ..platforms.base import SeasonDataProvider

logger = logging.getLogger(__name__)

# Malformed week payloads count as a failed week, same as a provider error
WEEK_FETCH_ERRORS = PROVIDER_ERRORS + (ValueError,)

HEURISTIC_MIN = 1
HEURISTIC_MAX = 99


def calculate_weeks_remaining(last_regular_season_week: int, current_week: int) -> int:
    return last_regular_season_week - current_week + 1


def league_average_ppg(records: Mapping[TeamId, TeamRecord]) -> float:
    if not records:
        return 0.0
    return sum(r.points_per_game for r in records.values()) / len(records)


def heuristic_probability(
    record: TeamRecord,
    records: Mapping[TeamId, TeamRecord],
    current_rank: int,
    playoff_slot_count: int,
    weeks_remaining: int
) -> float:
    """
    Estimate playoff odds without a schedule.

    Starts from the current position, then adjusts for scoring strength
    relative to the league, time left, and win percentage. The result is
    clamped to [1, 99].
    """
    if current_rank <= playoff_slot_count:
        cushion = playoff_slot_count - current_rank
        probability = 70 + min(cushion * 5, 20)
    else:
        deficit = current_rank - playoff_slot_count
        probability = max(5, 45 - deficit * 8)

    probability += 2 * (record.points_per_game - league_average_ppg(records))

    if weeks_remaining >= 8:
        probability += 10
    elif weeks_remaining <= 3:
        probability -= 15

    win_pct = record.win_pct
    if win_pct >= 0.6:
        probability += 15
    elif win_pct <= 0.3:
        probability -= 20

    return max(HEURISTIC_MIN, min(HEURISTIC_MAX, probability))


def has_usable_schedule(future_schedule: Optional[FutureSchedule]) -> bool:
    return bool(future_schedule) and any(future_schedule.values())


def estimate_playoff_probability(
    target_team_id: TeamId,
    records: Mapping[TeamId, TeamRecord],
    settings: LeagueSettings,
    current_week: int,
    future_schedule: Optional[FutureSchedule] = None,
    iterations: int = SIMULATION_ITERATIONS,
    rng: Optional[random.Random] = None
) -> PlayoffProbabilityResult:
    """
    Estimate the target team's chance of finishing in a playoff slot.

    Args:
        target_team_id: Team to evaluate
        records: Current team records
        settings: League settings (slot count, last regular-season week)
        current_week: First week not yet played
        future_schedule: Week -> unplayed pairings, or None if unavailable
        iterations: Monte Carlo trials when simulating
        rng: Random source for the simulation

    Returns:
        PlayoffProbabilityResult

    Raises:
        TargetTeamNotFoundError: If the target has no record
    """
    if target_team_id not in records:
        raise TargetTeamNotFoundError(f"Team {target_team_id} has no record in this league")

    slots = settings.playoff_slot_count
    current_rank = standing_position(records.values(), target_team_id)
    weeks_remaining = calculate_weeks_remaining(settings.last_regular_season_week, current_week)
    status = PlayoffStatus.IN if current_rank <= slots else PlayoffStatus.OUT

    if weeks_remaining <= 0:
        return PlayoffProbabilityResult(
            probability=100 if status == PlayoffStatus.IN else 0,
            current_rank=current_rank,
            playoff_slot_count=slots,
            weeks_remaining=weeks_remaining,
            status=status,
            method=ProbabilityMethod.FINAL
        )

    if has_usable_schedule(future_schedule):
        try:
            probability = simulate_season(
                target_team_id,
                records,
                future_schedule,
                current_week,
                slots,
                iterations=iterations,
                rng=rng
            )
        except ValueError as e:
            # No iterations, or nothing simulatable on or after the current week
            logger.info("Simulation skipped for team %s: %s", target_team_id, e)
        else:
            logger.info(
                "Simulated %d trials for team %s: %d%%", iterations, target_team_id, probability
            )
            return PlayoffProbabilityResult(
                probability=probability,
                current_rank=current_rank,
                playoff_slot_count=slots,
                weeks_remaining=weeks_remaining,
                status=status,
                method=ProbabilityMethod.SIMULATION
            )

    probability = heuristic_probability(
        records[target_team_id], records, current_rank, slots, weeks_remaining
    )
    logger.info("Using heuristic estimate for team %s: %.1f", target_team_id, probability)

    return PlayoffProbabilityResult(
        probability=round_half_up(probability),
        current_rank=current_rank,
        playoff_slot_count=slots,
        weeks_remaining=weeks_remaining,
        status=status,
        method=ProbabilityMethod.HEURISTIC
    )


async def fetch_historical_week(
    provider: "SeasonDataProvider", league_id: str, week: int
) -> WeekResult:
    """Fetch one completed week, recording empty or failed fetches instead of raising."""
    try:
        matchups = await provider.get_historical_matchups(league_id, week)
    except WEEK_FETCH_ERRORS as e:
        logger.warning("Historical matchups for week %d unavailable: %s", week, e)
        return WeekResult(week=week, status=WeekFetchStatus.FAILED, error=str(e))

    if not matchups:
        return WeekResult(week=week, status=WeekFetchStatus.EMPTY)
    return WeekResult(week=week, status=WeekFetchStatus.OK, matchups=list(matchups))


async def fetch_future_week(
    provider: "SeasonDataProvider", league_id: str, week: int
) -> WeekResult:
    """Fetch one remaining week's pairings, recording empty or failed fetches."""
    try:
        pairings = await provider.get_future_matchups(league_id, week)
    except WEEK_FETCH_ERRORS as e:
        logger.warning("Schedule for week %d unavailable: %s", week, e)
        return WeekResult(week=week, status=WeekFetchStatus.FAILED, error=str(e))

    if not pairings:
        return WeekResult(week=week, status=WeekFetchStatus.EMPTY)
    return WeekResult(week=week, status=WeekFetchStatus.OK, matchups=list(pairings))


async def fetch_season_weeks(
    provider: "SeasonDataProvider",
    league_id: str,
    current_week: int,
    last_regular_season_week: int
) -> Tuple[List[WeekResult], List[WeekResult]]:
    """
    Fetch completed and remaining weeks concurrently.

    Returns:
        Tuple of (historical week results, future week results), each in week order
    """
    past_weeks = range(1, min(current_week, last_regular_season_week + 1))
    future_weeks = range(max(current_week, 1), last_regular_season_week + 1)

    results = await asyncio.gather(
        *(fetch_historical_week(provider, league_id, w) for w in past_weeks),
        *(fetch_future_week(provider, league_id, w) for w in future_weeks)
    )
    split = len(past_weeks)
    return list(results[:split]), list(results[split:])


async def compute_standings_and_probability(
    provider: "SeasonDataProvider",
    league_id: str,
    target_team_id: TeamId,
    iterations: int = SIMULATION_ITERATIONS,
    rng: Optional[random.Random] = None,
    current_week: Optional[int] = None
) -> StandingsReport:
    """
    Build standings, power rankings, and playoff odds for one team.

    Args:
        provider: Season data source
        league_id: The league identifier
        target_team_id: Team to evaluate
        iterations: Monte Carlo trials
        rng: Random source for the simulation
        current_week: First unplayed week; asked from the provider when omitted

    Returns:
        StandingsReport

    Raises:
        TargetTeamNotFoundError: If the target isn't in the league
        PlatformError: If league settings or the current week can't be fetched
    """
    settings = await provider.get_league_settings(league_id)
    if current_week is None:
        current_week = await provider.get_current_week(league_id)

    if target_team_id not in settings.team_ids:
        raise TargetTeamNotFoundError(f"Team {target_team_id} is not in league {league_id}")

    history, future = await fetch_season_weeks(
        provider, league_id, current_week, settings.last_regular_season_week
    )

    records = aggregate(
        settings.team_ids,
        [(result.week, result.matchups) for result in history if result.usable]
    )
    for team_id, record in records.items():
        record.name = settings.team_names.get(team_id)

    future_schedule: Dict[int, list] = {
        result.week: result.matchups for result in future if result.usable
    }
    if future and not future_schedule:
        logger.warning("No future schedule for league %s; falling back to heuristic", league_id)

    probability = estimate_playoff_probability(
        target_team_id,
        records,
        settings,
        current_week,
        future_schedule=future_schedule,
        iterations=iterations,
        rng=rng
    )

    return StandingsReport(
        target_team_id=target_team_id,
        current_week=current_week,
        standings=rank_standings(records.values()),
        power_rankings=power_rankings(records.values()),
        playoff_probability=probability,
        skipped_weeks=[result.week for result in history if not result.usable]
    )
