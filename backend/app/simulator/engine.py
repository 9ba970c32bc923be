"""
Monte Carlo simulation engine for playoff probability calculations.
"""

import math
import random
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from .aggregator import apply_result
from .models import ScheduledMatchup, TeamId, TeamRecord
from .ranking import standing_position
from ..core.config import SIMULATION_ITERATIONS, SIMULATION_VARIANCE


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def simulate_score(projected_ppg: float, rng: random.Random, variance: float = SIMULATION_VARIANCE) -> float:
    """Draw a score uniformly within +/- variance of the projection."""
    return projected_ppg * rng.uniform(1.0 - variance, 1.0 + variance)


def _weeks_to_simulate(
    future_schedule: Mapping[int, List[ScheduledMatchup]],
    current_week: int
) -> List[Tuple[int, List[ScheduledMatchup]]]:
    return [
        (week, pairings)
        for week, pairings in sorted(future_schedule.items(), key=lambda item: item[0])
        if week >= current_week and pairings
    ]


def run_trial(
    records: Mapping[TeamId, TeamRecord],
    weeks: List[Tuple[int, List[ScheduledMatchup]]],
    rng: random.Random,
    variance: float = SIMULATION_VARIANCE
) -> Dict[TeamId, TeamRecord]:
    """
    Play out the remaining weeks once on a private copy of the records.

    Args:
        records: Current standings; never mutated
        weeks: Ordered (week, pairings) to simulate
        rng: Random source for this trial
        variance: Fractional spread of simulated scores around PPG

    Returns:
        The trial's final records
    """
    sim_records = {tid: r.copy() for tid, r in records.items()}

    for week, pairings in weeks:
        for pairing in pairings:
            record_a = sim_records.get(pairing.team_a_id)
            record_b = sim_records.get(pairing.team_b_id)
            if record_a is None or record_b is None:
                continue

            # Projection uses the running trial record, simulated weeks included
            points_a = simulate_score(record_a.points_per_game, rng, variance)
            points_b = simulate_score(record_b.points_per_game, rng, variance)

            apply_result(
                sim_records,
                pairing.team_a_id, points_a,
                pairing.team_b_id, points_b
            )

    return sim_records


def simulate_season(
    target_team_id: TeamId,
    records: Mapping[TeamId, TeamRecord],
    future_schedule: Mapping[int, List[ScheduledMatchup]],
    current_week: int,
    playoff_slot_count: int,
    iterations: int = SIMULATION_ITERATIONS,
    rng: Optional[random.Random] = None,
    variance: float = SIMULATION_VARIANCE,
    progress_callback: Optional[Callable[[float], None]] = None
) -> int:
    """
    Run Monte Carlo simulation of the remaining season.

    Args:
        target_team_id: Team whose qualification is being estimated
        records: Current team records
        future_schedule: Week -> unplayed pairings
        current_week: First week still to be played; earlier weeks are ignored
        playoff_slot_count: Number of teams that make the playoffs
        iterations: Number of trials to run
        rng: Random source; pass a seeded random.Random for reproducible output
        variance: Fractional spread of simulated scores around PPG
        progress_callback: Optional callback for progress updates (receives percent complete)

    Returns:
        Percent of trials (0-100, rounded) in which the target finished in a playoff slot

    Raises:
        ValueError: If there are no iterations or nothing left to simulate
        TargetTeamNotFoundError: If the target has no record
    """
    if iterations <= 0:
        raise ValueError("iterations must be positive")

    weeks = _weeks_to_simulate(future_schedule, current_week)
    if not weeks:
        raise ValueError("future schedule has no weeks to simulate")

    if rng is None:
        rng = random.Random()

    # Fail fast on an unknown target before spending any trials
    standing_position(records.values(), target_team_id)

    qualifying = 0
    for trial_idx in range(iterations):
        if progress_callback and trial_idx % 100 == 0:
            progress_callback(trial_idx / iterations * 100)

        final_records = run_trial(records, weeks, rng, variance)
        position = standing_position(final_records.values(), target_team_id)
        if position <= playoff_slot_count:
            qualifying += 1

    if progress_callback:
        progress_callback(100)

    return round_half_up(100 * qualifying / iterations)
