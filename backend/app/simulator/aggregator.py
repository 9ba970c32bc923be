"""
Build team records from weekly head-to-head results.
"""

import logging
from collections import abc, defaultdict
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple, Union

from .models import Matchup, TeamId, TeamRecord

logger = logging.getLogger(__name__)


def group_matchups(week_matchups: Iterable[Matchup]) -> Dict[Union[int, str], List[Matchup]]:
    """Group one week's entries by matchup_id, preserving input order."""
    groups: Dict[Union[int, str], List[Matchup]] = defaultdict(list)
    for entry in week_matchups:
        if entry.matchup_id is None:
            continue
        groups[entry.matchup_id].append(entry)
    return groups


def apply_result(
    records: Mapping[TeamId, TeamRecord],
    team_a_id: TeamId,
    points_a: float,
    team_b_id: TeamId,
    points_b: float
) -> None:
    """
    Fold one head-to-head result into the given records.

    Equal scores are a tie for both sides, including 0.0 vs 0.0.
    """
    record_a = records[team_a_id]
    record_b = records[team_b_id]

    record_a.points_for += points_a
    record_a.points_against += points_b
    record_b.points_for += points_b
    record_b.points_against += points_a

    if points_a > points_b:
        record_a.wins += 1
        record_b.losses += 1
    elif points_b > points_a:
        record_b.wins += 1
        record_a.losses += 1
    else:
        record_a.ties += 1
        record_b.ties += 1


def _iter_weeks(
    weekly_matchups: Union[Mapping[int, Sequence[Matchup]], Iterable[Tuple[int, Sequence[Matchup]]]]
) -> Iterable[Tuple[int, Sequence[Matchup]]]:
    if isinstance(weekly_matchups, abc.Mapping):
        return sorted(weekly_matchups.items(), key=lambda item: item[0])
    return weekly_matchups


def aggregate(
    team_ids: Iterable[TeamId],
    weekly_matchups: Union[Mapping[int, Sequence[Matchup]], Iterable[Tuple[int, Sequence[Matchup]]]]
) -> Dict[TeamId, TeamRecord]:
    """
    Aggregate weekly matchups into one record per team.

    Args:
        team_ids: Every team in the league; each gets a record even with no games
        weekly_matchups: Mapping (or pairs) of week -> scored entries

    Returns:
        Dict mapping team_id -> TeamRecord

    Groups that don't contain exactly two entries (byes, malformed data) and
    pairs naming an unknown team are skipped. Missing weeks are simply absent.
    """
    records: Dict[TeamId, TeamRecord] = {
        team_id: TeamRecord(team_id=team_id) for team_id in team_ids
    }

    for week, week_matchups in _iter_weeks(weekly_matchups):
        if not week_matchups:
            continue

        for matchup_id, group in group_matchups(week_matchups).items():
            if len(group) != 2:
                logger.debug(
                    "Skipping week %s matchup %s with %d entries", week, matchup_id, len(group)
                )
                continue

            entry_a, entry_b = group
            if entry_a.team_id not in records or entry_b.team_id not in records:
                logger.debug(
                    "Skipping week %s matchup %s: unknown team", week, matchup_id
                )
                continue

            apply_result(
                records,
                entry_a.team_id, entry_a.points or 0.0,
                entry_b.team_id, entry_b.points or 0.0
            )

    return records


def merge_records(
    first: Mapping[TeamId, TeamRecord],
    second: Mapping[TeamId, TeamRecord]
) -> Dict[TeamId, TeamRecord]:
    """Field-wise sum of two record mappings (e.g. two disjoint week ranges)."""
    merged: Dict[TeamId, TeamRecord] = {tid: r.copy() for tid, r in first.items()}
    for team_id, record in second.items():
        if team_id not in merged:
            merged[team_id] = record.copy()
            continue
        target = merged[team_id]
        target.wins += record.wins
        target.losses += record.losses
        target.ties += record.ties
        target.points_for += record.points_for
        target.points_against += record.points_against
        if target.name is None:
            target.name = record.name
    return merged
