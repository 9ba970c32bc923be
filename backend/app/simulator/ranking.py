"""
Standings and power ranking order.

Standings order (descending):
1. Wins
2. Ties
3. Points for

Power ranking order (descending): points for only.

Teams still equal after every key keep their input order (stable sort).
"""

from typing import Dict, Iterable, List, Tuple

from .models import RankedStanding, TargetTeamNotFoundError, TeamId, TeamRecord


def standings_key(record: TeamRecord) -> Tuple[int, int, float]:
    """Sort key for standings; use with reverse=True."""
    return (record.wins, record.ties, record.points_for)


def power_key(record: TeamRecord) -> float:
    """Sort key for power rankings; use with reverse=True."""
    return record.points_for


def sort_standings(records: Iterable[TeamRecord]) -> List[TeamRecord]:
    """Return records in standings order without touching the inputs."""
    # sorted() is stable with reverse=True, so exact ties keep input order
    return sorted(records, key=standings_key, reverse=True)


def sort_power(records: Iterable[TeamRecord]) -> List[TeamRecord]:
    """Return records in power ranking order without touching the inputs."""
    return sorted(records, key=power_key, reverse=True)


def _positions(ordered: List[TeamRecord]) -> Dict[TeamId, int]:
    return {record.team_id: idx + 1 for idx, record in enumerate(ordered)}


def _decorate(
    ordered: List[TeamRecord],
    standing_positions: Dict[TeamId, int],
    power_positions: Dict[TeamId, int]
) -> List[RankedStanding]:
    return [
        RankedStanding(
            record=record.copy(),
            standing_rank=standing_positions[record.team_id],
            power_rank=power_positions[record.team_id]
        )
        for record in ordered
    ]


def rank_standings(records: Iterable[TeamRecord]) -> List[RankedStanding]:
    """
    Rank teams in standings order.

    Args:
        records: Team records in any order

    Returns:
        RankedStanding list in standings order, each carrying both ranks
    """
    records = list(records)
    by_standing = sort_standings(records)
    by_power = sort_power(records)
    return _decorate(by_standing, _positions(by_standing), _positions(by_power))


def power_rankings(records: Iterable[TeamRecord]) -> List[RankedStanding]:
    """Rank teams by cumulative points scored, in power order."""
    records = list(records)
    by_standing = sort_standings(records)
    by_power = sort_power(records)
    return _decorate(by_power, _positions(by_standing), _positions(by_power))


def standing_position(records: Iterable[TeamRecord], team_id: TeamId) -> int:
    """
    Get a team's 1-based position in standings order.

    Raises:
        TargetTeamNotFoundError: If the team has no record
    """
    for idx, record in enumerate(sort_standings(records)):
        if record.team_id == team_id:
            return idx + 1
    raise TargetTeamNotFoundError(f"Team {team_id} has no record in this league")
