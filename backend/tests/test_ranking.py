"""
Tests for standings and power ranking order.
"""

import pytest

from app.simulator.models import TargetTeamNotFoundError
from app.simulator.ranking import (
    power_rankings,
    rank_standings,
    sort_standings,
    standing_position,
)

from conftest import make_record


@pytest.fixture
def records():
    return [
        make_record("low", wins=2, losses=4, points_for=600.0),
        make_record("tied_more_ties", wins=4, losses=1, ties=1, points_for=640.0),
        make_record("top", wins=5, losses=1, points_for=610.0),
        make_record("tied_fewer_ties", wins=4, losses=2, points_for=700.0),
    ]


class TestStandingsOrder:

    def test_wins_then_ties_then_points(self, records):
        ordered = [r.team_id for r in sort_standings(records)]
        assert ordered == ["top", "tied_more_ties", "tied_fewer_ties", "low"]

    def test_points_break_equal_wins_and_ties(self):
        records = [
            make_record("a", wins=3, losses=2, points_for=500.0),
            make_record("b", wins=3, losses=2, points_for=520.5),
        ]
        assert [r.team_id for r in sort_standings(records)] == ["b", "a"]

    def test_exact_ties_keep_input_order(self):
        """Fully tied teams stay in input order on every call."""
        records = [make_record(tid, wins=3, losses=3, points_for=600.0) for tid in ("x", "y", "z")]

        for _ in range(5):
            assert [s.team_id for s in rank_standings(records)] == ["x", "y", "z"]

        reversed_records = list(reversed(records))
        assert [s.team_id for s in rank_standings(reversed_records)] == ["z", "y", "x"]

    def test_rank_standings_assigns_both_ranks(self, records):
        ranked = rank_standings(records)

        assert [s.standing_rank for s in ranked] == [1, 2, 3, 4]
        by_id = {s.team_id: s for s in ranked}
        assert by_id["tied_fewer_ties"].power_rank == 1
        assert by_id["low"].power_rank == 4

    def test_inputs_not_mutated(self, records):
        before = [r.to_dict() for r in records]
        ranked = rank_standings(records)
        ranked[0].record.wins += 10

        assert [r.to_dict() for r in records] == before


class TestPowerRankings:

    def test_orders_by_points_for_only(self, records):
        ranked = power_rankings(records)

        assert [s.team_id for s in ranked] == ["tied_fewer_ties", "tied_more_ties", "top", "low"]
        assert [s.power_rank for s in ranked] == [1, 2, 3, 4]
        assert ranked[0].standing_rank == 3

    def test_empty(self):
        assert power_rankings([]) == []
        assert rank_standings([]) == []


class TestStandingPosition:

    def test_position(self, records):
        assert standing_position(records, "top") == 1
        assert standing_position(records, "low") == 4

    def test_unknown_team_raises(self, records):
        with pytest.raises(TargetTeamNotFoundError):
            standing_position(records, "missing")
