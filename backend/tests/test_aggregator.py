"""
Tests for building team records from weekly matchups.
"""

import copy

import pytest

from app.simulator.aggregator import aggregate, group_matchups, merge_records
from app.simulator.models import Matchup

from conftest import make_week


class TestAggregateScenarios:
    """Single-week scenarios."""

    def test_clean_two_team_week(self):
        """Winner and loser get the right record and symmetric points."""
        week1 = [
            Matchup(week=1, matchup_id=1, team_id="A", points=110.5),
            Matchup(week=1, matchup_id=1, team_id="B", points=98.0),
        ]
        records = aggregate({"A", "B"}, {1: week1})

        a, b = records["A"], records["B"]
        assert (a.wins, a.losses, a.ties) == (1, 0, 0)
        assert a.points_for == 110.5
        assert a.points_against == 98.0
        assert (b.wins, b.losses, b.ties) == (0, 1, 0)
        assert b.points_for == 98.0
        assert b.points_against == 110.5

    def test_singleton_group_skipped(self):
        """A bye (one-entry group) changes nothing."""
        week1 = [Matchup(week=1, matchup_id=7, team_id="A", points=120.0)]
        records = aggregate(["A", "B"], {1: week1})

        for record in records.values():
            assert record.games_played == 0
            assert record.points_for == 0.0
            assert record.points_against == 0.0

    def test_oversized_group_skipped(self):
        """A group with three entries is malformed and ignored."""
        week1 = [
            Matchup(week=1, matchup_id=1, team_id="A", points=100.0),
            Matchup(week=1, matchup_id=1, team_id="B", points=90.0),
            Matchup(week=1, matchup_id=1, team_id="C", points=80.0),
        ]
        records = aggregate(["A", "B", "C"], {1: week1})
        assert all(r.games_played == 0 for r in records.values())

    def test_tie(self):
        """Equal scores give both teams a tie."""
        records = aggregate(["A", "B"], {1: make_week(1, (1, "A", 100.0, "B", 100.0))})

        for record in records.values():
            assert (record.wins, record.losses, record.ties) == (0, 0, 1)
            assert record.points_for == 100.0

    def test_zero_zero_is_tie(self):
        """An unplayed week reported as 0-0 counts as a tie."""
        records = aggregate([1, 2], {1: make_week(1, (1, 1, 0.0, 2, 0.0))})
        assert records[1].ties == 1
        assert records[2].ties == 1

    def test_teams_without_games_present(self):
        """Every supplied team gets a zeroed record."""
        records = aggregate([1, 2, 3], {1: make_week(1, (1, 1, 90.0, 2, 80.0))})
        assert set(records) == {1, 2, 3}
        assert records[3].record_str == "0-0-0"

    def test_unknown_team_skipped(self):
        """A pair naming a team outside the league is ignored."""
        records = aggregate([1], {1: make_week(1, (1, 1, 90.0, 99, 80.0))})
        assert records[1].games_played == 0

    def test_empty_and_missing_weeks(self):
        """Empty weeks contribute nothing."""
        records = aggregate([1, 2], {1: [], 3: make_week(3, (1, 1, 90.0, 2, 95.0))})
        assert records[2].wins == 1
        assert records[1].losses == 1

    def test_accepts_week_pairs(self):
        """Weeks may be given as (week, entries) pairs."""
        records = aggregate([1, 2], [(1, make_week(1, (5, 1, 101.0, 2, 99.0)))])
        assert records[1].wins == 1

    def test_input_not_mutated(self, four_team_history):
        before = copy.deepcopy(four_team_history)
        aggregate([1, 2, 3, 4], four_team_history)
        assert four_team_history == before


class TestAggregateProperties:
    """Properties that hold over whole seasons."""

    def test_four_team_records(self, four_team_history):
        records = aggregate([1, 2, 3, 4], four_team_history)

        assert records[1].record_str == "3-0-0"
        assert records[2].record_str == "2-1-0"
        assert records[3].record_str == "1-2-0"
        assert records[4].record_str == "0-3-0"
        assert records[1].points_for == pytest.approx(365.0)
        assert records[2].points_against == pytest.approx(299.0)

    def test_conservation(self, four_team_history):
        """League-wide points for equals points against."""
        records = aggregate([1, 2, 3, 4], four_team_history)

        total_for = sum(r.points_for for r in records.values())
        total_against = sum(r.points_against for r in records.values())
        assert total_for == pytest.approx(total_against)

    def test_games_played_invariant(self, four_team_history):
        records = aggregate([1, 2, 3, 4], four_team_history)
        for record in records.values():
            assert record.wins + record.losses + record.ties == record.games_played == 3

    @pytest.mark.parametrize("split", [1, 2, 3])
    def test_additivity(self, four_team_history, split):
        """Aggregating two week ranges and merging equals aggregating all weeks."""
        team_ids = [1, 2, 3, 4]
        early = {w: m for w, m in four_team_history.items() if w <= split}
        late = {w: m for w, m in four_team_history.items() if w > split}

        merged = merge_records(aggregate(team_ids, early), aggregate(team_ids, late))
        whole = aggregate(team_ids, four_team_history)

        for team_id in team_ids:
            assert merged[team_id].record_str == whole[team_id].record_str
            assert merged[team_id].points_for == pytest.approx(whole[team_id].points_for)
            assert merged[team_id].points_against == pytest.approx(whole[team_id].points_against)


class TestGroupMatchups:

    def test_groups_by_matchup_id(self):
        week = make_week(1, (1, "A", 1.0, "B", 2.0), (2, "C", 3.0, "D", 4.0))
        groups = group_matchups(week)
        assert sorted(groups) == [1, 2]
        assert [m.team_id for m in groups[1]] == ["A", "B"]

    def test_null_matchup_id_dropped(self):
        week = [Matchup(week=1, matchup_id=None, team_id="A", points=50.0)]
        assert group_matchups(week) == {}
