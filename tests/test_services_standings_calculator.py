"""
Tests for the standings engine
"""
import pytest

from services.standings_calculator import (
    calculate_games_behind,
    calculate_points,
    calculate_standings,
    calculate_win_rate,
)
from tests.factories import TeamRecordFactory


class TestStandingsHelpers:
    """Test points, win rate and games behind."""

    def test_points(self):
        """Test 3 points per win and 1 per draw."""
        assert calculate_points(16, 1, 3) == 49
        assert calculate_points(0, 0, 10) == 0
        assert calculate_points(0, 4) == 4

    def test_win_rate_excludes_draws(self):
        assert calculate_win_rate(12, 4) == pytest.approx(0.75)
        assert calculate_win_rate(12, 5) == pytest.approx(12 / 17)

    def test_win_rate_no_decisions(self):
        assert calculate_win_rate(0, 0) == 0.0

    def test_games_behind(self):
        leader = TeamRecordFactory.create("a", wins=16, losses=3)
        team = TeamRecordFactory.create("b", wins=13, losses=5)
        assert calculate_games_behind(leader, team) == 2.5
        assert calculate_games_behind(leader, leader) == 0


class TestCalculateStandings:
    """Test ranking a league table."""

    @pytest.fixture
    def teams(self):
        return [
            TeamRecordFactory.create("c", wins=12, losses=4, draws=1),
            TeamRecordFactory.create("a", wins=16, losses=3, draws=1),
            TeamRecordFactory.create("b", wins=13, losses=5, draws=0),
        ]

    def test_orders_by_points(self, teams):
        """Test points [49, 39, 37] ranked 1-2-3."""
        standings = calculate_standings(teams)

        assert [t.points for t in standings] == [49, 39, 37]
        assert [t.rank for t in standings] == [1, 2, 3]
        assert [t.team_id for t in standings] == ["a", "b", "c"]

    def test_games_behind(self, teams):
        """Test leader has no games behind and second place trails by 2.5."""
        standings = calculate_standings(teams)

        assert standings[0].games_behind is None
        assert standings[0].is_leader
        assert standings[1].games_behind == 2.5
        assert standings[2].games_behind == 2.5

    def test_computed_fields(self, teams):
        leader = calculate_standings(teams)[0]

        assert leader.games_played == 20
        assert leader.win_rate == pytest.approx(16 / 19)
        assert leader.record == "16-3-1"
        assert leader.runs_scored == 6.0

    def test_points_tie_broken_by_win_rate(self):
        """Test that at 37 points the .750 team ranks above the .706 team."""
        standings = calculate_standings([
            TeamRecordFactory.create("x", wins=12, losses=5, draws=1),
            TeamRecordFactory.create("y", wins=12, losses=4, draws=1),
        ])

        assert [t.team_id for t in standings] == ["y", "x"]
        assert standings[0].points == standings[1].points == 37

    def test_full_tie_keeps_input_order(self):
        standings = calculate_standings([
            TeamRecordFactory.create("first", wins=5, losses=5),
            TeamRecordFactory.create("second", wins=5, losses=5),
        ])

        assert [t.team_id for t in standings] == ["first", "second"]
        assert [t.rank for t in standings] == [1, 2]
        assert standings[1].games_behind == 0

    def test_games_behind_never_negative(self):
        """Test a points leader built on draws does not put others below zero."""
        standings = calculate_standings([
            TeamRecordFactory.create("drawer", wins=5, losses=4, draws=10),
            TeamRecordFactory.create("winner", wins=7, losses=2, draws=0),
        ])

        assert standings[0].team_id == "drawer"
        assert standings[1].games_behind == 0.0

    def test_empty(self):
        assert calculate_standings([]) == []

    def test_input_not_mutated(self, teams):
        before = [t.team_id for t in teams]
        calculate_standings(teams)
        assert [t.team_id for t in teams] == before
