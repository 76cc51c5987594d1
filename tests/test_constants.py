"""
Tests for application constants

Validates league rules and the scoresheet layout table.
"""
from constants import (
    BOX_SCORE_LAYOUT,
    INNINGS_PER_GAME,
    POINTS_DRAW,
    POINTS_LOSS,
    POINTS_WIN,
    SEASON_RANKING_COLUMNS,
    PlayerBlockLayout,
    SeasonColumns,
)


class TestLeagueRules:
    """Test league point rules."""

    def test_points_ordering(self):
        assert POINTS_WIN > POINTS_DRAW > POINTS_LOSS
        assert (POINTS_WIN, POINTS_DRAW, POINTS_LOSS) == (3, 1, 0)


class TestSeasonColumns:
    """Test season export labels."""

    def test_walks_column_is_shared(self):
        """Batting and pitching walks come from the same column."""
        assert SeasonColumns.WALKS == "四死"

    def test_ranking_columns_are_distinct(self):
        labels = list(SEASON_RANKING_COLUMNS.values())
        assert len(labels) == len(set(labels))
        assert all(label.endswith("排名") for label in labels)


class TestBoxScoreLayout:
    """Test the scoresheet grid layout."""

    def test_nine_innings_skip_spacer(self):
        assert len(BOX_SCORE_LAYOUT.inning_cols) == INNINGS_PER_GAME
        assert 10 not in BOX_SCORE_LAYOUT.inning_cols

    def test_runs_hits_errors_follow_innings(self):
        layout = BOX_SCORE_LAYOUT
        assert max(layout.inning_cols) < layout.runs_col < layout.hits_col < layout.errors_col

    def test_player_blocks(self):
        home, away = BOX_SCORE_LAYOUT.home_block, BOX_SCORE_LAYOUT.away_block

        assert (home.number, home.name, home.r) == (0, 1, 8)
        assert (away.number, away.name, away.r) == (10, 11, 18)
        assert away.batter_sb == 18

    def test_block_at_offset(self):
        block = PlayerBlockLayout.at(3)
        assert block.ip == block.batter_pa == 5

    def test_batters_follow_pitchers(self):
        assert BOX_SCORE_LAYOUT.first_batter_row > max(BOX_SCORE_LAYOUT.pitcher_rows)
