"""
Application constants for the league stats engine

League rules, season export column labels and the scoresheet grid layout.
Configurable league context (wOBA weights and scale) lives in config.py.
"""
from dataclasses import dataclass, field
from typing import Tuple

# Standings points (fixed league rule, not configurable)
POINTS_WIN = 3
POINTS_DRAW = 1
POINTS_LOSS = 0

# Innings per side in a game report line score
INNINGS_PER_GAME = 9

# Name cells that mark summary rows rather than players
TOTAL_ROW_LABEL = "TOTAL"


class SeasonColumns:
    """Season export column labels, exactly as they appear in the header row."""

    # Identity
    CODE = "聯盟編碼"
    YEAR = "年份"
    TEAM = "所屬球團"
    NUMBER = "背號"
    NAME = "球員"
    PHOTO = "頒獎照片"

    # Batting
    GAMES = "出賽"
    PA = "打席"
    AB = "打數"
    HITS = "安打"
    SINGLES = "一安"
    DOUBLES = "二安"
    TRIPLES = "三安"
    HR = "全打"
    RBI = "打點"
    RUNS = "得分"
    WALKS = "四死"  # shared by batting and pitching walks
    SO = "三振"
    SB = "盜壘成功"
    SF = "犧打"
    TOTAL_BASES = "壘打數"

    # Pitching
    IP = "局數"
    BF = "人次"
    PITCHING_SO = "奪三振"
    HITS_ALLOWED = "被安打"
    HR_ALLOWED = "被HR"
    RUNS_ALLOWED = "失分"
    EARNED_RUNS = "責失"
    PITCHING_GAMES = "出場"
    WINS = "勝"
    LOSSES = "負"
    SAVES = "救援點"
    HOLDS = "和"
    CAUGHT_STEALING = "阻殺成功"
    CAUGHT_STEALING_FAILED = "阻殺失敗"
    FIP = "FIP數據"

    # Advanced
    RC = "RC數據"


# Ranking field -> season export column
SEASON_RANKING_COLUMNS = {
    'rc': "RC排名",
    'hits': "安打排名",
    'hr': "全壘打排名",
    'rbi': "打點排名",
    'avg': "打擊率排名",
    'w': "勝排名",
    'sv': "救援排名",
    'so': "奪三振排名",
    'era': "防禦率排名",
    'whip': "WHIP排名",
    'fip': "FIP排名",
}


@dataclass(frozen=True)
class PlayerBlockLayout:
    """Column offsets of one team's pitcher/batter block on the scoresheet."""

    number: int
    name: int
    # Pitcher columns
    ip: int
    np: int
    k: int
    bb: int
    h: int
    hr: int
    r: int
    # Batter columns (pa, h, so, bb, rbi, r, sb)
    batter_pa: int
    batter_h: int
    batter_so: int
    batter_bb: int
    batter_rbi: int
    batter_r: int
    batter_sb: int

    @classmethod
    def at(cls, offset: int) -> 'PlayerBlockLayout':
        """Build a block whose first (number) column sits at ``offset``."""
        return cls(
            number=offset,
            name=offset + 1,
            ip=offset + 2,
            np=offset + 3,
            k=offset + 4,
            bb=offset + 5,
            h=offset + 6,
            hr=offset + 7,
            r=offset + 8,
            batter_pa=offset + 2,
            batter_h=offset + 3,
            batter_so=offset + 4,
            batter_bb=offset + 5,
            batter_rbi=offset + 6,
            batter_r=offset + 7,
            batter_sb=offset + 8,
        )


@dataclass(frozen=True)
class BoxScoreLayout:
    """
    Cell coordinates of the scoresheet CSV export.

    The sheet is a fixed template, so every value is addressed by row/column
    index rather than by header. Column 10 is a visual spacer between the
    6th and 7th innings and is never read.
    """

    date_row: int = 0
    date_col: int = 13

    home_line_row: int = 2
    away_line_row: int = 3
    inning_cols: Tuple[int, ...] = (4, 5, 6, 7, 8, 9, 11, 12, 13)
    runs_col: int = 14
    hits_col: int = 15
    errors_col: int = 16

    team_name_row: int = 4
    home_name_col: int = 1
    away_name_col: int = 11

    pitcher_rows: Tuple[int, ...] = (5, 6, 7)

    batting_avg_row: int = 9
    home_batting_avg_col: int = 9

    first_batter_row: int = 10

    home_block: PlayerBlockLayout = field(default_factory=lambda: PlayerBlockLayout.at(0))
    away_block: PlayerBlockLayout = field(default_factory=lambda: PlayerBlockLayout.at(10))


BOX_SCORE_LAYOUT = BoxScoreLayout()
