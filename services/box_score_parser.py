"""
Box score parsing

Reads a scoresheet CSV export into a GameReport. The sheet is a fixed
template: values are addressed by the coordinates in BOX_SCORE_LAYOUT, not
by headers. There is no error path for a malformed sheet; missing cells read
as blank and blank numbers read as 0.
"""
from typing import List, Optional, Sequence

from constants import BOX_SCORE_LAYOUT, BoxScoreLayout, PlayerBlockLayout, TOTAL_ROW_LABEL
from models.game_report import BatterLine, GameReport, InningScores, PitcherLine, TeamGameStats
from utils.csv_grid import cell, parse_grid
from utils.logging import get_contextual_logger
from utils.numbers import parse_float, safe_int

logger = get_contextual_logger(f'{__name__}.BoxScoreParser')

Grid = Sequence[Sequence[str]]


def parse_innings(grid: Grid, row: int, layout: BoxScoreLayout = BOX_SCORE_LAYOUT) -> List[Optional[int]]:
    """
    Read one side of the line score.

    Blank cells are innings that were not batted (None), not zero runs.
    """
    innings = []
    for col in layout.inning_cols:
        value = cell(grid, row, col)
        innings.append(safe_int(value) if value else None)
    return innings


def parse_pitcher_row(grid: Grid, row: int, block: PlayerBlockLayout) -> Optional[PitcherLine]:
    """Read a pitcher line, or None for blank and TOTAL rows."""
    name = cell(grid, row, block.name)
    if not name or name == TOTAL_ROW_LABEL:
        return None

    runs = safe_int(cell(grid, row, block.r))
    return PitcherLine(
        number=cell(grid, row, block.number),
        name=name,
        ip=cell(grid, row, block.ip) or '0',
        np=safe_int(cell(grid, row, block.np)),
        k=safe_int(cell(grid, row, block.k)),
        bb=safe_int(cell(grid, row, block.bb)),
        h=safe_int(cell(grid, row, block.h)),
        hr=safe_int(cell(grid, row, block.hr)),
        r=runs,
        # No earned-run column on the sheet
        er=runs,
    )


def parse_batter_row(grid: Grid, row: int, block: PlayerBlockLayout, team_name: str) -> Optional[BatterLine]:
    """Read a batter line, or None for blank, TOTAL and team-summary rows."""
    name = cell(grid, row, block.name)
    if not name or name == TOTAL_ROW_LABEL or name == team_name:
        return None

    pa = safe_int(cell(grid, row, block.batter_pa))
    bb = safe_int(cell(grid, row, block.batter_bb))
    return BatterLine(
        number=cell(grid, row, block.number),
        name=name,
        pa=pa,
        # Sacrifices and HBP are not split out per batter
        ab=max(pa - bb, 0),
        r=safe_int(cell(grid, row, block.batter_r)),
        h=safe_int(cell(grid, row, block.batter_h)),
        rbi=safe_int(cell(grid, row, block.batter_rbi)),
        bb=bb,
        so=safe_int(cell(grid, row, block.batter_so)),
        sb=safe_int(cell(grid, row, block.batter_sb)),
    )


def _parse_team(
    grid: Grid,
    name: str,
    line_row: int,
    block: PlayerBlockLayout,
    batting_avg: Optional[float],
    layout: BoxScoreLayout
) -> TeamGameStats:
    pitchers = []
    for row in layout.pitcher_rows:
        pitcher = parse_pitcher_row(grid, row, block)
        if pitcher is not None:
            pitchers.append(pitcher)

    batters = []
    for row in range(layout.first_batter_row, len(grid)):
        batter = parse_batter_row(grid, row, block, name)
        if batter is not None:
            batters.append(batter)

    return TeamGameStats(
        name=name,
        runs=safe_int(cell(grid, line_row, layout.runs_col)),
        hits=safe_int(cell(grid, line_row, layout.hits_col)),
        errors=safe_int(cell(grid, line_row, layout.errors_col)),
        batting_avg=batting_avg,
        pitchers=pitchers,
        batters=batters,
    )


def parse_box_score_grid(
    grid: Grid,
    game_number: str,
    venue: Optional[str] = None,
    layout: BoxScoreLayout = BOX_SCORE_LAYOUT
) -> GameReport:
    """
    Build a GameReport from an already-split scoresheet grid.

    Args:
        grid: Rows of cells from the scoresheet export
        game_number: Game identifier the sheet belongs to
        venue: Ballpark, when known from the schedule
        layout: Cell coordinates of the template

    Returns:
        GameReport; a short or empty grid gives empty names and blank innings
    """
    date = cell(grid, layout.date_row, layout.date_col).replace('/', '-')

    home_name = cell(grid, layout.team_name_row, layout.home_name_col)
    away_name = cell(grid, layout.team_name_row, layout.away_name_col)

    # Blank when the sheet has no batting line yet
    home_batting_avg = parse_float(cell(grid, layout.batting_avg_row, layout.home_batting_avg_col))

    report = GameReport(
        game_number=game_number,
        date=date,
        venue=venue,
        innings=InningScores(
            home=parse_innings(grid, layout.home_line_row, layout),
            away=parse_innings(grid, layout.away_line_row, layout),
        ),
        home_team=_parse_team(grid, home_name, layout.home_line_row, layout.home_block, home_batting_avg, layout),
        away_team=_parse_team(grid, away_name, layout.away_line_row, layout.away_block, None, layout),
    )

    logger.debug(
        f"Parsed game {game_number}: {away_name} @ {home_name}",
        pitchers=len(report.home_team.pitchers) + len(report.away_team.pitchers),
        batters=len(report.home_team.batters) + len(report.away_team.batters),
    )
    return report


def parse_box_score(
    text: str,
    game_number: str,
    venue: Optional[str] = None,
    layout: BoxScoreLayout = BOX_SCORE_LAYOUT
) -> GameReport:
    """Parse raw scoresheet CSV text into a GameReport."""
    return parse_box_score_grid(parse_grid(text), game_number, venue, layout)
