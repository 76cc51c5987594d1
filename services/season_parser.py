"""
Season export parsing

Turns labeled rows of the season CSV export (Chinese column headers) into
typed PlayerSeasonRecords, and groups a player's rows into a career record.
"""
import logging
from typing import Dict, Iterable, List, Mapping, Optional

from constants import SeasonColumns as C, SEASON_RANKING_COLUMNS
from exceptions import ValidationException
from models.batting_stats import BattingStats
from models.pitching_stats import PitchingStats, PitchingCalculated
from models.player import AdvancedStats, Career, Player, PlayerSeason, PlayerSeasonRecord
from utils.csv_grid import parse_grid
from utils.numbers import safe_divide, safe_float, safe_int

logger = logging.getLogger(f'{__name__}.SeasonParser')

SeasonRow = Mapping[str, Optional[str]]


def _text(row: SeasonRow, column: str) -> str:
    value = row.get(column)
    return value.strip() if value else ''


def parse_batting(row: SeasonRow) -> BattingStats:
    """Batting counting stats from a season row."""
    return BattingStats(
        games=safe_int(row.get(C.GAMES)),
        pa=safe_int(row.get(C.PA)),
        ab=safe_int(row.get(C.AB)),
        hits=safe_int(row.get(C.HITS)),
        singles=safe_int(row.get(C.SINGLES)),
        doubles=safe_int(row.get(C.DOUBLES)),
        triples=safe_int(row.get(C.TRIPLES)),
        hr=safe_int(row.get(C.HR)),
        rbi=safe_int(row.get(C.RBI)),
        runs=safe_int(row.get(C.RUNS)),
        bb=safe_int(row.get(C.WALKS)),
        so=safe_int(row.get(C.SO)),
        sb=safe_int(row.get(C.SB)),
        sf=safe_int(row.get(C.SF)),
        total_bases=safe_int(row.get(C.TOTAL_BASES)),
    )


def parse_pitching(row: SeasonRow) -> Optional[PitchingStats]:
    """
    Pitching line from a season row.

    Returns None when the player threw no innings, so "did not pitch" stays
    distinct from a zero-filled line.
    """
    ip = safe_float(row.get(C.IP), allow_negative=False)
    if ip <= 0:
        return None

    cs = safe_int(row.get(C.CAUGHT_STEALING))
    return PitchingStats(
        games=safe_int(row.get(C.PITCHING_GAMES)),
        ip=ip,
        bf=safe_int(row.get(C.BF)),
        so=safe_int(row.get(C.PITCHING_SO)),
        bb=safe_int(row.get(C.WALKS)),
        h=safe_int(row.get(C.HITS_ALLOWED)),
        hr=safe_int(row.get(C.HR_ALLOWED)),
        r=safe_int(row.get(C.RUNS_ALLOWED)),
        er=safe_int(row.get(C.EARNED_RUNS)),
        w=safe_int(row.get(C.WINS)),
        l=safe_int(row.get(C.LOSSES)),
        sv=safe_int(row.get(C.SAVES)),
        hld=safe_int(row.get(C.HOLDS)),
        cs=cs,
        cs_attempts=cs + safe_int(row.get(C.CAUGHT_STEALING_FAILED)),
    )


def calculate_pitching(pitching: PitchingStats, fip: float = 0.0) -> PitchingCalculated:
    """
    Pitching rate stats.

    Innings are used exactly as written (6.1 is divided as 6.1, not 6 1/3).
    FIP is precomputed upstream; a non-positive value means it was not
    available.
    """
    ip = pitching.ip
    return PitchingCalculated(
        era=safe_divide(pitching.er * 9, ip),
        whip=safe_divide(pitching.h + pitching.bb, ip),
        fip=fip if fip > 0 else None,
        k_per9=safe_divide(pitching.so * 9, ip),
        bb_per9=safe_divide(pitching.bb * 9, ip),
        h_per9=safe_divide(pitching.h * 9, ip),
        cs_percentage=safe_divide(pitching.cs, pitching.cs_attempts),
    )


def parse_season_row(row: SeasonRow) -> PlayerSeasonRecord:
    """
    Parse one labeled season-export row.

    Args:
        row: Mapping of column label to raw cell text

    Returns:
        PlayerSeasonRecord with zero-filled numeric defaults
    """
    code = _text(row, C.CODE)
    year = safe_int(row.get(C.YEAR))

    pitching = parse_pitching(row)
    pitching_calculated = None
    if pitching is not None:
        pitching_calculated = calculate_pitching(pitching, safe_float(row.get(C.FIP)))

    return PlayerSeasonRecord(
        id=f"{code}{_text(row, C.YEAR)}",
        code=code,
        year=year,
        team=_text(row, C.TEAM),
        number=_text(row, C.NUMBER),
        name=_text(row, C.NAME),
        photo=_text(row, C.PHOTO),
        batting=parse_batting(row),
        pitching=pitching,
        pitching_calculated=pitching_calculated,
        advanced=AdvancedStats(rc=safe_float(row.get(C.RC))),
        rankings={key: safe_int(row.get(column)) for key, column in SEASON_RANKING_COLUMNS.items()},
    )


def parse_season_rows(rows: Iterable[SeasonRow]) -> List[PlayerSeasonRecord]:
    """
    Parse labeled rows, dropping rows that are not player-years.

    Rows without a positive year or a player name (league summary lines,
    blank spreadsheet rows) are skipped.
    """
    records = []
    skipped = 0
    for row in rows:
        record = parse_season_row(row)
        if record.year > 0 and record.name:
            records.append(record)
        else:
            skipped += 1

    if skipped:
        logger.debug(f"Skipped {skipped} non-player rows")
    logger.info(f"Parsed {len(records)} season rows")
    return records


def read_season_csv(text: str, header_row: int = 1) -> List[Dict[str, str]]:
    """
    Split a season export into labeled rows.

    The export's first line carries league totals; the header sits on
    ``header_row`` and player rows follow it. Blank lines are dropped.
    """
    grid = parse_grid(text)
    if len(grid) <= header_row:
        return []

    header = [label.strip() for label in grid[header_row]]
    labeled = []
    for cells in grid[header_row + 1:]:
        if not any(value.strip() for value in cells):
            continue
        labeled.append({
            label: (cells[index].strip() if index < len(cells) else '')
            for index, label in enumerate(header)
            if label
        })
    return labeled


def group_by_player(records: Iterable[PlayerSeasonRecord]) -> Dict[str, List[PlayerSeasonRecord]]:
    """Group season records by player code, keeping first-seen order."""
    grouped: Dict[str, List[PlayerSeasonRecord]] = {}
    for record in records:
        grouped.setdefault(record.code, []).append(record)
    return grouped


def build_player(records: Iterable[PlayerSeasonRecord]) -> Player:
    """
    Build a career record from one player's season rows.

    Seasons are ordered newest first. Debut is the earliest season, teams
    are listed once each in the order they first appear.

    Raises:
        ValidationException: If no rows are given
    """
    rows = list(records)
    if not rows:
        raise ValidationException("Cannot build a player from zero season rows")

    seasons = [
        PlayerSeason(
            year=row.year,
            team=row.team,
            number=row.number,
            batting=row.batting,
            pitching=row.pitching,
            pitching_calculated=row.pitching_calculated,
            rankings=row.rankings,
        )
        for row in rows
    ]
    seasons.sort(key=lambda season: season.year, reverse=True)

    first = rows[0]
    return Player(
        id=first.code,
        code=first.code,
        name=first.name,
        photo=first.photo,
        career=Career(
            debut=min(row.year for row in rows),
            teams=list(dict.fromkeys(row.team for row in rows)),
            total_seasons=len(rows),
        ),
        seasons=seasons,
    )


def build_players(records: Iterable[PlayerSeasonRecord]) -> Dict[str, Player]:
    """Build every player's career record, keyed by player code."""
    return {code: build_player(rows) for code, rows in group_by_player(records).items()}
