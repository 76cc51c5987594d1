"""
Display formatters

Pure string formatting for stat values, ranks, dates and game numbers. Every
formatter returns "-" for missing values instead of raising.
"""
import math
import re
from datetime import date, datetime
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Optional, Union

from models.game_report import GameNumber

MISSING = '-'
LEGACY_GAME_PREFIX = 'No.'

_GAME_NUMBER_PATTERN = re.compile(r'^(\d{4})(\d+)$')
_DATE_PREFIX_PATTERN = re.compile(r'^(\d{4})[-/](\d{1,2})[-/](\d{1,2})')

# Stat keys grouped by display style; camelCase keys match the JSON files
_AVG_STYLE = {'avg', 'obp', 'slg', 'babip', 'woba', 'wOBA', 'iso'}
_THREE_DECIMAL_STYLE = {'ops'}
_PERCENT_STYLE = {'k_pct', 'bb_pct', 'kPct', 'bbPct'}
_WHOLE_INDEX_STYLE = {'ops_plus', 'wrc_plus', 'opsPlus', 'wRCPlus'}
_ONE_DECIMAL_STYLE = {'wrc', 'wRC'}

# Wide enough for any finite float at fixed point
_FIXED_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


def _to_fixed(value: float, decimals: int) -> str:
    """Fixed-point string rounding halves away from zero."""
    quantum = Decimal(1).scaleb(-decimals)
    return str(Decimal(value).quantize(quantum, context=_FIXED_CONTEXT))


def format_avg(value: Optional[float]) -> str:
    """
    Format a rate stat the way box scores print it.

    Examples:
        >>> format_avg(0.375)
        '.375'
        >>> format_avg(1.0)
        '1.000'
        >>> format_avg(None)
        '-'
    """
    if value is None or not math.isfinite(value) or value < 0:
        return MISSING

    formatted = _to_fixed(value, 3)
    if value >= 1:
        return formatted

    # Drop the leading zero (".375"); rounding up to 1.000 keeps it
    if formatted.startswith('0'):
        return formatted[1:]
    return formatted


def format_percentage(value: Optional[float], decimals: int = 1) -> str:
    """Format a percentage value (already scaled to 0-100), e.g. '20.5%'."""
    if value is None or not math.isfinite(value) or value < 0:
        return MISSING
    return f"{_to_fixed(value, decimals)}%"


def format_number(value: Optional[float], decimals: int = 0) -> str:
    """
    Format a number with fixed decimals.

    Negative values are printed as-is since wRC and OPS+ can legitimately
    fall below zero.
    """
    if value is None or not math.isfinite(value):
        return MISSING
    return _to_fixed(value, decimals)


def format_rank(rank: Optional[int]) -> str:
    """Format a rank as an English ordinal (1st, 2nd, 11th, 23rd)."""
    if rank is None or rank <= 0:
        return MISSING

    if 11 <= rank % 100 <= 13:
        return f"{rank}th"

    suffix = {1: 'st', 2: 'nd', 3: 'rd'}.get(rank % 10, 'th')
    return f"{rank}{suffix}"


def format_date(value: Union[str, date, datetime, None]) -> str:
    """Format a date, datetime or date string as YYYY-MM-DD."""
    if not value:
        return MISSING

    if isinstance(value, datetime):
        return value.strftime('%Y-%m-%d')
    if isinstance(value, date):
        return value.isoformat()

    match = _DATE_PREFIX_PATTERN.match(str(value).strip())
    if not match:
        return MISSING

    try:
        parsed = date(int(match.group(1)), int(match.group(2)), int(match.group(3)))
    except ValueError:
        return MISSING
    return parsed.isoformat()


def format_season_year(year: Optional[int]) -> str:
    """Format a season year; non-positive years are missing."""
    if year is None or year <= 0:
        return MISSING
    return str(year)


def format_player_name(name: Optional[str]) -> str:
    """Trim a player name; blank names are missing."""
    if not name or not name.strip():
        return MISSING
    return name.strip()


def format_stat_value(stat_type: str, value: Optional[float]) -> str:
    """
    Format a stat according to its type.

    Rate stats use the batting-average style, OPS keeps its leading digit,
    K%/BB% are percentages, OPS+/wRC+ are whole numbers and wRC keeps one
    decimal. Unknown stat types are treated as counts.
    """
    if value is None:
        return MISSING

    if stat_type in _AVG_STYLE:
        return format_avg(value)
    if stat_type in _THREE_DECIMAL_STYLE:
        return format_number(value, 3)
    if stat_type in _PERCENT_STYLE:
        return format_percentage(value, 1)
    if stat_type in _WHOLE_INDEX_STYLE:
        return format_number(value, 0)
    if stat_type in _ONE_DECIMAL_STYLE:
        return format_number(value, 1)
    return format_number(value, 0)


def parse_game_number(game_number: Optional[str]) -> Optional[GameNumber]:
    """
    Split a game identifier into season and game number.

    Identifiers are a 4-digit season followed by the game number with no
    separator ('2025201' is game 201 of 2025). Anything else, including the
    legacy 'No.201' display form, returns None.
    """
    if not game_number:
        return None

    match = _GAME_NUMBER_PATTERN.match(str(game_number).strip())
    if not match:
        return None

    season = int(match.group(1))
    number = int(match.group(2))
    if season < 1 or number < 1:
        return None
    return GameNumber(season=season, number=number)


def format_game_number(season: int, number: int) -> str:
    """Build a game identifier; invalid parts produce an empty string."""
    if season is None or number is None:
        return ''
    if season < 1 or season > 9999 or number < 1:
        return ''
    return f"{season:04d}{number}"


def display_game_number(game_number: Optional[str]) -> str:
    """Render a game identifier as 'No.201'; legacy strings pass through."""
    if not game_number:
        return MISSING

    if game_number.startswith(LEGACY_GAME_PREFIX):
        return game_number

    parsed = parse_game_number(game_number)
    if parsed is None:
        return MISSING
    return f"{LEGACY_GAME_PREFIX}{parsed.number}"
