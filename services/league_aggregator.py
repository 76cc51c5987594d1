"""
League context aggregation

Sums a season's player rows into the league averages that OPS+ and the
wOBA family compare against.
"""
import logging
from typing import Iterable, Optional

from config import get_config
from models.league import LeagueStats, WOBAWeights
from models.player import PlayerSeasonRecord
from utils.numbers import safe_divide

logger = logging.getLogger(f'{__name__}.LeagueAggregator')


def calculate_league_stats(
    records: Iterable[PlayerSeasonRecord],
    year: int,
    woba_scale: Optional[float] = None,
    woba_weights: Optional[WOBAWeights] = None
) -> LeagueStats:
    """
    Aggregate a season's batting lines into league averages.

    League OBP leaves sacrifice flies out of the denominator. Any ratio with
    a zero denominator is 0, which makes OPS+ against this league None.

    Args:
        records: Player rows for one season
        year: Season year
        woba_scale: wOBA scale override (defaults to config)
        woba_weights: Linear weights override (defaults to config)

    Returns:
        LeagueStats for the season
    """
    total_ab = total_hits = total_bb = total_pa = total_tb = 0
    count = 0
    for record in records:
        batting = record.batting
        total_ab += batting.ab
        total_hits += batting.hits
        total_bb += batting.bb
        total_pa += batting.pa
        total_tb += batting.total_bases
        count += 1

    avg = safe_divide(total_hits, total_ab)
    obp = safe_divide(total_hits + total_bb, total_ab + total_bb)
    slg = safe_divide(total_tb, total_ab)

    if woba_scale is None:
        woba_scale = get_config().woba_scale
    if woba_weights is None:
        woba_weights = WOBAWeights.from_config()

    league = LeagueStats(
        year=year,
        avg_batting_avg=avg,
        avg_obp=obp,
        avg_slg=slg,
        avg_ops=obp + slg,
        total_pa=total_pa,
        total_ab=total_ab,
        woba_scale=woba_scale,
        woba_weights=woba_weights,
    )
    logger.debug(f"Aggregated {count} rows into {league}")
    return league
