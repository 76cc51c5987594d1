"""
Sabermetric formula engine

Pure functions over BattingStats (and LeagueStats for the weighted family).
Rate stats return 0 when their denominator is zero; context-dependent stats
return None, since a zero wOBA or OPS+ would read as a real value.
"""
from typing import Optional

from models.batting_stats import BattingStats, CalculatedStats, WeightedStats, StatsBundle
from models.league import LeagueStats
from utils.numbers import safe_divide


def calculate_avg(batting: BattingStats) -> float:
    """AVG = H / AB"""
    return safe_divide(batting.hits, batting.ab)


def calculate_obp(batting: BattingStats) -> float:
    """
    OBP = (H + BB) / (AB + BB + SF)

    Hit-by-pitch is not tracked separately (it is folded into BB upstream).
    """
    return safe_divide(batting.hits + batting.bb, batting.ab + batting.bb + batting.sf)


def calculate_slg(batting: BattingStats) -> float:
    """SLG = TB / AB"""
    return safe_divide(batting.total_bases, batting.ab)


def calculate_ops(batting: BattingStats) -> float:
    """OPS = OBP + SLG"""
    return calculate_obp(batting) + calculate_slg(batting)


def calculate_iso(batting: BattingStats) -> float:
    """ISO = SLG - AVG"""
    return calculate_slg(batting) - calculate_avg(batting)


def calculate_babip(batting: BattingStats) -> float:
    """BABIP = (H - HR) / (AB - SO - HR + SF)"""
    denominator = batting.ab - batting.so - batting.hr + batting.sf
    return safe_divide(batting.hits - batting.hr, denominator)


def calculate_k_pct(batting: BattingStats) -> float:
    """K% = SO / PA x 100"""
    return safe_divide(batting.so, batting.pa) * 100


def calculate_bb_pct(batting: BattingStats) -> float:
    """BB% = BB / PA x 100"""
    return safe_divide(batting.bb, batting.pa) * 100


def calculate_woba(batting: BattingStats, league: LeagueStats) -> Optional[float]:
    """
    wOBA = (wBB*BB + w1B*1B + w2B*2B + w3B*3B + wHR*HR) / PA

    Returns None when the batter has no plate appearances.
    """
    if batting.pa == 0:
        return None

    weights = league.woba_weights
    weighted_value = (
        weights.bb * batting.bb
        + weights.single * batting.singles
        + weights.double * batting.doubles
        + weights.triple * batting.triples
        + weights.hr * batting.hr
    )
    return weighted_value / batting.pa


def calculate_wrc(batting: BattingStats, league: LeagueStats, lg_woba: float) -> Optional[float]:
    """wRC = ((wOBA - lgwOBA) / wOBAScale) x PA"""
    woba = calculate_woba(batting, league)
    if woba is None or league.woba_scale == 0:
        return None
    return ((woba - lg_woba) / league.woba_scale) * batting.pa


def calculate_wrc_plus(
    batting: BattingStats,
    league: LeagueStats,
    lg_woba: float,
    lg_runs_per_pa: float
) -> Optional[float]:
    """wRC+ = ((wRC / PA) / lgRunsPerPA) x 100"""
    wrc = calculate_wrc(batting, league, lg_woba)
    if wrc is None or batting.pa == 0 or lg_runs_per_pa == 0:
        return None
    return ((wrc / batting.pa) / lg_runs_per_pa) * 100


def calculate_ops_plus(batting: BattingStats, league: LeagueStats) -> Optional[float]:
    """OPS+ = 100 x (OBP/lgOBP + SLG/lgSLG - 1)"""
    if league.avg_obp == 0 or league.avg_slg == 0:
        return None

    obp = calculate_obp(batting)
    slg = calculate_slg(batting)
    return 100 * (obp / league.avg_obp + slg / league.avg_slg - 1)


def calculate_stats(batting: BattingStats) -> CalculatedStats:
    """Rate stats that need no league context."""
    return CalculatedStats(
        avg=calculate_avg(batting),
        obp=calculate_obp(batting),
        slg=calculate_slg(batting),
        ops=calculate_ops(batting),
        iso=calculate_iso(batting),
        babip=calculate_babip(batting),
        k_pct=calculate_k_pct(batting),
        bb_pct=calculate_bb_pct(batting),
    )


def calculate_weighted_stats(
    batting: BattingStats,
    league: Optional[LeagueStats] = None,
    lg_woba: Optional[float] = None,
    lg_runs_per_pa: Optional[float] = None
) -> WeightedStats:
    """League-context stats; all None without a league."""
    if league is None:
        return WeightedStats()

    if lg_woba is None or lg_runs_per_pa is None:
        from config import get_config
        config = get_config()
        lg_woba = config.lg_woba if lg_woba is None else lg_woba
        lg_runs_per_pa = config.lg_runs_per_pa if lg_runs_per_pa is None else lg_runs_per_pa

    return WeightedStats(
        woba=calculate_woba(batting, league),
        wrc=calculate_wrc(batting, league, lg_woba),
        wrc_plus=calculate_wrc_plus(batting, league, lg_woba, lg_runs_per_pa),
        ops_plus=calculate_ops_plus(batting, league),
    )


def calculate_all_stats(
    batting: BattingStats,
    league: Optional[LeagueStats] = None,
    lg_woba: Optional[float] = None,
    lg_runs_per_pa: Optional[float] = None
) -> StatsBundle:
    """
    Calculate every derived stat for a batting line.

    Args:
        batting: Counting stats
        league: League context; weighted stats are all None without it
        lg_woba: League wOBA (defaults to the configured value)
        lg_runs_per_pa: League runs per plate appearance (defaults to config)

    Returns:
        StatsBundle with the calculated and weighted blocks
    """
    return StatsBundle(
        calculated=calculate_stats(batting),
        weighted=calculate_weighted_stats(batting, league, lg_woba, lg_runs_per_pa),
    )
