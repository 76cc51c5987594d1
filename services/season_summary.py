"""
Season summary building

Groups a season's player rows by team into the roster listing the site
serves, and lists teams and seasons from it.
"""
import logging
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional

from models.player import PlayerSeasonRecord
from models.team import (
    PlayerSummary,
    SeasonBattingLine,
    SeasonPitchingLine,
    SeasonSummary,
    TeamListing,
    TeamSeasonStats,
    TeamSeasonSummary,
)
from services.stats_calculator import calculate_avg, calculate_stats
from services.team_lookup import TeamLookupService

logger = logging.getLogger(f'{__name__}.SeasonSummary')


def build_player_summary(record: PlayerSeasonRecord) -> PlayerSummary:
    """Roster row for one player-year, with rate stats attached."""
    pitching_stats = None
    if record.pitching is not None and record.pitching_calculated is not None:
        pitching_stats = SeasonPitchingLine(
            **record.pitching.model_dump(),
            **record.pitching_calculated.model_dump(),
        )

    return PlayerSummary(
        id=record.code,
        name=record.name,
        number=record.number,
        photo=record.photo,
        team=record.team,
        season_stats=SeasonBattingLine(
            **record.batting.model_dump(),
            **calculate_stats(record.batting).model_dump(),
        ),
        pitching_stats=pitching_stats,
        rankings=record.rankings,
    )


def build_team_stats(records: List[PlayerSeasonRecord]) -> TeamSeasonStats:
    """Team aggregate: roster size, mean player AVG and total home runs."""
    if not records:
        return TeamSeasonStats()

    return TeamSeasonStats(
        total_players=len(records),
        avg_batting_avg=sum(calculate_avg(r.batting) for r in records) / len(records),
        total_home_runs=sum(r.batting.hr for r in records),
    )


def build_season_summary(
    records: Iterable[PlayerSeasonRecord],
    year: int,
    team_lookup: Optional[TeamLookupService] = None,
    last_updated: Optional[str] = None
) -> SeasonSummary:
    """
    Build the season roster listing.

    Args:
        records: Parsed player rows; rows from other years are ignored
        year: Season year
        team_lookup: Resolves team names to ids; names are used as ids without it
        last_updated: Export timestamp (defaults to now, UTC)

    Returns:
        SeasonSummary keyed by team id, teams in first-seen order
    """
    lookup = team_lookup or TeamLookupService()

    by_team: Dict[str, List[PlayerSeasonRecord]] = {}
    for record in records:
        if record.year != year:
            continue
        by_team.setdefault(record.team, []).append(record)

    teams = {}
    for team_name, team_records in by_team.items():
        team_id = lookup.get_team_id(team_name)
        teams[team_id] = TeamSeasonSummary(
            team_id=team_id,
            team_name=team_name,
            stats=build_team_stats(team_records),
            players=[build_player_summary(r) for r in team_records],
        )

    if last_updated is None:
        last_updated = datetime.now(timezone.utc).isoformat()

    logger.info(f"Built {year} season summary with {len(teams)} teams")
    return SeasonSummary(year=year, last_updated=last_updated, teams=teams)


def extract_teams(summary: SeasonSummary) -> List[TeamListing]:
    """Team entries of a season, sorted by team name."""
    listings = [
        TeamListing(
            team_id=team.team_id,
            team_name=team.team_name,
            year=summary.year,
            stats=team.stats,
            player_count=team.player_count,
        )
        for team in summary.teams.values()
    ]
    return sorted(listings, key=lambda t: t.team_name)


def available_seasons(years: Iterable[int]) -> List[int]:
    """Distinct season years, newest first."""
    return sorted(set(years), reverse=True)
