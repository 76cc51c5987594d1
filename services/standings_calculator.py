"""
Standings engine

Computes points, win rate, games behind and rank for a league table.

Rules:
- Win = 3 points, draw = 1, loss = 0
- Win rate = wins / (wins + losses); draws count in neither
- Games behind = (leader wins - team wins + team losses - leader losses) / 2
"""
import logging
from typing import Iterable, List, Protocol

from constants import POINTS_WIN, POINTS_DRAW, POINTS_LOSS
from models.standings import TeamRecordRaw, TeamRecord

logger = logging.getLogger(f'{__name__}.StandingsCalculator')


class WonLost(Protocol):
    wins: int
    losses: int


def calculate_points(wins: int, draws: int, losses: int = 0) -> int:
    """Standings points for a record."""
    return wins * POINTS_WIN + draws * POINTS_DRAW + losses * POINTS_LOSS


def calculate_win_rate(wins: int, losses: int) -> float:
    """Wins over decisions, 0 when no decisions yet."""
    total_decisions = wins + losses
    if total_decisions == 0:
        return 0.0
    return wins / total_decisions


def calculate_games_behind(leader: WonLost, team: WonLost) -> float:
    """Half-game distance from the leader."""
    return (leader.wins - team.wins + team.losses - leader.losses) / 2


def calculate_standings(teams: Iterable[TeamRecordRaw]) -> List[TeamRecord]:
    """
    Rank teams by points, then win rate.

    The sort is stable, so teams level on both points and win rate keep
    their input order. That order is not a league tiebreaker and callers
    should not rely on it.

    Args:
        teams: Raw team records

    Returns:
        Standings rows ordered by rank; the leader has games_behind None.
        Others are floored at 0: a points leader with many draws can trail
        a rival on wins and losses, which would otherwise go negative.
    """
    raw_teams = list(teams)
    if not raw_teams:
        return []

    ordered = sorted(
        raw_teams,
        key=lambda t: (
            calculate_points(t.wins, t.draws, t.losses),
            calculate_win_rate(t.wins, t.losses),
        ),
        reverse=True,
    )
    # reverse=True keeps equal keys in input order
    leader = ordered[0]

    standings = []
    for index, team in enumerate(ordered):
        standings.append(TeamRecord(
            **team.model_dump(),
            rank=index + 1,
            games_played=team.wins + team.losses + team.draws,
            points=calculate_points(team.wins, team.draws, team.losses),
            win_rate=calculate_win_rate(team.wins, team.losses),
            games_behind=None if index == 0 else max(0.0, calculate_games_behind(leader, team)),
        ))

    logger.debug(f"Calculated standings for {len(standings)} teams, leader: {leader.team_name}")
    return standings
