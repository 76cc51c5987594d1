"""
Data models for the league stats engine

Immutable Pydantic records for season exports, derived stats, standings and
box scores.
"""

from models.base import LeagueBaseModel
from models.batting_stats import BattingStats, CalculatedStats, WeightedStats, StatsBundle
from models.pitching_stats import PitchingStats, PitchingCalculated
from models.league import LeagueStats, WOBAWeights
from models.standings import TeamRecordRaw, TeamRecord
from models.game_report import GameReport, GameNumber
from models.player import Player, PlayerSeasonRecord
from models.team import Team, SeasonSummary

__all__ = [
    'LeagueBaseModel',
    'BattingStats',
    'CalculatedStats',
    'WeightedStats',
    'StatsBundle',
    'PitchingStats',
    'PitchingCalculated',
    'LeagueStats',
    'WOBAWeights',
    'TeamRecordRaw',
    'TeamRecord',
    'GameReport',
    'GameNumber',
    'Player',
    'PlayerSeasonRecord',
    'Team',
    'SeasonSummary',
]
