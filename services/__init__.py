"""
Business logic services for the league stats engine

Pure calculators and parsers, plus the loader for published data files.
"""

from .stats_calculator import calculate_all_stats, calculate_stats
from .standings_calculator import calculate_standings
from .season_parser import parse_season_rows, build_player
from .box_score_parser import parse_box_score
from .league_aggregator import calculate_league_stats
from .team_lookup import TeamLookupService
from .data_loader_service import DataLoaderService, data_loader_service

__all__ = [
    'calculate_all_stats', 'calculate_stats',
    'calculate_standings',
    'parse_season_rows', 'build_player',
    'parse_box_score',
    'calculate_league_stats',
    'TeamLookupService',
    'DataLoaderService', 'data_loader_service',
]
