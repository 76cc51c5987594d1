"""
Custom exceptions for the league stats engine

The parsing and formula layers never raise for bad spreadsheet data; these
exceptions belong to the data loaders and to structurally impossible calls.
"""
from typing import Optional


class LeagueStatsException(Exception):
    """Base exception for all league stats errors."""
    pass


class APIException(LeagueStatsException):
    """Exception for data provider (HTTP) errors."""

    def __init__(self, message: str = "", status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class SheetsException(LeagueStatsException):
    """Exception for scoresheet export errors."""
    pass


class PlayerNotFoundError(LeagueStatsException):
    """Raised when a requested player cannot be found."""
    pass


class TeamNotFoundError(LeagueStatsException):
    """Raised when a requested team cannot be found."""
    pass


class GameNotFoundError(LeagueStatsException):
    """Raised when a game is missing from the report index or has no scoresheet."""
    pass


class ValidationException(LeagueStatsException):
    """Exception for data validation errors."""
    pass


class ConfigurationException(LeagueStatsException):
    """Exception for configuration-related errors."""
    pass
