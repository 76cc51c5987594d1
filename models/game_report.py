"""
Game report models

A single game's box score as read from a scoresheet export.
"""
from typing import Dict, List, Optional
from pydantic import Field

from models.base import LeagueBaseModel


class GameNumber(LeagueBaseModel):
    """Decoded game identifier ('2025201' -> season 2025, game 201)."""

    season: int = Field(..., ge=1, description="Season year")
    number: int = Field(..., ge=1, description="Sequential game number")


class PitcherLine(LeagueBaseModel):
    """One pitcher's line in a game."""

    number: str = Field('', description="Uniform number")
    name: str = Field(..., description="Pitcher name")
    ip: str = Field('0', description="Innings pitched, kept in source notation")
    np: int = Field(0, ge=0, description="Pitches thrown")
    k: int = Field(0, ge=0, description="Strikeouts")
    bb: int = Field(0, ge=0, description="Walks and hit batters")
    h: int = Field(0, ge=0, description="Hits allowed")
    hr: int = Field(0, ge=0, description="Home runs allowed")
    r: int = Field(0, ge=0, description="Runs allowed")
    # Scoresheets have no earned-run column; this mirrors runs allowed
    er: int = Field(0, ge=0, description="Earned runs (reported as runs allowed)")


class BatterLine(LeagueBaseModel):
    """One batter's line in a game."""

    number: str = Field('', description="Uniform number")
    name: str = Field(..., description="Batter name")
    pa: int = Field(0, ge=0, description="Plate appearances")
    ab: int = Field(0, ge=0, description="At bats (plate appearances minus walks)")
    r: int = Field(0, ge=0, description="Runs scored")
    h: int = Field(0, ge=0, description="Hits")
    rbi: int = Field(0, ge=0, description="Runs batted in")
    bb: int = Field(0, ge=0, description="Walks and hit-by-pitch")
    so: int = Field(0, ge=0, description="Strikeouts")
    sb: int = Field(0, ge=0, description="Stolen bases")


class TeamGameStats(LeagueBaseModel):
    """One side of a box score."""

    name: str = Field('', description="Team name")
    runs: int = Field(0, ge=0, description="Runs")
    hits: int = Field(0, ge=0, description="Hits")
    errors: int = Field(0, ge=0, description="Errors")
    batting_avg: Optional[float] = Field(None, description="Team batting average from the scoresheet")
    pitchers: List[PitcherLine] = Field(default_factory=list, description="Pitcher lines")
    batters: List[BatterLine] = Field(default_factory=list, description="Batter lines")

    @property
    def line_score(self) -> str:
        """R-H-E display."""
        return f"{self.runs}-{self.hits}-{self.errors}"


class InningScores(LeagueBaseModel):
    """Inning-by-inning runs; None marks an inning that was not batted."""

    home: List[Optional[int]] = Field(default_factory=list, description="Home runs per inning")
    away: List[Optional[int]] = Field(default_factory=list, description="Away runs per inning")


class GameReport(LeagueBaseModel):
    """A single game's box score."""

    game_number: str = Field(..., description="Game identifier")
    date: str = Field('', description="Game date with dashes (as written on the sheet)")
    venue: Optional[str] = Field(None, description="Ballpark")
    innings: InningScores = Field(default_factory=InningScores, description="Line score")
    home_team: TeamGameStats = Field(default_factory=TeamGameStats, description="Home side")
    away_team: TeamGameStats = Field(default_factory=TeamGameStats, description="Away side")

    @property
    def innings_played(self) -> int:
        """Number of innings with a recorded score for either side."""
        played = 0
        for index, (home, away) in enumerate(zip(self.innings.home, self.innings.away)):
            if home is not None or away is not None:
                played = index + 1
        return played

    @property
    def winner(self) -> Optional[TeamGameStats]:
        """Get the winning side, or None for a tie."""
        if self.home_team.runs > self.away_team.runs:
            return self.home_team
        if self.away_team.runs > self.home_team.runs:
            return self.away_team
        return None

    def __str__(self):
        return (
            f"{self.game_number}: {self.away_team.name} {self.away_team.runs} "
            f"@ {self.home_team.name} {self.home_team.runs}"
        )


class GameIndexEntry(LeagueBaseModel):
    """Schedule entry mapping a game to its scoresheet."""

    sheet_id: str = Field('', description="Scoresheet spreadsheet id; blank until the sheet exists")
    date: str = Field('', description="Scheduled date")
    home_team: str = Field('', description="Home team name")
    away_team: str = Field('', description="Away team name")
    venue: Optional[str] = Field(None, description="Ballpark")

    @property
    def has_report(self) -> bool:
        return bool(self.sheet_id)


class GameIndex(LeagueBaseModel):
    """Index of games keyed by game number."""

    games: Dict[str, GameIndexEntry] = Field(default_factory=dict, description="Entries keyed by game number")
