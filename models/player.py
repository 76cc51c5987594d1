"""
Player models

A parsed season-export row (one player-year) and the career aggregate built
from all of a player's rows.
"""
from typing import Dict, List, Optional
from pydantic import Field

from models.base import LeagueBaseModel
from models.batting_stats import BattingStats, CalculatedStats, WeightedStats
from models.pitching_stats import PitchingStats, PitchingCalculated


class AdvancedStats(LeagueBaseModel):
    """Advanced values precomputed upstream."""

    rc: float = Field(0.0, description="Runs created")


class PlayerSeasonRecord(LeagueBaseModel):
    """One row of the season export: a player's stats for one year."""

    id: str = Field(..., description="Player code + year")
    code: str = Field(..., description="League player code")
    year: int = Field(0, ge=0, description="Season year")
    team: str = Field('', description="Team name")
    number: str = Field('', description="Uniform number")
    name: str = Field('', description="Player name")
    photo: str = Field('', description="Award photo URL")

    batting: BattingStats = Field(default_factory=BattingStats, description="Batting line")
    pitching: Optional[PitchingStats] = Field(None, description="Pitching line, absent if no innings")
    pitching_calculated: Optional[PitchingCalculated] = Field(None, description="Pitching rate stats")
    advanced: AdvancedStats = Field(default_factory=AdvancedStats, description="Upstream advanced stats")
    rankings: Dict[str, int] = Field(default_factory=dict, description="League rank per stat (0 = unranked)")

    @property
    def has_pitching_data(self) -> bool:
        """True when the player recorded innings this season."""
        return self.pitching is not None

    def __str__(self):
        return f"{self.name} ({self.team}, {self.year})"


class PlayerSeason(LeagueBaseModel):
    """A season entry on a player's career page."""

    year: int = Field(..., description="Season year")
    team: str = Field('', description="Team name")
    number: str = Field('', description="Uniform number")
    batting: BattingStats = Field(default_factory=BattingStats, description="Batting line")
    calculated: Optional[CalculatedStats] = Field(None, description="Rate stats")
    weighted: Optional[WeightedStats] = Field(None, description="League-context stats")
    pitching: Optional[PitchingStats] = Field(None, description="Pitching line")
    pitching_calculated: Optional[PitchingCalculated] = Field(None, description="Pitching rate stats")
    rankings: Dict[str, int] = Field(default_factory=dict, description="League rank per stat")


class Career(LeagueBaseModel):
    """Career summary."""

    debut: int = Field(..., description="First season year")
    teams: List[str] = Field(default_factory=list, description="Distinct teams, first-seen order")
    total_seasons: int = Field(0, ge=0, description="Number of seasons")


class Player(LeagueBaseModel):
    """A player's full career record."""

    id: str = Field(..., description="League player code")
    code: str = Field(..., description="League player code")
    name: str = Field(..., description="Player name")
    photo: str = Field('', description="Award photo URL")
    career: Career = Field(..., description="Career summary")
    seasons: List[PlayerSeason] = Field(default_factory=list, description="Seasons, newest first")

    @property
    def latest_season(self) -> Optional[PlayerSeason]:
        """Most recent season, if any."""
        return self.seasons[0] if self.seasons else None

    def __str__(self):
        return f"{self.name} ({self.code})"
