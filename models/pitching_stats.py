"""
Pitching statistics models

Season pitching lines exist only for players who recorded innings; a player
who did not pitch has no PitchingStats at all.
"""
from typing import Optional
from pydantic import Field

from models.base import LeagueBaseModel


class PitchingStats(LeagueBaseModel):
    """Seasonal pitching counting stats."""

    games: int = Field(0, ge=0, description="Games pitched")
    ip: float = Field(0.0, description="Innings pitched, source notation (6.1 = 6 1/3)")
    bf: int = Field(0, ge=0, description="Batters faced")

    so: int = Field(0, ge=0, description="Strikeouts")
    bb: int = Field(0, ge=0, description="Walks and hit batters")
    h: int = Field(0, ge=0, description="Hits allowed")
    hr: int = Field(0, ge=0, description="Home runs allowed")
    r: int = Field(0, ge=0, description="Runs allowed")
    er: int = Field(0, ge=0, description="Earned runs allowed")

    # Decisions
    w: int = Field(0, ge=0, description="Wins")
    l: int = Field(0, ge=0, description="Losses")
    sv: int = Field(0, ge=0, description="Saves")
    hld: int = Field(0, ge=0, description="Holds")

    # Catcher throwing
    cs: int = Field(0, ge=0, description="Runners caught stealing")
    cs_attempts: int = Field(0, ge=0, description="Caught-stealing attempts")

    @property
    def win_percentage(self) -> float:
        """Calculate winning percentage."""
        total_decisions = self.w + self.l
        if total_decisions == 0:
            return 0.0
        return self.w / total_decisions

    def __str__(self):
        return f"{self.w}-{self.l}, {self.ip} IP, {self.so} K"


class PitchingCalculated(LeagueBaseModel):
    """Pitching rate stats derived when a season line is parsed."""

    era: float = Field(0.0, description="Earned run average")
    whip: float = Field(0.0, description="Walks + hits per inning pitched")
    fip: Optional[float] = Field(None, description="Fielding independent pitching (precomputed upstream)")
    k_per9: float = Field(0.0, description="Strikeouts per 9 innings")
    bb_per9: float = Field(0.0, description="Walks per 9 innings")
    h_per9: float = Field(0.0, description="Hits per 9 innings")
    cs_percentage: float = Field(0.0, description="Caught-stealing rate (0-1)")
