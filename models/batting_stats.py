"""
Batting statistics models

Counting stats for a player-season plus the rate and weighted stats derived
from them.
"""
from typing import Optional
from pydantic import Field

from models.base import LeagueBaseModel


class BattingStats(LeagueBaseModel):
    """Seasonal batting counting stats."""

    games: int = Field(0, ge=0, description="Games played")
    pa: int = Field(0, ge=0, description="Plate appearances")
    ab: int = Field(0, ge=0, description="At bats")

    # Hitting results
    hits: int = Field(0, ge=0, description="Hits")
    singles: int = Field(0, ge=0, description="Singles")
    doubles: int = Field(0, ge=0, description="Doubles")
    triples: int = Field(0, ge=0, description="Triples")
    hr: int = Field(0, ge=0, description="Home runs")
    rbi: int = Field(0, ge=0, description="Runs batted in")
    runs: int = Field(0, ge=0, description="Runs scored")

    # Plate discipline
    bb: int = Field(0, ge=0, description="Walks and hit-by-pitch")
    so: int = Field(0, ge=0, description="Strikeouts")

    sb: int = Field(0, ge=0, description="Stolen bases")
    sf: int = Field(0, ge=0, description="Sacrifice flies")
    total_bases: int = Field(0, ge=0, description="Total bases")

    @property
    def extra_base_hits(self) -> int:
        """Doubles, triples and home runs."""
        return self.doubles + self.triples + self.hr

    def __str__(self):
        return f"{self.hits}-for-{self.ab}, {self.hr} HR, {self.rbi} RBI"


class CalculatedStats(LeagueBaseModel):
    """Rate stats derived purely from BattingStats."""

    avg: float = Field(0.0, description="Batting average")
    obp: float = Field(0.0, description="On-base percentage")
    slg: float = Field(0.0, description="Slugging percentage")
    ops: float = Field(0.0, description="On-base plus slugging")
    iso: float = Field(0.0, description="Isolated power")
    babip: float = Field(0.0, description="Batting average on balls in play")
    k_pct: float = Field(0.0, description="Strikeout rate (0-100)")
    bb_pct: float = Field(0.0, description="Walk rate (0-100)")

    def __str__(self):
        return f"{self.avg:.3f}/{self.obp:.3f}/{self.slg:.3f}"


class WeightedStats(LeagueBaseModel):
    """
    League-context stats.

    None means there was no league context or the input was degenerate; it
    is never a stand-in for zero.
    """

    woba: Optional[float] = Field(None, alias="wOBA", description="Weighted on-base average")
    wrc: Optional[float] = Field(None, alias="wRC", description="Weighted runs created")
    wrc_plus: Optional[float] = Field(None, alias="wRCPlus", description="League-adjusted wRC")
    ops_plus: Optional[float] = Field(None, alias="opsPlus", description="League-adjusted OPS")

    @property
    def is_empty(self) -> bool:
        """True when no weighted stat could be computed."""
        return all(v is None for v in (self.woba, self.wrc, self.wrc_plus, self.ops_plus))


class StatsBundle(LeagueBaseModel):
    """Result of calculating every derived stat for one batting line."""

    calculated: CalculatedStats
    weighted: WeightedStats
