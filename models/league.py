"""
League context model

League-wide averages and the linear weights used by wOBA-family stats. The
weights and scale are per league-year inputs, not constants.
"""
from pydantic import Field

from models.base import LeagueBaseModel


class WOBAWeights(LeagueBaseModel):
    """Linear-weight coefficients keyed by batting event."""

    bb: float = Field(..., alias="BB", description="Walk weight")
    hbp: float = Field(..., alias="HBP", description="Hit-by-pitch weight")
    single: float = Field(..., alias="1B", description="Single weight")
    double: float = Field(..., alias="2B", description="Double weight")
    triple: float = Field(..., alias="3B", description="Triple weight")
    hr: float = Field(..., alias="HR", description="Home run weight")

    @classmethod
    def from_config(cls) -> 'WOBAWeights':
        """Build the configured default weights."""
        from config import get_config
        return cls.model_validate(get_config().woba_weights)


class LeagueStats(LeagueBaseModel):
    """League averages for one season."""

    year: int = Field(..., description="Season year")
    avg_batting_avg: float = Field(0.0, alias="avgBattingAvg", description="League batting average")
    avg_obp: float = Field(0.0, alias="avgOBP", description="League on-base percentage")
    avg_slg: float = Field(0.0, alias="avgSLG", description="League slugging percentage")
    avg_ops: float = Field(0.0, alias="avgOPS", description="League OPS")
    total_pa: int = Field(0, ge=0, alias="totalPA", description="League plate appearances")
    total_ab: int = Field(0, ge=0, alias="totalAB", description="League at bats")
    woba_scale: float = Field(..., alias="wOBAScale", description="wOBA to runs scale")
    woba_weights: WOBAWeights = Field(..., alias="wOBAWeights", description="Linear weights")

    def __str__(self):
        return f"{self.year} league: {self.avg_batting_avg:.3f}/{self.avg_obp:.3f}/{self.avg_slg:.3f}"
