"""
Standings models

Raw won-lost-drawn records and the ranked standings rows computed from them.
"""
from typing import Optional
from pydantic import Field

from models.base import LeagueBaseModel


class TeamRecordRaw(LeagueBaseModel):
    """Team record as maintained by the league office."""

    team_id: str = Field(..., description="Team identifier")
    team_name: str = Field(..., description="Team display name")

    wins: int = Field(0, ge=0, description="Total wins")
    losses: int = Field(0, ge=0, description="Total losses")
    draws: int = Field(0, ge=0, description="Total draws")

    # Per-game averages, not totals
    runs_allowed: float = Field(0.0, description="Average runs allowed per game")
    runs_scored: float = Field(0.0, description="Average runs scored per game")

    @property
    def record(self) -> str:
        """Record as W-L-D string."""
        return f"{self.wins}-{self.losses}-{self.draws}"


class TeamRecord(TeamRecordRaw):
    """Team standings row with computed ranking fields."""

    rank: int = Field(..., ge=1, description="1-based standings position")
    games_played: int = Field(..., ge=0, description="Wins + losses + draws")
    points: int = Field(..., ge=0, description="3 per win, 1 per draw")
    win_rate: float = Field(..., description="Wins / (wins + losses), draws excluded")
    games_behind: Optional[float] = Field(None, description="Games behind the leader (None for the leader)")

    @property
    def is_leader(self) -> bool:
        """Check if this team leads the standings."""
        return self.rank == 1

    @property
    def games_behind_display(self) -> str:
        """Games behind display."""
        if self.games_behind is None:
            return "-"
        return f"{self.games_behind:.1f}"

    def __str__(self):
        return f"{self.rank}. {self.team_name} {self.record} ({self.points} pts)"
