"""
Team and season summary models

Team metadata plus the per-season team rosters that the site lists.
"""
from typing import Dict, List, Optional
from pydantic import Field

from models.base import LeagueBaseModel
from models.batting_stats import BattingStats, CalculatedStats
from models.pitching_stats import PitchingStats, PitchingCalculated


class TeamColors(LeagueBaseModel):
    """Team brand colors."""

    primary: str = Field(..., description="Primary color")
    secondary: str = Field(..., description="Secondary color")


class Team(LeagueBaseModel):
    """A club in the league."""

    id: str = Field(..., description="Team identifier")
    name: str = Field(..., description="Team name as written in season exports")
    code: str = Field('', description="Short team code")
    logo: str = Field('', description="Logo URL")
    founded: Optional[int] = Field(None, description="Founding year")
    description: Optional[str] = Field(None, description="Team blurb")
    colors: Optional[TeamColors] = Field(None, description="Brand colors")

    def __str__(self):
        return f"{self.code or self.id} - {self.name}"


class SeasonBattingLine(BattingStats, CalculatedStats):
    """Counting stats merged with their rate stats, as listed on team pages."""


class SeasonPitchingLine(PitchingStats, PitchingCalculated):
    """Pitching counting stats merged with their rate stats."""


class PlayerSummary(LeagueBaseModel):
    """A player row in a season's team listing."""

    id: str = Field(..., description="League player code")
    name: str = Field(..., description="Player name")
    number: str = Field('', description="Uniform number")
    photo: str = Field('', description="Award photo URL")
    team: str = Field('', description="Team name")
    season_stats: SeasonBattingLine = Field(..., description="Batting line with rate stats")
    pitching_stats: Optional[SeasonPitchingLine] = Field(None, description="Pitching line, if any")
    rankings: Dict[str, int] = Field(default_factory=dict, description="League rank per stat")


class TeamSeasonStats(LeagueBaseModel):
    """Team aggregate for a season listing."""

    total_players: int = Field(0, ge=0, description="Players on the roster")
    avg_batting_avg: float = Field(0.0, description="Mean of player batting averages")
    total_home_runs: int = Field(0, ge=0, description="Team home runs")


class TeamSeasonSummary(LeagueBaseModel):
    """One team's roster for a season."""

    team_id: str = Field(..., description="Team identifier")
    team_name: str = Field(..., description="Team name")
    stats: TeamSeasonStats = Field(default_factory=TeamSeasonStats, description="Team aggregate")
    players: List[PlayerSummary] = Field(default_factory=list, description="Roster")

    @property
    def player_count(self) -> int:
        """Number of listed players."""
        return len(self.players)


class SeasonSummary(LeagueBaseModel):
    """All team rosters for one season."""

    year: int = Field(..., description="Season year")
    last_updated: str = Field('', description="ISO timestamp of the export")
    teams: Dict[str, TeamSeasonSummary] = Field(default_factory=dict, description="Rosters keyed by team id")


class TeamListing(LeagueBaseModel):
    """A team entry in a season's team list."""

    team_id: str = Field(..., description="Team identifier")
    team_name: str = Field(..., description="Team name")
    year: int = Field(..., description="Season year")
    stats: TeamSeasonStats = Field(..., description="Team aggregate")
    player_count: int = Field(0, ge=0, description="Number of listed players")
