"""
Team lookup

Resolves the team names written in season exports to team ids. Built once
from the team list and passed to whoever needs it.
"""
import logging
from typing import Dict, Iterable, List, Optional

from exceptions import TeamNotFoundError
from models.team import Team

logger = logging.getLogger(f'{__name__}.TeamLookupService')


class TeamLookupService:
    """Name and id index over the league's teams."""

    def __init__(self, teams: Optional[Iterable[Team]] = None):
        self._by_id: Dict[str, Team] = {}
        self._name_to_id: Dict[str, str] = {}
        for team in teams or []:
            self._by_id[team.id] = team
            self._name_to_id[team.name] = team.id
        logger.debug(f"Initialized team lookup with {len(self._by_id)} teams")

    @property
    def teams(self) -> List[Team]:
        return list(self._by_id.values())

    def get_team_id(self, team_name: str) -> str:
        """Team id for an export name; unknown names are their own id."""
        return self._name_to_id.get(team_name, team_name)

    def get_team(self, team_id: str) -> Optional[Team]:
        return self._by_id.get(team_id)

    def get_team_or_raise(self, team_id: str) -> Team:
        """
        Get a team by id.

        Raises:
            TeamNotFoundError: If no team has that id
        """
        team = self._by_id.get(team_id)
        if team is None:
            raise TeamNotFoundError(f"Team {team_id} not found")
        return team

    def __len__(self):
        return len(self._by_id)

    def __contains__(self, team_id):
        return team_id in self._by_id
