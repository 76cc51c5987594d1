"""
Data loader service

Loads the static league data files (season summaries, league context,
player careers, teams) and builds game reports from scoresheet exports.
"""
import logging
from typing import List, Optional

from api.client import DataClient, get_global_client
from config import get_config
from exceptions import APIException, GameNotFoundError, SheetsException
from models.game_report import GameIndex, GameReport
from models.league import LeagueStats
from models.player import Player
from models.team import PlayerSummary, SeasonSummary, Team, TeamSeasonSummary
from services.box_score_parser import parse_box_score
from utils.logging import get_contextual_logger, set_log_context

logger = logging.getLogger(f'{__name__}.DataLoaderService')


def _failure_reason(error: APIException) -> str:
    return str(error.status) if error.status is not None else str(error)


class DataLoaderService:
    """
    Loader for league data.

    Features:
    - Typed models from the static JSON files
    - Descriptive load errors naming what failed and the HTTP status
    - Game reports fetched from the scoresheet named in the game index
    """

    def __init__(self, client: Optional[DataClient] = None):
        """
        Initialize data loader.

        Args:
            client: Optional data client override (uses global client by default)
        """
        self._client = client
        self._cached_client: Optional[DataClient] = None
        self.game_logger = get_contextual_logger(f'{__name__}.GameReports')
        logger.debug("DataLoaderService initialized")

    async def get_client(self) -> DataClient:
        """Get data client instance (cached after first access)."""
        if self._client:
            return self._client

        if self._cached_client is None:
            self._cached_client = await get_global_client()

        return self._cached_client

    async def _load_json(self, path: str, description: str):
        client = await self.get_client()
        try:
            return await client.get_json(path)
        except APIException as e:
            logger.error(f"Failed to load {description} from {path}: {e}")
            raise APIException(f"Failed to load {description}: {_failure_reason(e)}", status=e.status) from e

    async def load_season_summary(self, year: int) -> SeasonSummary:
        """
        Load a season's team rosters.

        Raises:
            APIException: If the summary file cannot be loaded
        """
        data = await self._load_json(f"seasons/{year}_summary.json", f"season {year}")
        return SeasonSummary.from_api_data(data)

    async def load_player_detail(self, player_code: str) -> Player:
        """
        Load a player's career record.

        Raises:
            APIException: If the player file cannot be loaded
        """
        data = await self._load_json(f"players/{player_code}.json", f"player {player_code}")
        return Player.from_api_data(data)

    async def load_teams(self) -> List[Team]:
        """
        Load the team list.

        Raises:
            APIException: If the team file cannot be loaded
        """
        data = await self._load_json("teams.json", "teams")
        teams = [Team.from_api_data(item) for item in data.get('teams', [])]
        logger.debug(f"Loaded {len(teams)} teams")
        return teams

    async def load_league_stats(self, year: int) -> LeagueStats:
        """
        Load a season's league context.

        Raises:
            APIException: If the league file cannot be loaded
        """
        data = await self._load_json(f"seasons/{year}_league.json", f"league stats for {year}")
        return LeagueStats.from_api_data(data)

    async def get_team_players(self, year: int, team_id: str) -> Optional[TeamSeasonSummary]:
        """A team's season roster, or None if the team did not play that season."""
        summary = await self.load_season_summary(year)
        return summary.teams.get(team_id)

    async def get_players_by_team(self, year: int, team_id: str) -> List[PlayerSummary]:
        """A team's season players; empty if the team did not play that season."""
        team = await self.get_team_players(year, team_id)
        if team is None:
            return []
        return list(team.players)

    async def load_game_index(self) -> GameIndex:
        """
        Load the game report index.

        Raises:
            APIException: If the index cannot be loaded
        """
        data = await self._load_json("game-reports/index.json", "game index")
        return GameIndex.from_api_data(data) if data else GameIndex()

    async def fetch_scoresheet(self, sheet_id: str) -> str:
        """
        Fetch a scoresheet's CSV export.

        Raises:
            SheetsException: If the export cannot be fetched
        """
        client = await self.get_client()
        url = get_config().get_sheet_csv_url(sheet_id)
        try:
            return await client.get_text(url)
        except APIException as e:
            logger.error(f"Failed to fetch scoresheet {sheet_id}: {e}")
            raise SheetsException(f"Failed to fetch scoresheet {sheet_id}: {_failure_reason(e)}") from e

    async def get_game_report(self, game_number: str) -> GameReport:
        """
        Build the box score for a game.

        Args:
            game_number: Game identifier as listed in the index

        Returns:
            Parsed GameReport with the indexed venue

        Raises:
            GameNotFoundError: If the game is not indexed or has no scoresheet yet
            APIException: If the index cannot be loaded
            SheetsException: If the scoresheet cannot be fetched
        """
        set_log_context(game_number=game_number)
        trace_id = self.game_logger.start_operation("get_game_report")
        try:
            index = await self.load_game_index()
            entry = index.games.get(game_number)
            if entry is None:
                raise GameNotFoundError(f"Game {game_number} not found")
            if not entry.has_report:
                raise GameNotFoundError(f"Game {game_number} has no report yet")

            text = await self.fetch_scoresheet(entry.sheet_id)
            report = parse_box_score(text, game_number, entry.venue)
            self.game_logger.info(f"Loaded game report {report}")
        except GameNotFoundError as e:
            self.game_logger.warning(f"Game report {game_number} unavailable: {e}")
            self.game_logger.end_operation(trace_id, "failed")
            raise
        except (APIException, SheetsException) as e:
            self.game_logger.error(f"Failed to load game report {game_number}", error=e)
            self.game_logger.end_operation(trace_id, "failed")
            raise

        self.game_logger.end_operation(trace_id)
        return report


# Global service instance
data_loader_service = DataLoaderService()
