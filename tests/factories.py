"""
Test Factories for the league stats engine

Provides factory functions to create test instances of models with sensible defaults.
This eliminates the need for ad-hoc fixture creation and makes tests resilient
to model changes.
"""
from typing import Dict, Optional

from constants import SeasonColumns as C
from models.batting_stats import BattingStats
from models.league import LeagueStats, WOBAWeights
from models.player import PlayerSeasonRecord
from models.standings import TeamRecordRaw
from models.team import Team


class BattingStatsFactory:
    """Factory for creating BattingStats test instances."""

    @staticmethod
    def create(**kwargs) -> BattingStats:
        """Create a BattingStats instance with sensible defaults."""
        defaults = {
            "games": 10,
            "pa": 50,
            "ab": 40,
            "hits": 15,
            "singles": 10,
            "doubles": 3,
            "triples": 1,
            "hr": 1,
            "rbi": 8,
            "runs": 9,
            "bb": 8,
            "so": 6,
            "sb": 2,
            "sf": 2,
            "total_bases": 22,
        }
        defaults.update(kwargs)
        return BattingStats(**defaults)

    @staticmethod
    def empty() -> BattingStats:
        """A player with no plate appearances."""
        return BattingStats()


class LeagueStatsFactory:
    """Factory for creating LeagueStats test instances."""

    @staticmethod
    def weights(**kwargs) -> WOBAWeights:
        defaults = {"bb": 0.69, "hbp": 0.72, "single": 0.88, "double": 1.24, "triple": 1.56, "hr": 1.95}
        defaults.update(kwargs)
        return WOBAWeights(**defaults)

    @staticmethod
    def create(year: int = 2025, **kwargs) -> LeagueStats:
        """Create a LeagueStats instance with sensible defaults."""
        defaults = {
            "year": year,
            "avg_batting_avg": 0.280,
            "avg_obp": 0.350,
            "avg_slg": 0.400,
            "avg_ops": 0.750,
            "total_pa": 5000,
            "total_ab": 4400,
            "woba_scale": 1.20,
            "woba_weights": LeagueStatsFactory.weights(),
        }
        defaults.update(kwargs)
        return LeagueStats(**defaults)


class TeamRecordFactory:
    """Factory for creating raw standings records."""

    @staticmethod
    def create(team_id: str = "team-a", team_name: Optional[str] = None, wins: int = 0,
               losses: int = 0, draws: int = 0, **kwargs) -> TeamRecordRaw:
        defaults = {
            "team_id": team_id,
            "team_name": team_name or team_id.upper(),
            "wins": wins,
            "losses": losses,
            "draws": draws,
            "runs_allowed": 5.0,
            "runs_scored": 6.0,
        }
        defaults.update(kwargs)
        return TeamRecordRaw(**defaults)


class TeamFactory:
    """Factory for creating Team test instances."""

    @staticmethod
    def create(id: str = "yongchun-tb", name: str = "永春TB", **kwargs) -> Team:
        defaults = {"id": id, "name": name, "code": "YCT", "logo": ""}
        defaults.update(kwargs)
        return Team(**defaults)


class SeasonRowFactory:
    """Factory for labeled season-export rows (raw cell text)."""

    @staticmethod
    def create(code: str = "P001", year: str = "2025", name: str = "王小明",
               team: str = "永春TB", **kwargs) -> Dict[str, str]:
        row = {
            C.CODE: code,
            C.YEAR: year,
            C.TEAM: team,
            C.NUMBER: "7",
            C.NAME: name,
            C.PHOTO: "",
            C.GAMES: "10",
            C.PA: "50",
            C.AB: "40",
            C.HITS: "15",
            C.SINGLES: "10",
            C.DOUBLES: "3",
            C.TRIPLES: "1",
            C.HR: "1",
            C.RBI: "8",
            C.RUNS: "9",
            C.WALKS: "8",
            C.SO: "6",
            C.SB: "2",
            C.SF: "2",
            C.TOTAL_BASES: "22",
            C.IP: "",
            C.RC: "9.5",
        }
        row.update(kwargs)
        return row

    @staticmethod
    def pitcher(**kwargs) -> Dict[str, str]:
        """A row for a player who also pitched."""
        pitching = {
            C.IP: "20",
            C.BF: "90",
            C.PITCHING_SO: "25",
            C.HITS_ALLOWED: "18",
            C.HR_ALLOWED: "2",
            C.RUNS_ALLOWED: "10",
            C.EARNED_RUNS: "8",
            C.PITCHING_GAMES: "5",
            C.WINS: "3",
            C.LOSSES: "1",
            C.SAVES: "0",
            C.HOLDS: "1",
            C.CAUGHT_STEALING: "2",
            C.CAUGHT_STEALING_FAILED: "6",
            C.FIP: "3.85",
        }
        pitching.update(kwargs)
        return SeasonRowFactory.create(**pitching)


class PlayerSeasonRecordFactory:
    """Factory for parsed season records."""

    @staticmethod
    def create(code: str = "P001", year: int = 2025, name: str = "王小明",
               team: str = "永春TB", batting: Optional[BattingStats] = None, **kwargs) -> PlayerSeasonRecord:
        defaults = {
            "id": f"{code}{year}",
            "code": code,
            "year": year,
            "team": team,
            "number": "7",
            "name": name,
            "batting": batting or BattingStatsFactory.create(),
        }
        defaults.update(kwargs)
        return PlayerSeasonRecord(**defaults)


# Scoresheet export of one game: 永春TB (home) 16, 台大經濟OB (away) 4
BOX_SCORE_CSV = '\n'.join([
    '"","","","","","","","","","","","","","2026/1/10","","","",""',
    '"","","","","1","2","3","4","5","6","","7","8","9","","","",""',
    '"","","","","6","1","0","1","6","0","","2","","","16","18","2",""',
    '"","","","","2","0","0","0","0","2","","0","","","4","8","7",""',
    '"","永春TB","","","","","","","","","","台大經濟OB","","","","","",""',
    '"46","楊鈞睿","7","32","7","2","8","0","4","","87","游承軒","2","17","1","4","6","0","7"',
    '"","","","","","","","","","","102","許兆銘","4","26","4","1","10","0","7"',
    '"","","","","","","","","","","","","","","","","",""',
    '"","TOTAL","7","32","7","2","8","0","4","","","TOTAL","7","50","5","5","18","0","16"',
    '"","永春TB","","","","","","","","0.315","","台大經濟OB","","","","","",""',
    '"39","林倫齊","6","3","0","1","1","2","0","","31","陳一德","4","2","0","0","0","1","0"',
    '"79","呂柏融","6","2","0","0","0","1","0","","52","蔡竣宇","4","2","0","0","0","1","0"',
    '"51","黃上維","6","2","1","0","2","1","0","","39","莊炘睿","4","0","1","0","0","0","0"',
])
