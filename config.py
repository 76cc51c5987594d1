"""
Configuration management for the league stats engine
"""
from typing import Dict, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class LeagueConfig(BaseSettings):
    """Application configuration with environment variable support."""

    # Static data provider
    data_base_url: str = "http://localhost:3000/data"
    sheets_csv_url_template: str = "https://docs.google.com/spreadsheets/d/{sheet_id}/gviz/tq?tqx=out:csv"
    default_timeout: int = 10

    # League context defaults for weighted stats
    lg_woba: float = 0.340
    lg_runs_per_pa: float = 0.12
    woba_scale: float = 1.20
    woba_weight_bb: float = 0.69
    woba_weight_hbp: float = 0.72
    woba_weight_1b: float = 0.88
    woba_weight_2b: float = 1.24
    woba_weight_3b: float = 1.56
    woba_weight_hr: float = 1.95

    # Application settings
    log_level: str = "INFO"
    log_dir: str = "logs"
    environment: str = "development"
    testing: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"  # Ignore extra environment variables
    )

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in test mode."""
        return self.testing

    @property
    def woba_weights(self) -> Dict[str, float]:
        """Default linear weights keyed the way season files store them."""
        return {
            'BB': self.woba_weight_bb,
            'HBP': self.woba_weight_hbp,
            '1B': self.woba_weight_1b,
            '2B': self.woba_weight_2b,
            '3B': self.woba_weight_3b,
            'HR': self.woba_weight_hr,
        }

    def get_sheet_csv_url(self, sheet_id: str) -> str:
        """Build the CSV export URL for a scoresheet."""
        return self.sheets_csv_url_template.format(sheet_id=sheet_id)


# Global configuration instance - lazily initialized to avoid import-time errors
_config: Optional[LeagueConfig] = None

def get_config() -> LeagueConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = LeagueConfig()
    return _config
