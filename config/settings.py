"""Configuration settings for the league statistics system."""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Season generation
    teams_per_division: int = 4
    players_per_team: int = 8
    season_rounds: int = 2  # Each pair of teams meets this many times
    season_seed: int | None = None  # Fixed seed replays the same season

    # Report settings
    top_teams_count: int = 3  # Teams listed under fewest loses
    min_goals: int = 5  # Threshold for the scorers list

    # Export
    export_csv: bool = True
    output_dir: str = "output"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "LEAGUE_"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
