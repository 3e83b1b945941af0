"""Application configuration using Pydantic settings."""

import os
from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root directory (holds mazes/ and .env)
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, ".env"),
        env_file_encoding="utf-8",
        env_prefix="BOONPATH_",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Boonpath"
    app_version: str = "1.0.0"
    debug: bool = False

    # CORS - comma-separated list of allowed origins
    cors_origins: str = "http://localhost:3000,http://localhost:5173"

    # Rate limiting
    rate_limit_requests: int = 120  # requests per minute for search endpoints

    # Grid limits
    default_rows: int = 10
    default_cols: int = 15
    min_dimension: int = 3
    max_rows: int = 200
    max_cols: int = 200

    # Maze generation
    wall_density: float = 0.25
    generator_max_attempts: int = 1000

    # Bundled sample grids
    mazes_dir: Path = BASE_DIR / "mazes"

    @field_validator("wall_density")
    @classmethod
    def validate_wall_density(cls, v: float) -> float:
        """Wall density must leave room for a path."""
        if not 0 <= v < 1:
            raise ValueError("WALL_DENSITY must be in [0, 1)")
        return v

    @property
    def cors_origins_list(self) -> list[str]:
        """Get CORS origins as a list."""
        if self.debug:
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
