"""Application configuration via pydantic-settings."""

from functools import lru_cache
from typing import Optional

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API Settings
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # CORS - comma-separated origins (env var: CORS_ORIGINS)
    cors_origins: str = "http://localhost:5173,http://127.0.0.1:5173"

    @computed_field
    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # Selection scoring weights
    selection_base_weight: float = 100.0
    selection_penalty_per_selection: float = 30.0
    selection_acceptance_bonus: float = 0.5
    selection_acceptance_threshold: float = 80.0

    # Fixed seed for reproducible tie-breaking (unset = fresh randomness per run)
    selection_seed: Optional[int] = None

    # Strength tier -> preferred player levels as JSON, e.g. {"1": [4, 5], "2": [2, 3, 4]}
    # (unset = built-in three-tier table)
    selection_strength_bands: Optional[dict[str, list[int]]] = None

    # Write scoring breakdowns to logs/selection/
    selection_diagnostics: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
