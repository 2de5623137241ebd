"""Application settings."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings."""

    debug_mode: bool = False
    log_level: str = "INFO"
    mortgage_cost_cache: str = "in_memory"  # in_memory or none
    mortgage_cost_cache_max_entries: Optional[int] = 1024  # None for unbounded

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
    )


settings = Settings()
