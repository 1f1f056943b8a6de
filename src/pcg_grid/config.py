"""Command-line configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``PCG_``-prefixed environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PCG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Generation defaults
    default_seed: int = 0
    default_size: int = 50
    default_preset: str = "island"

    # Logging
    log_level: str = "info"


settings = Settings()
