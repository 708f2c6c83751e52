"""Configuration settings for the emergency response simulation."""

from functools import lru_cache

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Simulation settings loaded from environment variables or a ``.env`` file.

    Gameplay rules (round count, batch size, points) are fixed and live in the
    domain layer. Only pacing, randomness and logging are configurable here.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore")

    # Application settings
    app_name: str = Field(default="Emergency Response Simulation", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")
    environment: str = Field(default="development", description="Environment (development, staging, production)")

    # Logging settings
    log_level: str = Field(default="WARNING", description="Logging level")
    log_format: str = Field(default="text", description="Log format (json or text)")
    log_file: str | None = Field(default=None, description="Log file path")

    # Pacing settings
    incident_pause_seconds: float = Field(default=0.5, ge=0.0, description="Pause between incidents of a round")
    round_pause_seconds: float = Field(default=1.0, ge=0.0, description="Pause after each round")

    # Simulation settings
    random_seed: int | None = Field(default=None, description="Seed for the random incident generator")
    wait_for_exit: bool = Field(default=True, description="Wait for a line of input before exiting")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed = ["development", "dev", "local", "staging", "stage", "production", "prod"]
        if v.lower() not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format."""
        if v.lower() not in ("json", "text"):
            raise ValueError("Log format must be 'json' or 'text'")
        return v.lower()

    @computed_field
    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment in ("development", "dev", "local")

    @computed_field
    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment in ("production", "prod")


@lru_cache
def get_settings() -> Settings:
    """Return the cached application settings."""
    return Settings()
