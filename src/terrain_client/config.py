"""Runtime configuration for the terrain client."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="TERRAIN_CLIENT_", env_file=".env", extra="ignore")

    app_name: str = "terrain-client"
    log_level: str = "INFO"
    api_base_url: str = Field(
        default="http://127.0.0.1:8000",
        description="Base URL of the simulation backend.",
    )
    request_timeout_seconds: float | None = Field(
        default=None,
        description="Per-request timeout; unset means the client waits on the backend indefinitely.",
    )
    default_place: str = "Copenhagen, Denmark"


settings = Settings()
