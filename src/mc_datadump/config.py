"""Runtime configuration for mc-datadump."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="MC_DATADUMP_", env_file=".env", extra="ignore")

    app_name: str = "mc-datadump"
    log_level: str = "WARNING"
    snapshot_path: str | None = Field(
        default=None,
        description="JSON registry export read when no snapshot argument is given.",
    )
    output_path: str | None = Field(
        default=None,
        description="File to write the generated tables to; stdout when unset.",
    )


settings = Settings()
