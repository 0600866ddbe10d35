from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from civic_blueprint.core.version import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
    )

    PORT: int = 8000
    APP_NAME: str = "Civic Blueprint"
    APP_ENV: Literal["development", "production", "test"] = "production"
    LOG_LEVEL: str = "INFO"

    # Optional JSON registry overriding the bundled values/axes data
    SPEC_PATH: str | None = None
    RANDOMIZE_VIGNETTES: bool = True

    # Remote re-scoring (booster completion)
    REMOTE_SCORING_URL: str | None = None
    REMOTE_SCORING_TIMEOUT: float = 10.0
    REMOTE_SCORING_MAX_RETRIES: int = 3


settings = Settings()

APP_VERSION = __version__
