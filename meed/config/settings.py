"""Library settings with environment variable support."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from ..version import __version__


class Settings(BaseSettings):
    """Defaults for the bundled HTTP transport."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="MEED_",  # MEED_FETCH_TIMEOUT_SECONDS, MEED_USER_AGENT
        extra="ignore",
    )

    # Transport
    fetch_timeout_seconds: float = 30
    user_agent: str = f"meed/{__version__}"


settings = Settings()
