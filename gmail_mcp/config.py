"""Configuration module using Pydantic settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    OAuth client credentials (GOOGLE_CLIENT_ID and friends) are not read here;
    see ``gmail_mcp.gmail.credentials``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "WARNING"

    # OAuth consent flow
    oauth_callback_host: str = "localhost"
    oauth_callback_port: int = 0  # 0 picks any free port
    open_browser: bool = True


# Global settings instance
settings = Settings()
