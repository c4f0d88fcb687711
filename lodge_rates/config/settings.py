"""Application settings and configuration management."""
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class ProviderSettings(BaseSettings):
    """Upstream booking-engine (rates provider) configuration."""

    base_url: str = "https://apac.littlehotelier.com/api/v1/properties"
    property_id: str = "kakapolodgedirect"  # Embedded in the URL path
    request_timeout: float = 10.0  # Seconds, applies to the single outbound call

    model_config = SettingsConfigDict(env_prefix="PROVIDER_")

    @property
    def rates_url(self) -> str:
        """Full rates endpoint URL for the configured property."""
        return f"{self.base_url.rstrip('/')}/{self.property_id}/rates.json"


class PropertySettings(BaseSettings):
    """Lodging property configuration."""

    timezone: str = "Pacific/Auckland"  # IANA zone used for "tonight"

    model_config = SettingsConfigDict(env_prefix="PROPERTY_")


class CorsSettings(BaseSettings):
    """Cross-origin policy applied to every response."""

    allow_origins: list[str] = ["*"]
    allow_methods: list[str] = ["GET", "POST", "OPTIONS"]
    allow_credentials: bool = False

    model_config = SettingsConfigDict(env_prefix="CORS_")


class ServerSettings(BaseSettings):
    """HTTP server configuration."""

    host: str = "0.0.0.0"
    port: int = 8080
    disconnect_poll_interval: float = 0.1  # Seconds between client disconnect checks

    model_config = SettingsConfigDict(env_prefix="SERVER_")


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "console"] = "json"

    model_config = SettingsConfigDict(env_prefix="LOG_")


class Settings(BaseSettings):
    """Main application settings."""

    environment: Literal["dev", "staging", "prod"] = "dev"
    debug: bool = False

    # Sub-settings
    provider: ProviderSettings = ProviderSettings()
    lodging: PropertySettings = PropertySettings()
    cors: CorsSettings = CorsSettings()
    server: ServerSettings = ServerSettings()
    logging: LoggingSettings = LoggingSettings()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
