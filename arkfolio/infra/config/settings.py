"""
Application configuration settings.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

DEFAULT_SEED_PATH = str(Path(__file__).resolve().parents[2] / "data" / "seeds")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=[".env", "../.env"], case_sensitive=False, extra="ignore"
    )

    # Application
    app_name: str = Field("Arkfolio API", alias="APP_NAME")
    version: str = Field("1.0.0", alias="APP_VERSION")

    # Environment
    environment: str = Field("development", alias="ENVIRONMENT")
    debug: bool = Field(False, alias="DEBUG")

    # Server
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(8000, alias="PORT")

    # Database
    database_url: str = Field("sqlite+aiosqlite:///./arkfolio.db", alias="DATABASE_URL")
    debug_sql: bool = Field(False, alias="DATABASE_ECHO")

    # Seed data (themes manifest, theme CSS files, carousel items)
    seed_on_startup: bool = Field(True, alias="SEED_ON_STARTUP")
    seed_path: str = Field(DEFAULT_SEED_PATH, alias="SEED_PATH")

    # CORS
    cors_origins: str = Field("*", alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(True, alias="CORS_ALLOW_CREDENTIALS")

    # Logging
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_format: str = Field("json", alias="LOG_FORMAT")

    # Client side (theme pipeline / carousel)
    api_base_url: str = Field("http://localhost:8000/api/v1", alias="API_BASE_URL")
    http_timeout_seconds: float = Field(10.0, alias="HTTP_TIMEOUT_SECONDS")
    preferences_path: str = Field(
        str(Path.home() / ".arkfolio" / "preferences.json"), alias="PREFERENCES_PATH"
    )
    carousel_autoplay_interval_ms: int = Field(
        5000, ge=0, alias="CAROUSEL_AUTOPLAY_INTERVAL_MS"
    )
    default_cyber_theme: str = Field("professional", alias="DEFAULT_CYBER_THEME")
    default_layout_theme: str = Field("architectural", alias="DEFAULT_LAYOUT_THEME")

    def get_cors_origins(self) -> list[str]:
        """Parse CORS origins from string."""
        if self.cors_origins == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",")]

    def is_production(self) -> bool:
        return self.environment.lower() == "production"


_settings = None


def get_settings() -> Settings:
    """Get settings instance (useful for dependency injection)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
