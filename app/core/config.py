"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List, Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "LiftIQ workout tracker API."
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = ["LiftIQ"]
    AUTHORS_EMAILS: List[str] = ["N.A."]
    PROJECT_URL: str = "https://liftiq.app"

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = "postgres"
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_DBNAME: str = "liftiq"
    # Full SQLAlchemy URL; takes precedence over the fields above (e.g. sqlite for local runs)
    DATABASE_URL_OVERRIDE: Optional[str] = None

    # Identity provider forwards the authenticated subject in this header
    IDENTITY_HEADER: str = "X-User-Id"

    # Owner of the default exercise catalog
    SYSTEM_USER_EMAIL: str = "system@liftiq.app"
    SYSTEM_USER_EXTERNAL_ID: str = "system"

    # Dashboard
    DEFAULT_PERIOD: str = "4W"
    WEIGHT_UNIT: Literal["lbs", "kg"] = "lbs"
    RECENT_LIMIT: int = 10

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def DATABASE_URL(self) -> str:
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        return (f"postgresql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}"
                f":{self.DATABASE_PORT}"
                f"/{self.DATABASE_DBNAME}")


# Global settings instance
settings = Settings()
