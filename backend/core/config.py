"""
Application configuration.

Settings are read from environment variables (and an optional ``.env``
file) so that deployments can point the POS backend at a different database
or tune logging without code changes.
"""

from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """
    Application settings with environment variable support.
    """

    # Database Configuration
    database_url: str = "sqlite:///./cafe_pos.db"
    db_pool_size: int = 10
    db_max_overflow: int = 20
    # Create missing tables at startup; deployments run alembic instead
    auto_create_tables: bool = True

    # Environment Settings
    environment: str = "development"
    debug: bool = True
    log_level: str = "INFO"

    # Query logging
    log_sql_queries: bool = False
    slow_query_threshold_seconds: float = 1.0

    # Comma-separated list of allowed CORS origins
    cors_origins: str = "http://localhost:3000,http://localhost:5173"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log level: {v}")
        return level

    @property
    def cors_origin_list(self) -> List[str]:
        """Parse CORS origins from the comma-separated setting."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Returns:
        Settings instance with environment variables loaded
    """
    return Settings()


settings = get_settings()
