"""
Centralized configuration for the Users API.

All settings are loaded from environment variables (or a .env file) once at
startup. The resulting Settings object is passed explicitly to the
components that need it.
"""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Users API"
    app_version: str = "0.1.0"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    reload: bool = False

    # CORS settings (cross-origin requests are permitted unconditionally)
    cors_origins: list[str] = ["*"]
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Authentication
    require_auth: bool = True
    jwt_secret: str = ""
    jwt_audience: Optional[str] = None
    jwt_algorithms: list[str] = ["HS256", "HS384", "HS512"]

    # Database
    db_user: Optional[str] = None
    db_host: str = "localhost"
    db_name: Optional[str] = None
    db_password: Optional[str] = None
    db_port: int = 5432
    db_pool_min: int = 1
    db_pool_max: int = 10

    def database_kwargs(self) -> dict[str, object]:
        """Connection keyword arguments for psycopg2, omitting unset values."""
        params = {
            "user": self.db_user,
            "host": self.db_host,
            "dbname": self.db_name,
            "password": self.db_password,
            "port": self.db_port,
        }
        return {key: value for key, value in params.items() if value not in (None, "")}


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
