"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # PostgreSQL (users, interests)
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "aether_user"
    postgres_password: str = "password"
    postgres_db: str = "aether_db"

    # MongoDB (quiz results)
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "aether_docs"
    mongodb_timeout_ms: int = 5000

    # JWT Auth
    jwt_secret_key: str = "change-this-secret"
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 1440

    # Listings scoring below this are dropped by the ranker
    min_listing_score: int = 40

    # App
    debug: bool = True
    frontend_url: str = "*"

    @property
    def postgres_url(self) -> str:
        """Construct PostgreSQL connection URL"""
        return (
            f"postgresql://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
