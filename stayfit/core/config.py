"""Console configuration from environment variables."""

from functools import lru_cache
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment (and .env file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    debug: bool = False  # echo SQL
    log_level: str = "WARNING"

    # Database (local PostgreSQL)
    database_host: str = "localhost"
    database_port: int = 5432
    database_user: str = "postgres"
    database_password: str = ""  # Set in .env - never commit
    database_name: str = "StayFit"
    database_ssl_mode: str = "disable"

    # Pool
    database_pool_size: int = 5
    database_max_overflow: int = 10

    # Seeding: fixed seed makes a run reproducible on an empty database; None draws
    # from system entropy. Reruns redraw any email suffix that is already taken.
    seed: int | None = None

    def _build_db_url(self, scheme: str = "postgresql", ssl_query: str = "") -> str:
        user = quote_plus(self.database_user)
        password = quote_plus(self.database_password)
        url = (
            f"{scheme}://{user}:{password}@{self.database_host}:{self.database_port}"
            f"/{self.database_name}"
        )
        return f"{url}?{ssl_query}" if ssl_query else url

    @property
    def database_url(self) -> str:
        """Synchronous URL for Alembic and tooling."""
        return self._build_db_url(scheme="postgresql", ssl_query=f"sslmode={self.database_ssl_mode}")

    @property
    def async_database_url(self) -> str:
        """Async URL for the console (asyncpg driver)."""
        ssl_query = "ssl=require" if self.database_ssl_mode == "require" else ""
        return self._build_db_url(scheme="postgresql+asyncpg", ssl_query=ssl_query)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
