from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env from apps/api so it works regardless of CWD
_env_file = Path(__file__).resolve().parent.parent.parent / ".env"


def to_async_database_url(url: str) -> str:
    """Rewrite postgres:// and postgresql:// URLs to the asyncpg driver; leave others untouched."""
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+asyncpg://", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=_env_file, extra="ignore")

    project_name: str = "People API"
    api_version: str = "0.1.0"

    database_url: str = "postgresql://localhost/people"
    sql_echo: bool = False
    db_command_timeout: float = 30.0
    # Mirrors the old ensure-created fallback; production runs `alembic upgrade head`
    create_schema_on_startup: bool = False

    log_level: str = "INFO"

    # CORS (comma-separated origins; * allows all)
    cors_origins: str = "*"

    # Rate limiting (per client address; multi-instance needs Redis later)
    rate_limit_enabled: bool = True
    search_rate_limit: str = "600/minute"

    @property
    def async_database_url(self) -> str:
        return to_async_database_url(self.database_url)

    @property
    def cors_origins_list(self) -> list[str]:
        """Parsed CORS origins for middleware."""
        raw = self.cors_origins.strip()
        return ["*"] if not raw else [o.strip() for o in raw.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
