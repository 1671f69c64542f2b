from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base

from people_api.core.config import get_settings


def build_engine(database_url: str, echo: bool = False, command_timeout: float | None = None) -> AsyncEngine:
    """Create the async engine; asyncpg gets a per-statement timeout, other drivers use their defaults."""
    connect_args = {}
    if database_url.startswith("postgresql+asyncpg://") and command_timeout:
        connect_args["command_timeout"] = command_timeout
    return create_async_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


_settings = get_settings()

engine = build_engine(
    _settings.async_database_url,
    echo=_settings.sql_echo,
    command_timeout=_settings.db_command_timeout,
)

async_session = async_sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)
Base = declarative_base()
