import os

# Settings are read at import time; keep tests off any real Postgres.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from types import SimpleNamespace

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from people_api.db import Base, build_engine
from people_api.dependencies import get_db
from people_api.main import create_app


def make_person(nickname="joao33", name="Joao", birth_date="1990-01-01", stack=None):
    return SimpleNamespace(nickname=nickname, name=name, birth_date=birth_date, stack=stack)


@pytest.fixture
def valid_payload():
    return {
        "nickname": "josé",
        "name": "José Roberto",
        "birth_date": "2000-10-01",
        "stack": ["C#", "Node", "Oracle"],
    }


@pytest_asyncio.fixture
async def session_factory(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'people.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    await engine.dispose()


@pytest.fixture
def app(session_factory):
    application = create_app()

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    application.dependency_overrides[get_db] = override_get_db
    return application


@pytest_asyncio.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
