from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from people_api.db.session import async_session
from people_api.services.people_store import PeopleStore


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_people_store(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PeopleStore:
    """Storage handle scoped to this request's session."""
    return PeopleStore(db)
