"""Per-request storage handle for people.

Wraps one ``AsyncSession``. Driver exceptions stop here: writes come back as
a ``PersistOutcome``, read failures as ``StorageUnavailableError``.
"""

import logging

from sqlalchemy import func, select, text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from people_api.core.constants import SEARCH_CANDIDATE_LIMIT
from people_api.db.models import Person
from people_api.services.conflict import PersistOutcome, classify_integrity_error
from people_api.services.errors import InvariantViolationError, StorageUnavailableError

logger = logging.getLogger(__name__)

# Connection refused / reset surface from the driver as OSError before SQLAlchemy wraps them.
_STORAGE_ERRORS = (SQLAlchemyError, OSError)


class PeopleStore:
    def __init__(self, session: AsyncSession):
        self._session = session

    async def add(self, person: Person) -> PersistOutcome:
        """Insert and commit. The caller must have assigned ``person.id``."""
        if not person.id:
            raise InvariantViolationError("person must have an id before it is persisted")
        self._session.add(person)
        try:
            await self._session.commit()
        except IntegrityError as e:
            await self._safe_rollback()
            outcome = classify_integrity_error(e)
            if outcome is PersistOutcome.STORAGE_FAILURE:
                logger.exception("Insert of person %s failed on an unexpected constraint", person.id)
            return outcome
        except _STORAGE_ERRORS:
            logger.exception("Insert of person %s failed", person.id)
            await self._safe_rollback()
            return PersistOutcome.STORAGE_FAILURE
        return PersistOutcome.CREATED

    async def get(self, person_id: str) -> Person | None:
        try:
            result = await self._session.execute(select(Person).where(Person.id == person_id))
        except _STORAGE_ERRORS as e:
            logger.exception("Lookup of person %s failed", person_id)
            raise StorageUnavailableError("storage unavailable") from e
        return result.scalar_one_or_none()

    async def fetch_search_candidates(self, limit: int = SEARCH_CANDIDATE_LIMIT) -> list[Person]:
        """Load at most ``limit`` people for in-memory matching."""
        try:
            result = await self._session.execute(select(Person).limit(limit))
        except _STORAGE_ERRORS as e:
            logger.exception("Search candidate fetch failed")
            raise StorageUnavailableError("storage unavailable") from e
        return list(result.scalars().all())

    async def count(self) -> int:
        try:
            result = await self._session.execute(select(func.count()).select_from(Person))
        except _STORAGE_ERRORS as e:
            logger.exception("Person count failed")
            raise StorageUnavailableError("storage unavailable") from e
        return int(result.scalar_one())

    async def ping(self) -> bool:
        """True if the database answers a trivial query."""
        try:
            await self._session.execute(text("SELECT 1"))
        except _STORAGE_ERRORS:
            logger.warning("Database health check failed", exc_info=True)
            await self._safe_rollback()
            return False
        return True

    async def _safe_rollback(self) -> None:
        try:
            await self._session.rollback()
        except _STORAGE_ERRORS:
            logger.warning("Rollback after a failed statement also failed", exc_info=True)
