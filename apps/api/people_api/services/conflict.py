"""Persistence outcomes and their translation into the API's error surface."""

from enum import Enum
from typing import Any

from people_api.services.errors import PersonRejectedError, StorageUnavailableError

UNIQUE_VIOLATION_SQLSTATE = "23505"
NICKNAME_CONSTRAINT_MARKERS = ("ix_people_nickname", "people.nickname", "(nickname)")


class PersistOutcome(str, Enum):
    CREATED = "created"
    NICKNAME_CONFLICT = "nickname_conflict"
    STORAGE_FAILURE = "storage_failure"


def _sqlstate(exc: BaseException) -> str | None:
    """SQLSTATE from a SQLAlchemy DBAPIError or a raw driver error (asyncpg/psycopg2 spell it differently)."""
    for candidate in (getattr(exc, "orig", None), exc):
        if candidate is None:
            continue
        code = getattr(candidate, "sqlstate", None) or getattr(candidate, "pgcode", None)
        if code:
            return str(code)
    return None


def _constraint_name(exc: BaseException) -> str | None:
    for candidate in (getattr(exc, "orig", None), getattr(getattr(exc, "orig", None), "__cause__", None), exc):
        name = getattr(candidate, "constraint_name", None)
        if name:
            return str(name)
    return None


def classify_integrity_error(exc: Any) -> PersistOutcome:
    """Return NICKNAME_CONFLICT only for a unique violation on nickname; everything else is a storage failure.

    PostgreSQL reports SQLSTATE 23505 with the index name; SQLite only says
    ``UNIQUE constraint failed: people.nickname``.
    """
    message = str(getattr(exc, "orig", None) or exc).lower()
    is_unique = _sqlstate(exc) == UNIQUE_VIOLATION_SQLSTATE or "unique constraint" in message
    if not is_unique:
        return PersistOutcome.STORAGE_FAILURE

    constraint = (_constraint_name(exc) or "").lower()
    if constraint == "ix_people_nickname" or any(marker in message for marker in NICKNAME_CONSTRAINT_MARKERS):
        return PersistOutcome.NICKNAME_CONFLICT
    return PersistOutcome.STORAGE_FAILURE


def resolve_persist_outcome(outcome: PersistOutcome) -> None:
    """Raise the caller-facing error for a failed insert; return quietly on success.

    A nickname conflict is the same ``PersonRejectedError`` the validator path
    raises, so callers cannot tell a taken nickname from a malformed record.
    """
    if outcome is PersistOutcome.CREATED:
        return
    if outcome is PersistOutcome.NICKNAME_CONFLICT:
        raise PersonRejectedError("nickname already taken")
    raise StorageUnavailableError("storage unavailable")
