"""People business logic: create, fetch, search, count."""

import logging
import uuid

from people_api.core.constants import SEARCH_CANDIDATE_LIMIT, SEARCH_RESULT_LIMIT
from people_api.db.models import Person, uuid4_str
from people_api.schemas import PersonCreate, PersonCreatedResponse, PersonResponse
from people_api.services.conflict import resolve_persist_outcome
from people_api.services.errors import (
    InvariantViolationError,
    PersonNotFoundError,
    PersonRejectedError,
)
from people_api.services.people_store import PeopleStore
from people_api.services.person_validator import is_valid_person
from people_api.services.search_matcher import normalize_search_term, search_people

logger = logging.getLogger(__name__)


def _person_response(person: Person) -> PersonResponse:
    return PersonResponse(
        id=str(person.id),
        nickname=person.nickname,
        name=person.name,
        birth_date=person.birth_date,
        stack=list(person.stack) if person.stack is not None else None,
    )


def _entity_from_candidate(candidate: PersonCreate) -> Person:
    """Assign a fresh id and build the row. Only valid candidates ever get an id."""
    if not is_valid_person(candidate):
        raise InvariantViolationError("id requested for a candidate that failed validation")
    return Person(
        id=uuid4_str(),
        nickname=candidate.nickname,
        name=candidate.name,
        birth_date=candidate.birth_date,
        stack=list(candidate.stack) if candidate.stack is not None else None,
    )


def _parse_person_id(raw: str) -> str | None:
    try:
        return str(uuid.UUID(raw))
    except (TypeError, ValueError):
        return None


async def create_person(store: PeopleStore, body: PersonCreate) -> PersonCreatedResponse:
    """Validate, assign an id, insert. Raises PersonRejectedError for bad input or a taken nickname."""
    if not is_valid_person(body):
        logger.info("Rejected invalid person candidate (nickname=%r)", body.nickname)
        raise PersonRejectedError("invalid person")

    person = _entity_from_candidate(body)
    outcome = await store.add(person)
    try:
        resolve_persist_outcome(outcome)
    except PersonRejectedError:
        logger.info("Rejected person candidate with taken nickname %r", body.nickname)
        raise
    logger.debug("Created person %s", person.id)
    return PersonCreatedResponse(id=person.id)


async def get_person(store: PeopleStore, person_id: str) -> PersonResponse:
    parsed = _parse_person_id(person_id)
    person = await store.get(parsed) if parsed else None
    if not person:
        logger.debug("Person %s not found", person_id)
        raise PersonNotFoundError("Person not found")
    return _person_response(person)


async def find_people(store: PeopleStore, term: str | None) -> list[PersonResponse]:
    """Bounded fetch (at most 1000 rows), then in-memory match (at most 50 results)."""
    # Reject a blank term before touching storage.
    normalize_search_term(term)
    candidates = await store.fetch_search_candidates(SEARCH_CANDIDATE_LIMIT)
    matches = search_people(candidates, term, limit=SEARCH_RESULT_LIMIT)
    return [_person_response(p) for p in matches]


async def count_people(store: PeopleStore) -> int:
    return await store.count()


class PeopleService:
    """Facade for people operations."""

    @staticmethod
    async def create(store: PeopleStore, body: PersonCreate) -> PersonCreatedResponse:
        return await create_person(store, body)

    @staticmethod
    async def get(store: PeopleStore, person_id: str) -> PersonResponse:
        return await get_person(store, person_id)

    @staticmethod
    async def search(store: PeopleStore, term: str | None) -> list[PersonResponse]:
        return await find_people(store, term)

    @staticmethod
    async def count(store: PeopleStore) -> int:
        return await count_people(store)

    @staticmethod
    async def is_database_up(store: PeopleStore) -> bool:
        return await store.ping()


people_service = PeopleService()
