import pytest
from sqlalchemy.exc import OperationalError

from people_api.db.models import Person, uuid4_str
from people_api.services.conflict import PersistOutcome
from people_api.services.errors import InvariantViolationError, StorageUnavailableError
from people_api.services.people_store import PeopleStore


def _row(nickname, stack=None):
    return Person(id=uuid4_str(), nickname=nickname, name=nickname.title(), birth_date="1990-01-01", stack=stack)


class BrokenSession:
    """Stands in for an AsyncSession whose connection is gone."""

    def __init__(self):
        self.rolled_back = False

    def add(self, _obj):
        pass

    async def commit(self):
        raise OperationalError("COMMIT", {}, ConnectionRefusedError("connection refused"))

    async def rollback(self):
        self.rolled_back = True

    async def execute(self, *_args, **_kwargs):
        raise OperationalError("SELECT", {}, ConnectionRefusedError("connection refused"))


@pytest.mark.asyncio
async def test_add_and_duplicate_nickname(session_factory):
    async with session_factory() as session:
        store = PeopleStore(session)
        assert await store.add(_row("ana")) is PersistOutcome.CREATED
        assert await store.add(_row("ana")) is PersistOutcome.NICKNAME_CONFLICT
        # session is usable again after the rollback
        assert await store.add(_row("beto")) is PersistOutcome.CREATED
        assert await store.count() == 2


@pytest.mark.asyncio
async def test_add_without_id_is_an_invariant_violation(session_factory):
    async with session_factory() as session:
        store = PeopleStore(session)
        with pytest.raises(InvariantViolationError):
            await store.add(Person(nickname="ana", name="Ana", birth_date="1990-01-01"))


@pytest.mark.asyncio
async def test_fetch_search_candidates_is_bounded(session_factory):
    async with session_factory() as session:
        store = PeopleStore(session)
        for i in range(5):
            await store.add(_row(f"dev{i}"))
        assert len(await store.fetch_search_candidates(limit=3)) == 3
        assert len(await store.fetch_search_candidates()) == 5


@pytest.mark.asyncio
async def test_stack_round_trips_including_null(session_factory):
    async with session_factory() as session:
        store = PeopleStore(session)
        with_stack = _row("withstack", stack=["Go", "Go", "C"])
        without_stack = _row("nostack")
        await store.add(with_stack)
        await store.add(without_stack)

    async with session_factory() as session:
        store = PeopleStore(session)
        assert (await store.get(with_stack.id)).stack == ["Go", "Go", "C"]
        assert (await store.get(without_stack.id)).stack is None
        assert await store.get(uuid4_str()) is None


@pytest.mark.asyncio
async def test_broken_storage_is_reported_not_rejected():
    session = BrokenSession()
    store = PeopleStore(session)

    assert await store.add(_row("ana")) is PersistOutcome.STORAGE_FAILURE
    assert session.rolled_back is True
    with pytest.raises(StorageUnavailableError):
        await store.count()
    with pytest.raises(StorageUnavailableError):
        await store.fetch_search_candidates()
    with pytest.raises(StorageUnavailableError):
        await store.get(uuid4_str())
    assert await store.ping() is False
