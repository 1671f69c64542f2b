import asyncio

import pytest

from people_api.db.models import Person, uuid4_str
from people_api.dependencies import get_people_store
from people_api.services.people_store import PeopleStore

from test_people_store import BrokenSession


@pytest.mark.asyncio
async def test_create_returns_location_and_id(client, valid_payload):
    r = await client.post("/pessoas", json=valid_payload)
    assert r.status_code == 201
    person_id = r.json()["id"]
    assert r.headers["location"] == f"/pessoas/{person_id}"


@pytest.mark.asyncio
async def test_created_record_round_trips(client, valid_payload):
    r = await client.post("/pessoas", json=valid_payload)
    location = r.headers["location"]

    fetched = await client.get(location)
    assert fetched.status_code == 200
    body = fetched.json()
    assert body.pop("id") == r.json()["id"]
    assert body == valid_payload


@pytest.mark.asyncio
async def test_absent_stack_round_trips_as_null(client):
    payload = {"nickname": "ana", "name": "Ana Barbosa", "birth_date": "1985-09-23"}
    r = await client.post("/pessoas", json=payload)
    assert r.status_code == 201
    body = (await client.get(r.headers["location"])).json()
    assert body["stack"] is None


@pytest.mark.asyncio
async def test_portuguese_field_names_are_accepted(client):
    payload = {"apelido": "ze", "nome": "José", "nascimento": "2000-10-01", "stack": ["Node"]}
    r = await client.post("/pessoas", json=payload)
    assert r.status_code == 201
    body = (await client.get(r.headers["location"])).json()
    assert body["nickname"] == "ze"
    assert body["birth_date"] == "2000-10-01"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "override",
    [
        {"birth_date": "2024-13-01"},
        {"birth_date": "01-01-2024"},
        {"name": "n" * 101},
        {"nickname": "k" * 33},
        {"nickname": None},
        {"stack": [""]},
        {"stack": ["s" * 33]},
        {"name": 1},
    ],
)
async def test_invalid_candidates_are_rejected_and_not_stored(client, valid_payload, override):
    r = await client.post("/pessoas", json={**valid_payload, **override})
    assert r.status_code == 422
    assert (await client.get("/contagem-pessoas")).text == "0"


@pytest.mark.asyncio
async def test_duplicate_nickname_gets_the_validation_rejection(client, valid_payload):
    first = await client.post("/pessoas", json=valid_payload)
    second = await client.post("/pessoas", json={**valid_payload, "name": "Someone Else"})
    invalid = await client.post("/pessoas", json={**valid_payload, "nickname": ""})

    assert first.status_code == 201
    assert second.status_code == invalid.status_code == 422
    assert (await client.get("/contagem-pessoas")).text == "1"


@pytest.mark.asyncio
async def test_conflict_and_invalid_candidate_render_identical_responses(client, valid_payload):
    await client.post("/pessoas", json=valid_payload)
    conflict = await client.post("/pessoas", json={**valid_payload, "name": "Someone Else"})
    invalid = await client.post("/pessoas", json={**valid_payload, "nickname": ""})

    assert conflict.status_code == invalid.status_code == 422
    assert conflict.json() == invalid.json() == {"detail": ""}
    assert conflict.text == invalid.text


@pytest.mark.asyncio
async def test_concurrent_duplicate_nicknames_create_exactly_one(client, valid_payload):
    responses = await asyncio.gather(*(client.post("/pessoas", json=valid_payload) for _ in range(5)))
    codes = sorted(r.status_code for r in responses)
    assert codes == [201, 422, 422, 422, 422]


@pytest.mark.asyncio
async def test_get_unknown_or_malformed_id_is_not_found(client):
    assert (await client.get(f"/pessoas/{uuid4_str()}")).status_code == 404
    assert (await client.get("/pessoas/not-a-uuid")).status_code == 404


@pytest.mark.asyncio
async def test_search_requires_a_term(client):
    assert (await client.get("/pessoas")).status_code == 400
    assert (await client.get("/pessoas", params={"t": ""})).status_code == 400
    assert (await client.get("/pessoas", params={"t": "   "})).status_code == 400


@pytest.mark.asyncio
async def test_search_matches_nickname_name_and_stack(client):
    await client.post("/pessoas", json={"nickname": "joao33", "name": "Joao", "birth_date": "1990-01-01", "stack": ["Java"]})
    await client.post("/pessoas", json={"nickname": "ana", "name": "Ana", "birth_date": "1990-01-01", "stack": None})

    r = await client.get("/pessoas", params={"t": "JOAO"})
    assert r.status_code == 200
    assert [p["nickname"] for p in r.json()] == ["joao33"]

    r = await client.get("/pessoas", params={"t": "jav"})
    assert [p["nickname"] for p in r.json()] == ["joao33"]

    r = await client.get("/pessoas", params={"t": "python"})
    assert r.json() == []


@pytest.mark.asyncio
async def test_search_returns_at_most_fifty(client, session_factory):
    async with session_factory() as session:
        session.add_all(
            Person(id=uuid4_str(), nickname=f"py{i}", name="Python Dev", birth_date="1990-01-01", stack=["Python"])
            for i in range(80)
        )
        await session.commit()

    r = await client.get("/pessoas", params={"t": "python"})
    assert r.status_code == 200
    assert len(r.json()) == 50


@pytest.mark.asyncio
async def test_count_is_plain_text(client, valid_payload):
    await client.post("/pessoas", json=valid_payload)
    r = await client.get("/contagem-pessoas")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/plain")
    assert r.text == "1"


@pytest.mark.asyncio
async def test_health_reports_database(client):
    r = await client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "database": "connected"}


@pytest.mark.asyncio
async def test_storage_outage_is_service_unavailable(app, client, valid_payload):
    app.dependency_overrides[get_people_store] = lambda: PeopleStore(BrokenSession())

    assert (await client.post("/pessoas", json=valid_payload)).status_code == 503
    assert (await client.get("/pessoas", params={"t": "x"})).status_code == 503
    assert (await client.get("/contagem-pessoas")).status_code == 503
    assert (await client.get("/health")).json()["database"] == "disconnected"
