from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.responses import PlainTextResponse

from people_api.core import get_settings, limiter
from people_api.dependencies import get_people_store
from people_api.schemas import PersonCreate, PersonCreatedResponse, PersonResponse
from people_api.services import PeopleStore, people_service

router = APIRouter(tags=["people"])


@router.post("/pessoas", response_model=PersonCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_person(
    body: PersonCreate,
    response: Response,
    store: PeopleStore = Depends(get_people_store),
):
    created = await people_service.create(store, body)
    response.headers["Location"] = f"/pessoas/{created.id}"
    return created


@router.get("/pessoas/{person_id}", response_model=PersonResponse)
async def get_person(
    person_id: str,
    store: PeopleStore = Depends(get_people_store),
):
    return await people_service.get(store, person_id)


@router.get("/pessoas", response_model=list[PersonResponse])
@limiter.limit(lambda: get_settings().search_rate_limit)
async def search_people(
    request: Request,
    t: str | None = Query(None, description="Free-text term matched against nickname, name and stack"),
    store: PeopleStore = Depends(get_people_store),
):
    """Case-insensitive substring search; at most 50 results."""
    return await people_service.search(store, t)


@router.get("/contagem-pessoas", response_class=PlainTextResponse)
async def count_people(
    store: PeopleStore = Depends(get_people_store),
):
    return str(await people_service.count(store))
