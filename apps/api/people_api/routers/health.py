from fastapi import APIRouter, Depends

from people_api.dependencies import get_people_store
from people_api.services import PeopleStore, people_service

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(store: PeopleStore = Depends(get_people_store)):
    """Always 200; reports whether the database answered."""
    connected = await people_service.is_database_up(store)
    return {"status": "ok", "database": "connected" if connected else "disconnected"}
