from .health import router as health_router
from .people import router as people_router

ROUTERS = (health_router, people_router)

__all__ = [
    "ROUTERS",
    "health_router",
    "people_router",
]
