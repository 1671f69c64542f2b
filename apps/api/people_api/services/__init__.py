from .people import people_service
from .people_store import PeopleStore

__all__ = ["people_service", "PeopleStore"]
