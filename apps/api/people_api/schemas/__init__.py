"""Pydantic request/response schemas."""

from people_api.schemas.person import PersonCreate, PersonCreatedResponse, PersonResponse

__all__ = [
    "PersonCreate",
    "PersonCreatedResponse",
    "PersonResponse",
]
