"""Core configuration, logging, and shared infrastructure."""

from people_api.core.config import Settings, get_settings, to_async_database_url
from people_api.core.constants import (
    NICKNAME_MAX_LENGTH,
    NAME_MAX_LENGTH,
    STACK_ITEM_MAX_LENGTH,
    BIRTH_DATE_FORMAT,
    SEARCH_CANDIDATE_LIMIT,
    SEARCH_RESULT_LIMIT,
)
from people_api.core.limiter import limiter
from people_api.core.logging_config import setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "to_async_database_url",
    "NICKNAME_MAX_LENGTH",
    "NAME_MAX_LENGTH",
    "STACK_ITEM_MAX_LENGTH",
    "BIRTH_DATE_FORMAT",
    "SEARCH_CANDIDATE_LIMIT",
    "SEARCH_RESULT_LIMIT",
    "limiter",
    "setup_logging",
]
