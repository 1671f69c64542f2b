"""
In-memory free-text filter over an already-bounded candidate list.

A candidate matches when the lower-cased term is a substring of its
nickname, its name, or any of its stack tags. Input order is kept and the
result is cut at ``limit``. How many candidates to load is the store's
decision, not this module's.
"""

from typing import Any, Iterable, Optional, Sequence, TypeVar

from people_api.core.constants import SEARCH_RESULT_LIMIT
from people_api.services.errors import InvalidSearchTermError

T = TypeVar("T")


def normalize_search_term(term: Optional[str]) -> str:
    """Lower-case the term, or raise InvalidSearchTermError if it is missing or blank."""
    if term is None or not term.strip():
        raise InvalidSearchTermError("Query parameter 't' is required")
    return term.lower()


def _contains(value: Any, needle: str) -> bool:
    return isinstance(value, str) and needle in value.lower()


def person_matches(person: Any, needle: str) -> bool:
    """needle must already be lower-cased."""
    if _contains(getattr(person, "nickname", None), needle):
        return True
    if _contains(getattr(person, "name", None), needle):
        return True
    stack: Optional[Iterable[Any]] = getattr(person, "stack", None)
    return stack is not None and any(_contains(tag, needle) for tag in stack)


def search_people(candidates: Sequence[T], term: Optional[str], limit: int = SEARCH_RESULT_LIMIT) -> list[T]:
    needle = normalize_search_term(term)
    matches: list[T] = []
    for person in candidates:
        if len(matches) >= limit:
            break
        if person_matches(person, needle):
            matches.append(person)
    return matches
