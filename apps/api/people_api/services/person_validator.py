"""
Structural validation for candidate people.

Pure and total: no I/O, no exceptions, one boolean out. Uniqueness is not
checked here; the store's unique index on nickname is the only arbiter.

Rules (all must hold):
- birth_date matches YYYY-MM-DD exactly and is a real calendar date
- name is non-empty and at most 100 characters
- nickname is non-empty and at most 32 characters
- stack is absent, or every tag is non-empty and at most 32 characters

Emptiness is literal: " " is non-empty. Lengths count code points.
"""

import re
from datetime import datetime
from typing import Any

from people_api.core.constants import (
    BIRTH_DATE_FORMAT,
    NAME_MAX_LENGTH,
    NICKNAME_MAX_LENGTH,
    STACK_ITEM_MAX_LENGTH,
)

# ASCII digits only; strptime alone would accept "2024-1-5" and \d accepts non-ASCII digits.
_BIRTH_DATE_SHAPE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def _is_bounded_text(value: Any, max_length: int) -> bool:
    return isinstance(value, str) and 0 < len(value) <= max_length


def is_valid_birth_date(value: Any) -> bool:
    """True if value is a YYYY-MM-DD string naming a real date (no month 13, no Feb 30)."""
    if not isinstance(value, str) or not _BIRTH_DATE_SHAPE.fullmatch(value):
        return False
    try:
        datetime.strptime(value, BIRTH_DATE_FORMAT)
    except ValueError:
        return False
    return True


def is_valid_stack(stack: Any) -> bool:
    if stack is None:
        return True
    if not isinstance(stack, (list, tuple)):
        return False
    return all(_is_bounded_text(item, STACK_ITEM_MAX_LENGTH) for item in stack)


def is_valid_person(candidate: Any) -> bool:
    """Return True if the candidate may be persisted.

    Accepts anything with ``nickname``, ``name``, ``birth_date`` and ``stack``
    attributes (``PersonCreate``, ORM rows, simple namespaces). Missing
    attributes count as absent.
    """
    return (
        is_valid_birth_date(getattr(candidate, "birth_date", None))
        and _is_bounded_text(getattr(candidate, "name", None), NAME_MAX_LENGTH)
        and _is_bounded_text(getattr(candidate, "nickname", None), NICKNAME_MAX_LENGTH)
        and is_valid_stack(getattr(candidate, "stack", None))
    )
