"""Shared API constants."""

# Field limits (inclusive)
NICKNAME_MAX_LENGTH = 32
NAME_MAX_LENGTH = 100
STACK_ITEM_MAX_LENGTH = 32
BIRTH_DATE_FORMAT = "%Y-%m-%d"

# Search is bounded twice: rows loaded from the store, then matches returned.
SEARCH_CANDIDATE_LIMIT = 1000
SEARCH_RESULT_LIMIT = 50
