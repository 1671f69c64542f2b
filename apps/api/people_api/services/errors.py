"""Error classes raised by the people services and translated to HTTP in ``people_api.main``."""


class PeopleApiError(Exception):
    """Base for errors that map to a definite HTTP outcome."""

    status_code: int = 500

    def __init__(self, message: str = ""):
        self.message = message
        super().__init__(message)

    @property
    def detail(self) -> str:
        """Text shown to the caller; subclasses may hide the message."""
        return self.message


class PersonRejectedError(PeopleApiError):
    """Candidate is malformed or its nickname is already taken. Both look identical to the caller."""

    status_code = 422

    @property
    def detail(self) -> str:
        # The reason stays in the logs; every rejection renders the same body.
        return ""


class InvalidSearchTermError(PeopleApiError):
    status_code = 400


class PersonNotFoundError(PeopleApiError):
    status_code = 404


class StorageUnavailableError(PeopleApiError):
    """Storage failed for a reason other than a nickname conflict (connectivity, timeout, schema)."""

    status_code = 503


class InvariantViolationError(RuntimeError):
    """A programming error, e.g. an id requested for a candidate that never passed validation.

    Has no HTTP mapping; it surfaces as a 500, never as a client rejection.
    """
