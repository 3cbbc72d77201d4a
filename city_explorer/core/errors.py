"""
Error taxonomy and the mapping from errors to client responses.
Routes stay thin: they let these propagate and main.py turns them into plaintext responses.
"""
from __future__ import annotations


class CityExplorerError(Exception):
    """Base for errors that end the current request."""


class StoreError(CityExplorerError):
    """Read or write against the database failed (a unique conflict on locations is not an error)."""


class ProviderError(CityExplorerError):
    """Provider call failed, returned non-2xx, or returned a body we cannot decode."""

    def __init__(self, provider: str, message: str, *, status_code: int | None = None) -> None:
        super().__init__(f"{provider}: {message}")
        self.provider = provider
        self.status_code = status_code


class NotFoundError(CityExplorerError):
    """Provider returned zero usable results for a key that needs at least one."""


class InvalidQueryError(CityExplorerError):
    """Inbound `data` parameter is missing or malformed."""


# ---------------------------------------------------------------------------
# Constants: status codes and user-facing messages
# ---------------------------------------------------------------------------

STATUS_BAD_REQUEST = 400
STATUS_NOT_FOUND = 404
STATUS_INTERNAL_ERROR = 500

MSG_INTERNAL_ERROR = "sorry, something went wrong"
MSG_NOT_FOUND = "no results found"
MSG_WRONG_PLACE = "you got to the wrong place"


# ---------------------------------------------------------------------------
# Error rules: (exception type, status_code, body). First match wins.
# Add new rules here instead of scattering checks in routes.
# ---------------------------------------------------------------------------

ERROR_RULES: list[tuple[type[Exception], int, str | None]] = [
    (InvalidQueryError, STATUS_BAD_REQUEST, None),  # None: echo the message, it only describes the input
    (NotFoundError, STATUS_NOT_FOUND, MSG_NOT_FOUND),
    (StoreError, STATUS_INTERNAL_ERROR, MSG_INTERNAL_ERROR),
    (ProviderError, STATUS_INTERNAL_ERROR, MSG_INTERNAL_ERROR),
]


def error_to_response(exc: Exception) -> tuple[int, str]:
    """
    Map an exception raised while resolving a request to (status_code, plaintext body).
    Unknown exceptions become a generic 500; their detail is never sent to the client.
    """
    for exc_type, status_code, body in ERROR_RULES:
        if isinstance(exc, exc_type):
            return status_code, body if body is not None else str(exc)
    return STATUS_INTERNAL_ERROR, MSG_INTERNAL_ERROR
