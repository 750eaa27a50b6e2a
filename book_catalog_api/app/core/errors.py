"""
Domain errors raised by the store and service layers.

Every error carries the HTTP status code it maps to, so endpoint
functions can translate it into an ``HTTPException`` without parsing
the message text.
"""

from fastapi import HTTPException, status


class CatalogError(ValueError):
    """Base class for expected, client-caused failures."""

    status_code: int = status.HTTP_400_BAD_REQUEST


class ValidationError(CatalogError):
    """A required field is missing or empty."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(CatalogError):
    """The requested book, review or user does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(CatalogError):
    """A unique value (ISBN, username) is already taken."""

    status_code = status.HTTP_409_CONFLICT


def to_http_exception(exc: CatalogError) -> HTTPException:
    """Translate a domain error into the matching ``HTTPException``."""
    return HTTPException(status_code=exc.status_code, detail=str(exc))
