# /app/core/errors.py

"""
Business-level exceptions raised by the service layer.

Services never raise HTTPException themselves. They raise one of these (or a
plain ValueError for bad input) and the routers translate them into the right
status code.
"""

from fastapi import HTTPException, status


class NotFoundError(LookupError):
    """The requested resource does not exist."""


class ForbiddenError(PermissionError):
    """The resource exists but belongs to another user."""


class ConflictError(ValueError):
    """A uniqueness rule would be broken (duplicate email, duplicate slug)."""


class GenerationRequestError(ValueError):
    """The AI generation request is structurally invalid."""


def to_http_exception(exc: Exception) -> HTTPException:
    """Maps a service-layer exception onto the HTTPException the routers raise."""
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, ForbiddenError):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc))
    if isinstance(exc, ConflictError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
