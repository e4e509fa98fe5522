from __future__ import annotations

from fastapi import HTTPException, status


class FrameMoverError(Exception):
    """Base application exception."""

    pass


class BadRequest(FrameMoverError):
    pass


class NotFound(FrameMoverError):
    pass


class Conflict(FrameMoverError):
    pass


class ConfigurationError(FrameMoverError):
    """Run inputs are unusable (e.g. no valid suffixes)."""


class SetupError(FrameMoverError):
    """The run could not prepare its destination or source."""


def to_http(exc: Exception) -> HTTPException:
    """
    Convert our exceptions to HTTPException with sensible defaults.
    """
    if isinstance(exc, BadRequest):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    if isinstance(exc, NotFound):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, Conflict):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    if isinstance(exc, FrameMoverError):
        return HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        )
    # Fallback
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)
    )
