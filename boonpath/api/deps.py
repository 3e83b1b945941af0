"""API dependencies for dependency injection."""

from typing import Annotated, Any, Sequence

from fastapi import Depends, HTTPException, status
from slowapi import Limiter
from slowapi.util import get_remote_address

from boonpath.core import Grid, GridValidationError
from boonpath.services.pathfinding_service import (
    GridTooLargeError,
    PathfindingService,
    get_pathfinding_service,
)

# Shared rate limiter; main.py registers it on app.state
limiter = Limiter(key_func=get_remote_address)


def to_http_error(exc: Exception) -> HTTPException:
    """Map service-level grid errors to HTTP errors."""
    if isinstance(exc, GridTooLargeError):
        return HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=str(exc),
        )
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
        detail=str(exc),
    )


def prepare_grid_or_422(
    service: PathfindingService, matrix: Sequence[Sequence[Any]]
) -> Grid:
    """Validate a request grid, raising HTTP errors for bad input."""
    try:
        return service.prepare_grid(matrix)
    except (GridValidationError, GridTooLargeError) as e:
        raise to_http_error(e) from e


# Type aliases for cleaner route signatures
Service = Annotated[PathfindingService, Depends(get_pathfinding_service)]
