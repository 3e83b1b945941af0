"""Maze routes for generating grids and listing bundled samples."""

from fastapi import APIRouter, HTTPException, Request, status

from boonpath.api.deps import Service, limiter, to_http_error
from boonpath.config import get_settings
from boonpath.core import GridValidationError
from boonpath.schemas.maze import (
    MazeGenerateRequest,
    MazeGenerateResponse,
    MazeSample,
    MazeSampleListItem,
    MazeSampleListResponse,
)
from boonpath.services.pathfinding_service import GridTooLargeError

settings = get_settings()

router = APIRouter(prefix="/maze", tags=["Mazes"])


@router.post(
    "/generate",
    response_model=MazeGenerateResponse,
)
@limiter.limit(f"{settings.rate_limit_requests}/minute")
async def generate_maze(
    request: Request,
    body: MazeGenerateRequest,
    service: Service,
) -> MazeGenerateResponse:
    """Generate a random maze that is solvable without breaking any wall.

    Pass a seed for a reproducible maze.
    """
    try:
        maze = await service.generate_maze(
            rows=body.rows,
            cols=body.cols,
            wall_density=body.wall_density,
            seed=body.seed,
        )
    except (GridValidationError, GridTooLargeError) as e:
        raise to_http_error(e) from e

    return MazeGenerateResponse(**maze.to_dict())


@router.get(
    "/samples",
    response_model=MazeSampleListResponse,
)
async def list_samples(service: Service) -> MazeSampleListResponse:
    """List the bundled sample grids.

    Grid data is not included - use GET /v1/maze/samples/{name} for the cells.
    """
    items = [
        MazeSampleListItem(
            name=name,
            rows=grid.rows,
            cols=grid.cols,
            walls=grid.wall_count(),
        )
        for name, grid in service.get_samples().items()
    ]

    return MazeSampleListResponse(
        samples=items,
        total=len(items),
    )


@router.get(
    "/samples/{name}",
    response_model=MazeSample,
)
async def get_sample(name: str, service: Service) -> MazeSample:
    """Get a bundled sample grid by name."""
    grid = service.get_sample(name)

    if grid is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Sample not found: {name}",
        )

    return MazeSample(
        name=name,
        rows=grid.rows,
        cols=grid.cols,
        walls=grid.wall_count(),
        grid=grid.to_matrix(),
    )
