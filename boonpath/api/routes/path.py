"""Path routes for running and replaying searches."""

from fastapi import APIRouter, Request

from boonpath.api.deps import Service, limiter, prepare_grid_or_422
from boonpath.config import get_settings
from boonpath.core import Grid, PathResult
from boonpath.schemas.path import (
    PathComparisonResponse,
    PathRequest,
    PathResponse,
    ReplayFrameResponse,
    ReplayRequest,
)

settings = get_settings()

router = APIRouter(prefix="/path", tags=["Pathfinding"])


def to_response(result: PathResult, grid: Grid) -> PathResponse:
    return PathResponse(
        path=result.path,
        visited=result.visited,
        found=result.found,
        steps=result.steps,
        broken_wall=result.broken_wall(grid),
    )


@router.post(
    "",
    response_model=PathResponse,
)
@limiter.limit(f"{settings.rate_limit_requests}/minute")
async def find_path(
    request: Request,
    body: PathRequest,
    service: Service,
) -> PathResponse:
    """Find the shortest path from the top-left to the bottom-right cell.

    With can_break_wall the path may cross one wall, reported as broken_wall.
    The visited list holds the full discovery order, even when no path exists.
    """
    grid = prepare_grid_or_422(service, body.grid)
    result = await service.find_path(grid, body.can_break_wall)
    return to_response(result, grid)


@router.post(
    "/compare",
    response_model=PathComparisonResponse,
)
@limiter.limit(f"{settings.rate_limit_requests}/minute")
async def compare_paths(
    request: Request,
    body: PathRequest,
    service: Service,
) -> PathComparisonResponse:
    """Search the same grid with and without the wall break.

    steps_saved is only set when both searches find a path.
    """
    grid = prepare_grid_or_422(service, body.grid)
    without_boon, with_boon = await service.compare(grid)

    steps_saved = None
    if without_boon.found and with_boon.found:
        steps_saved = without_boon.steps - with_boon.steps

    return PathComparisonResponse(
        without_boon=to_response(without_boon, grid),
        with_boon=to_response(with_boon, grid),
        steps_saved=steps_saved,
    )


@router.post(
    "/replay",
    response_model=ReplayFrameResponse,
)
@limiter.limit(f"{settings.rate_limit_requests}/minute")
async def replay_step(
    request: Request,
    body: ReplayRequest,
    service: Service,
) -> ReplayFrameResponse:
    """Get the cells visible at one step of the search replay.

    Steps past the end are clamped to the final frame.
    """
    grid = prepare_grid_or_422(service, body.grid)
    frame = await service.replay_frame(grid, body.can_break_wall, body.step)
    return ReplayFrameResponse(**frame.to_dict())
