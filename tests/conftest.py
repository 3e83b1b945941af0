"""Pytest configuration and fixtures."""

from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from boonpath.main import app
from boonpath.config import Settings
from boonpath.services.pathfinding_service import (
    PathfindingService,
    get_pathfinding_service,
)


# 3x3 grid whose middle row separates start from goal
WALL_ROW_GRID = [
    [0, 0, 0],
    [1, 1, 1],
    [0, 0, 0],
]

# Without a break the only route winds through the right and left gaps
DETOUR_GRID = [
    [0, 0, 0],
    [1, 1, 0],
    [0, 0, 0],
    [0, 1, 1],
    [0, 0, 0],
]


@pytest.fixture
def mazes_dir(tmp_path: Path) -> Path:
    """Directory with two sample grids and one broken file."""
    (tmp_path / "open.txt").write_text("...\n...\n")
    (tmp_path / "wall_row.txt").write_text("...\nXXX\n...\n")
    (tmp_path / "broken.txt").write_text("..\n...\n")
    return tmp_path


@pytest.fixture
def service(mazes_dir: Path) -> PathfindingService:
    """Pathfinding service with small limits and the test sample directory."""
    settings = Settings(
        mazes_dir=mazes_dir,
        max_rows=50,
        max_cols=50,
        generator_max_attempts=200,
    )
    return PathfindingService(settings)


@pytest_asyncio.fixture(scope="function")
async def client(service: PathfindingService) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""
    app.dependency_overrides[get_pathfinding_service] = lambda: service

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
