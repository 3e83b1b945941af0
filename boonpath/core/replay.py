"""
Step-by-step replay of a search.

A replay shows the exploration trace one cell at a time, then reveals the
path one cell at a time. Step 0 shows nothing; the last step shows both
sequences in full.
"""

from dataclasses import dataclass, field
from typing import Iterator, Literal

from .grid import Coordinate
from .result import PathResult

Phase = Literal["idle", "exploring", "solving", "done"]


@dataclass
class ReplayFrame:
    """Cells visible at one replay step."""
    step: int
    total_steps: int
    phase: Phase
    visited: list[Coordinate] = field(default_factory=list)
    path: list[Coordinate] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "step": self.step,
            "total_steps": self.total_steps,
            "phase": self.phase,
            "visited": [list(coord) for coord in self.visited],
            "path": [list(coord) for coord in self.path],
        }


class SearchReplay:
    """Frame model over a PathResult."""

    def __init__(self, result: PathResult):
        self.result = result

    @property
    def total_steps(self) -> int:
        return len(self.result.visited) + len(self.result.path)

    def clamp(self, step: int) -> int:
        return max(0, min(step, self.total_steps))

    def frame(self, step: int) -> ReplayFrame:
        """
        Get the frame shown at a step.

        Args:
            step: Replay position; values outside [0, total_steps] are clamped.

        Returns:
            ReplayFrame with the visible slices of visited and path.
        """
        step = self.clamp(step)
        visited = self.result.visited
        path = self.result.path

        if step == self.total_steps and step > 0:
            phase: Phase = "done"
        elif step == 0:
            phase = "idle"
        elif step <= len(visited):
            phase = "exploring"
        else:
            phase = "solving"

        if step <= len(visited):
            return ReplayFrame(
                step=step,
                total_steps=self.total_steps,
                phase=phase,
                visited=visited[:step],
                path=[],
            )

        return ReplayFrame(
            step=step,
            total_steps=self.total_steps,
            phase=phase,
            visited=list(visited),
            path=path[:step - len(visited)],
        )

    def frames(self) -> Iterator[ReplayFrame]:
        for step in range(self.total_steps + 1):
            yield self.frame(step)
