from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Union

from .grid import Coordinate, Grid
from .heading import Heading


class MoveOutcome(Enum):
    """Result of a single forward move attempt."""

    MOVED = "moved"
    BLOCKED_BY_OBSTACLE = "blocked_by_obstacle"
    OUT_OF_BOUNDS = "out_of_bounds"

    @property
    def blocked(self) -> bool:
        return self is not MoveOutcome.MOVED


@dataclass(frozen=True)
class RoverState:
    """Snapshot of the rover on the grid.

    Attributes
    ----------
    x : int
        Column of the rover cell.
    y : int
        Row of the rover cell.
    heading : Heading
        Direction the rover faces.
    """

    x: int
    y: int
    heading: Heading


class Rover:
    """Grid rover driven by discrete move/turn commands.

    A forward move is only committed when the target cell is inside the grid
    and obstacle-free; otherwise the rover stays put and the returned
    MoveOutcome says why. The initial position is taken as given.
    """

    def __init__(self, x: int, y: int, heading: Union[Heading, str], grid: Grid) -> None:
        self.x = int(x)
        self.y = int(y)
        self.heading = heading if isinstance(heading, Heading) else Heading.parse(heading)
        self.grid = grid

    @property
    def position(self) -> Coordinate:
        return Coordinate(self.x, self.y)

    # ------------------------------------------------------------------
    # Motion
    # ------------------------------------------------------------------
    def move_forward(self) -> MoveOutcome:
        """Advance one cell along the current heading if the cell is free."""
        dx, dy = self.heading.delta()
        nx = self.x + dx
        ny = self.y + dy
        if not self.grid.is_within_bounds(nx, ny):
            return MoveOutcome.OUT_OF_BOUNDS
        if self.grid.has_obstacle(nx, ny):
            return MoveOutcome.BLOCKED_BY_OBSTACLE
        self.x = nx
        self.y = ny
        return MoveOutcome.MOVED

    def turn_left(self) -> None:
        self.heading = self.heading.turn_left()

    def turn_right(self) -> None:
        self.heading = self.heading.turn_right()

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------
    def get_state(self) -> RoverState:
        """Return an immutable copy of the current state."""
        return RoverState(x=self.x, y=self.y, heading=self.heading)

    def status_report(self) -> str:
        # The obstacle phrase is fixed text, not a sensor reading.
        return f"Rover is at ({self.x}, {self.y}) facing {self.heading.value}. No Obstacles detected."

    def to_dict(self) -> Dict[str, Any]:
        """Serialize current rover state to a dict for logging/telemetry."""
        return {
            "x": self.x,
            "y": self.y,
            "heading": self.heading.value,
        }
