from __future__ import annotations

from typing import Dict, Optional

import numpy as np

from .grid import Grid
from .heading import Heading
from .rover import Rover


FREE_CHAR = "."
OBSTACLE_CHAR = "#"
ROVER_CHARS: Dict[Heading, str] = {
    Heading.N: "^",
    Heading.E: ">",
    Heading.S: "v",
    Heading.W: "<",
}


def render_ascii(grid: Grid, rover: Optional[Rover] = None) -> str:
    """Draw the grid as text, north at the top.

    Obstacles are ``#``, free cells ``.`` and the rover an arrow for its
    heading. A rover outside the bounds is not drawn.
    """
    occ = grid.occupancy()
    if occ.size == 0:
        return ""
    canvas = np.where(occ, OBSTACLE_CHAR, FREE_CHAR).astype("<U1")
    if rover is not None and grid.is_within_bounds(rover.x, rover.y):
        canvas[rover.y, rover.x] = ROVER_CHARS[rover.heading]
    # Row 0 is y=0; flip so the highest y prints first.
    return "\n".join("".join(row) for row in canvas[::-1])
