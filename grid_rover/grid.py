from __future__ import annotations

from typing import Any, Dict, FrozenSet, Iterable, NamedTuple, Optional, Sequence
import json
import os

import numpy as np


MAPS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "maps")


class Coordinate(NamedTuple):
    """Integer grid cell.

    Coordinates are defined with origin at the bottom-left cell:
    - x increases to the right (east)
    - y increases upward (north)
    """

    x: int
    y: int


def _cell(o: Any) -> Coordinate:
    """Map-file obstacle entry, either ``[x, y]`` or ``{"x": .., "y": ..}``."""
    if isinstance(o, dict):
        return Coordinate(int(o["x"]), int(o["y"]))
    return Coordinate(int(o[0]), int(o[1]))


class Grid:
    """Bounded 2D grid with static obstacle cells.

    The grid is immutable once built; rovers share it read-only.

    Parameters
    ----------
    width : int
        Number of columns. Cells ``0 <= x < width`` are in bounds.
    height : int
        Number of rows. Cells ``0 <= y < height`` are in bounds.
    obstacles : iterable of (x, y)
        Blocked cells. Duplicates collapse; order is irrelevant.
    """

    __slots__ = ("_width", "_height", "_obstacles")

    def __init__(
        self,
        width: int,
        height: int,
        obstacles: Optional[Iterable[Sequence[int]]] = None,
    ) -> None:
        self._width = int(width)
        self._height = int(height)
        cells = obstacles if obstacles is not None else []
        self._obstacles: FrozenSet[Coordinate] = frozenset(
            Coordinate(int(x), int(y)) for x, y in cells
        )

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def obstacles(self) -> FrozenSet[Coordinate]:
        return self._obstacles

    # ------------------------------------------------------------------
    # Map loading
    # ------------------------------------------------------------------
    @classmethod
    def from_map_dict(cls, data: Dict[str, Any]) -> "Grid":
        """Create a grid from a dict with width, height and obstacle pairs."""
        obstacles = [_cell(o) for o in data.get("obstacles", [])]
        return cls(width=int(data["width"]), height=int(data["height"]), obstacles=obstacles)

    @classmethod
    def from_map_file(cls, path: str) -> "Grid":
        """Create a grid from a JSON map file.

        ``path`` may also be the bare name of a bundled map (``"crater_field"``).
        """
        if not os.path.isfile(path):
            bundled = os.path.join(MAPS_DIR, f"{path}.json")
            if os.path.isfile(bundled):
                path = bundled
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return cls.from_map_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize grid description to a Python dict."""
        return {
            "width": self._width,
            "height": self._height,
            "obstacles": [[c.x, c.y] for c in sorted(self._obstacles)],
        }

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def is_within_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def has_obstacle(self, x: int, y: int) -> bool:
        return (x, y) in self._obstacles

    def occupancy(self) -> np.ndarray:
        """Boolean array of shape (height, width), True where a cell is blocked.

        Row index is y, so row 0 is the southern edge. Obstacles outside the
        bounds are ignored.
        """
        grid = np.zeros((max(self._height, 0), max(self._width, 0)), dtype=bool)
        for c in self._obstacles:
            if self.is_within_bounds(c.x, c.y):
                grid[c.y, c.x] = True
        return grid

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height}, obstacles={len(self._obstacles)})"
