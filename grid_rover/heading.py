from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple


class Heading(Enum):
    """Compass heading of the rover.

    Rotations and movement deltas are table lookups, so every heading has
    a defined result.
    """

    N = "N"
    E = "E"
    S = "S"
    W = "W"

    def turn_left(self) -> "Heading":
        """Rotate 90 degrees counter-clockwise."""
        return _LEFT[self]

    def turn_right(self) -> "Heading":
        """Rotate 90 degrees clockwise."""
        return _RIGHT[self]

    def delta(self) -> Tuple[int, int]:
        """Grid step (dx, dy) for one forward move. +y is north."""
        return _DELTA[self]

    @classmethod
    def parse(cls, token: str) -> "Heading":
        """Parse a heading letter or name, case-insensitive ("n", "North")."""
        key = str(token).strip().upper()
        if key in _NAMES:
            key = _NAMES[key]
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Invalid heading {token!r}; expected one of N, E, S, W") from None

    def __str__(self) -> str:
        return self.value


_LEFT: Dict[Heading, Heading] = {
    Heading.N: Heading.W,
    Heading.W: Heading.S,
    Heading.S: Heading.E,
    Heading.E: Heading.N,
}

_RIGHT: Dict[Heading, Heading] = {
    Heading.N: Heading.E,
    Heading.E: Heading.S,
    Heading.S: Heading.W,
    Heading.W: Heading.N,
}

_DELTA: Dict[Heading, Tuple[int, int]] = {
    Heading.N: (0, 1),
    Heading.E: (1, 0),
    Heading.S: (0, -1),
    Heading.W: (-1, 0),
}

_NAMES: Dict[str, str] = {
    "NORTH": "N",
    "EAST": "E",
    "SOUTH": "S",
    "WEST": "W",
}
