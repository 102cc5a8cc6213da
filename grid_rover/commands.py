from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional

from .rover import MoveOutcome, Rover


class Command(Enum):
    """Atomic rover instruction. The value is its input letter."""

    MOVE = "M"
    TURN_LEFT = "L"
    TURN_RIGHT = "R"

    def apply(self, rover: Rover) -> Optional[MoveOutcome]:
        return apply_command(self, rover)

    @classmethod
    def from_token(cls, token: str) -> Optional["Command"]:
        """Return the command for a letter (case-insensitive), or None."""
        try:
            return cls(str(token).strip().upper())
        except ValueError:
            return None


_DISPATCH: Dict[Command, Callable[[Rover], Optional[MoveOutcome]]] = {
    Command.MOVE: Rover.move_forward,
    Command.TURN_LEFT: Rover.turn_left,
    Command.TURN_RIGHT: Rover.turn_right,
}


def apply_command(command: Command, rover: Rover) -> Optional[MoveOutcome]:
    """Apply one command to the rover.

    Moves return their MoveOutcome; turns always succeed and return None.
    """
    return _DISPATCH[command](rover)


def parse_commands(tokens: Iterable[str]) -> List[Command]:
    """Map M/L/R tokens to commands, stopping at the first unknown token.

    The unknown token and everything after it are discarded.
    """
    commands: List[Command] = []
    for token in tokens:
        command = Command.from_token(token)
        if command is None:
            break
        commands.append(command)
    return commands


def tokenize_commands(text: str) -> List[str]:
    """Split a command string into tokens.

    Whitespace-separated text is split on whitespace ("M M R"); compact text
    ("MMR") yields one token per character.
    """
    text = text.strip()
    if any(ch.isspace() for ch in text):
        return text.split()
    return list(text)
