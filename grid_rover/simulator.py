from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from .commands import Command, apply_command
from .rover import MoveOutcome, Rover, RoverState
from telemetry.logger import TelemetryLogger


@dataclass(frozen=True)
class StepRecord:
    """One executed command and the rover state right after it."""

    index: int
    command: Command
    outcome: Optional[MoveOutcome]
    state: RoverState

    def as_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "command": self.command.value,
            "outcome": self.outcome.value if self.outcome is not None else None,
            "x": self.state.x,
            "y": self.state.y,
            "heading": self.state.heading.value,
        }


@dataclass
class SimulationResult:
    """Per-step trace and final status of a run."""

    status: str
    final_state: RoverState
    steps: List[StepRecord] = field(default_factory=list)

    @property
    def moves(self) -> int:
        return sum(1 for s in self.steps if s.outcome is MoveOutcome.MOVED)

    @property
    def blocked_moves(self) -> int:
        return sum(1 for s in self.steps if s.outcome is not None and s.outcome.blocked)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "x": self.final_state.x,
            "y": self.final_state.y,
            "heading": self.final_state.heading.value,
            "commands": len(self.steps),
            "moves": self.moves,
            "blocked_moves": self.blocked_moves,
        }


class Simulator:
    """Runs a command sequence against a rover, strictly in order.

    Blocked moves never stop the run; the rover just keeps its state and the
    next command is applied. If a telemetry logger is given, every step and a
    final summary are written to it.
    """

    def __init__(self, logger: Optional[TelemetryLogger] = None) -> None:
        self.logger = logger

    def execute(self, rover: Rover, commands: Sequence[Command]) -> SimulationResult:
        steps: List[StepRecord] = []
        for index, command in enumerate(commands):
            outcome = apply_command(command, rover)
            record = StepRecord(index=index, command=command, outcome=outcome, state=rover.get_state())
            steps.append(record)
            if self.logger is not None:
                self.logger.log_step(record.as_dict())

        result = SimulationResult(
            status=rover.status_report(),
            final_state=rover.get_state(),
            steps=steps,
        )
        if self.logger is not None:
            self.logger.log_summary(result.as_dict())
        return result

    def run(self, rover: Rover, commands: Sequence[Command]) -> str:
        """Apply all commands and return the rover's final status report."""
        return self.execute(rover, commands).status
