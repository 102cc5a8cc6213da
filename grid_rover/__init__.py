"""
Top-level package for the grid rover simulator.

Components:
- heading: compass headings with rotation and step tables
- grid: bounded integer grid with static obstacle cells
- rover: rover pose, forward moves with bounds/obstacle checks
- commands: M/L/R command set, parsing and dispatch
- simulator: runs a command sequence and reports the final status
- scenario: YAML/dict/console input for a simulation run
- render: ASCII view of the grid and rover
"""

from .heading import Heading
from .grid import Coordinate, Grid
from .rover import MoveOutcome, Rover, RoverState
from .commands import Command, apply_command, parse_commands, tokenize_commands
from .simulator import SimulationResult, Simulator, StepRecord

__all__ = [
    "Heading",
    "Coordinate",
    "Grid",
    "MoveOutcome",
    "Rover",
    "RoverState",
    "Command",
    "apply_command",
    "parse_commands",
    "tokenize_commands",
    "SimulationResult",
    "Simulator",
    "StepRecord",
]
