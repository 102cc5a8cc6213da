"""
Scenario loading for the grid rover simulator.

A scenario bundles everything a run needs: grid size and obstacles, rover
start pose and the command tokens. Scenarios come from a YAML config, from
plain dicts, or from the interactive console dialogue. All validation of
user input happens here; the core modules assume well-formed values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple
import os

import yaml

from .commands import Command, parse_commands, tokenize_commands
from .grid import Grid
from .heading import Heading
from .rover import Rover


class ScenarioError(ValueError):
    """Raised when a scenario description is missing or malformed."""


def load_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


@dataclass
class Scenario:
    width: int
    height: int
    start_x: int
    start_y: int
    heading: Heading
    obstacles: List[Tuple[int, int]] = field(default_factory=list)
    commands: List[Command] = field(default_factory=list)
    telemetry_path: Optional[str] = None

    def build_grid(self) -> Grid:
        return Grid(width=self.width, height=self.height, obstacles=self.obstacles)

    def build_rover(self, grid: Grid) -> Rover:
        return Rover(x=self.start_x, y=self.start_y, heading=self.heading, grid=grid)


# ---------------------------------------------------------------------------
# Field conversion
# ---------------------------------------------------------------------------


def _as_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise ScenarioError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        raise ScenarioError(f"{name} must be an integer, got {value!r}") from None


def parse_heading(value: Any, name: str = "rover.heading") -> Heading:
    try:
        return Heading.parse(value)
    except ValueError as exc:
        raise ScenarioError(f"{name}: {exc}") from None


def parse_obstacles(values: Any) -> List[Tuple[int, int]]:
    if values is None:
        return []
    if not isinstance(values, (list, tuple)):
        raise ScenarioError(f"grid.obstacles must be a list of [x, y] pairs, got {values!r}")
    cells: List[Tuple[int, int]] = []
    for i, item in enumerate(values):
        if isinstance(item, dict):
            pair = (item.get("x"), item.get("y"))
        elif isinstance(item, str):
            pair = tuple(item.replace(",", " ").split())
        else:
            pair = tuple(item) if isinstance(item, (list, tuple)) else (item,)
        if len(pair) != 2:
            raise ScenarioError(f"grid.obstacles[{i}] must be an [x, y] pair, got {item!r}")
        cells.append((_as_int(pair[0], f"grid.obstacles[{i}].x"), _as_int(pair[1], f"grid.obstacles[{i}].y")))
    return cells


def _as_commands(value: Any) -> List[Command]:
    if value is None:
        return []
    if isinstance(value, str):
        tokens = tokenize_commands(value)
    elif isinstance(value, (list, tuple)):
        tokens = [str(t) for t in value]
    else:
        raise ScenarioError(f"commands must be a string or a list of tokens, got {value!r}")
    return parse_commands(tokens)


def _require(section: Dict[str, Any], key: str, prefix: str) -> Any:
    if key not in section:
        raise ScenarioError(f"missing required key {prefix}.{key}")
    return section[key]


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def scenario_from_dict(cfg: Dict[str, Any], base_dir: Optional[str] = None) -> Scenario:
    """Build a Scenario from a parsed config dict.

    ``grid.map_file`` (a JSON map path, relative to ``base_dir``, or a bundled
    map name) provides size and obstacles; explicit ``grid`` keys override it.
    """
    if not isinstance(cfg, dict):
        raise ScenarioError("scenario config must be a mapping")
    grid_cfg = cfg.get("grid") or {}
    rover_cfg = cfg.get("rover") or {}
    if not isinstance(grid_cfg, dict) or not isinstance(rover_cfg, dict):
        raise ScenarioError("grid and rover sections must be mappings")

    width: Any = grid_cfg.get("width")
    height: Any = grid_cfg.get("height")
    obstacles: List[Tuple[int, int]] = []

    map_file = grid_cfg.get("map_file")
    if map_file:
        path = str(map_file)
        if base_dir is not None and not os.path.isabs(path):
            candidate = os.path.join(base_dir, path)
            if os.path.isfile(candidate):
                path = candidate
        try:
            loaded = Grid.from_map_file(path)
        except OSError as exc:
            raise ScenarioError(f"cannot read map file {map_file!r}: {exc}") from exc
        except (KeyError, ValueError, TypeError, IndexError) as exc:
            raise ScenarioError(f"invalid map file {map_file!r}: {exc}") from exc
        width = loaded.width if width is None else width
        height = loaded.height if height is None else height
        obstacles = sorted(loaded.obstacles)

    if grid_cfg.get("obstacles") is not None:
        obstacles = parse_obstacles(grid_cfg["obstacles"])

    if width is None:
        raise ScenarioError("missing required key grid.width")
    if height is None:
        raise ScenarioError("missing required key grid.height")

    telemetry_cfg = cfg.get("telemetry") or {}
    telemetry_path = telemetry_cfg.get("path") if isinstance(telemetry_cfg, dict) else None

    return Scenario(
        width=_as_int(width, "grid.width"),
        height=_as_int(height, "grid.height"),
        obstacles=[(int(x), int(y)) for x, y in obstacles],
        start_x=_as_int(_require(rover_cfg, "x", "rover"), "rover.x"),
        start_y=_as_int(_require(rover_cfg, "y", "rover"), "rover.y"),
        heading=parse_heading(_require(rover_cfg, "heading", "rover")),
        commands=_as_commands(cfg.get("commands")),
        telemetry_path=telemetry_path,
    )


def load_scenario(path: str) -> Scenario:
    """Load a scenario from a YAML file."""
    try:
        cfg = load_yaml(path)
    except OSError as exc:
        raise ScenarioError(f"cannot read config {path!r}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ScenarioError(f"invalid YAML in {path!r}: {exc}") from exc
    return scenario_from_dict(cfg, base_dir=os.path.dirname(os.path.abspath(path)))


# ---------------------------------------------------------------------------
# Interactive console dialogue
# ---------------------------------------------------------------------------


def _read(label: str, input_fn: Callable[[str], str]) -> str:
    try:
        return input_fn("> ")
    except EOFError:
        raise ScenarioError(f"input ended before {label!r} was answered") from None


def _prompt_int(label: str, input_fn: Callable[[str], str], print_fn: Callable[..., None]) -> int:
    while True:
        print_fn(label)
        raw = _read(label, input_fn)
        try:
            return int(raw.strip())
        except ValueError:
            print_fn(f"Invalid number {raw.strip()!r}. Please enter an integer.")


def _prompt_pair(label: str, input_fn: Callable[[str], str], print_fn: Callable[..., None]) -> Tuple[int, int]:
    while True:
        print_fn(label)
        parts = _read(label, input_fn).replace(",", " ").split()
        if len(parts) == 2:
            try:
                return int(parts[0]), int(parts[1])
            except ValueError:
                pass
        print_fn("Invalid coordinates. Please enter two integers (x y).")


def prompt_scenario(
    input_fn: Callable[[str], str] = input,
    print_fn: Callable[..., None] = print,
) -> Scenario:
    """Ask for a scenario on the console.

    Numbers and the heading are re-asked until valid. Command tokens are read
    until the first token that is not M, L or R (or end of input). Input ending
    before the heading is answered raises ScenarioError.
    """
    width = _prompt_int("Enter grid width:", input_fn, print_fn)
    height = _prompt_int("Enter grid height:", input_fn, print_fn)

    count = _prompt_int("Enter number of obstacles:", input_fn, print_fn)
    obstacles = [
        _prompt_pair(f"Enter obstacle {i + 1} coordinates (x y):", input_fn, print_fn)
        for i in range(max(count, 0))
    ]

    start_x = _prompt_int("Enter rover starting x position:", input_fn, print_fn)
    start_y = _prompt_int("Enter rover starting y position:", input_fn, print_fn)

    heading: Optional[Heading] = None
    label = "Enter rover starting direction (N, E, S, W):"
    while heading is None:
        print_fn(label)
        raw = _read(label, input_fn)
        try:
            heading = Heading.parse(raw)
        except ValueError:
            print_fn("Invalid direction. Please enter N, E, S, or W.")

    print_fn(
        "Enter commands (M for move, L for turn left, R for turn right), "
        "end with a non-command character:"
    )
    tokens: List[str] = []
    while True:
        try:
            line = input_fn("> ")
        except EOFError:
            break
        words = line.split()
        tokens.extend(words)
        if any(Command.from_token(w) is None for w in words):
            break

    return Scenario(
        width=width,
        height=height,
        obstacles=obstacles,
        start_x=start_x,
        start_y=start_y,
        heading=heading,
        commands=parse_commands(tokens),
    )
