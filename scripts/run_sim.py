from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

# Ensure project root is on path when running this script directly
_script_dir = Path(__file__).resolve().parent
_project_root = _script_dir.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from grid_rover.commands import parse_commands, tokenize_commands
from grid_rover.heading import Heading
from grid_rover.render import render_ascii
from grid_rover.scenario import (
    Scenario,
    ScenarioError,
    parse_heading,
    parse_obstacles,
    load_scenario,
    prompt_scenario,
)
from grid_rover.simulator import Simulator
from telemetry.logger import TelemetryLogger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a grid rover command sequence and print its final status.")
    parser.add_argument("--config", type=str, default=None, help="Path to scenario YAML config.")
    parser.add_argument("--interactive", action="store_true", help="Ask for the scenario on the console.")
    parser.add_argument("--width", type=int, default=None, help="Grid width (overrides config).")
    parser.add_argument("--height", type=int, default=None, help="Grid height (overrides config).")
    parser.add_argument(
        "--obstacle",
        action="append",
        default=None,
        metavar="X,Y",
        help="Obstacle cell; repeat for several. Replaces config obstacles.",
    )
    parser.add_argument("--x", type=int, default=None, help="Rover start x.")
    parser.add_argument("--y", type=int, default=None, help="Rover start y.")
    parser.add_argument("--heading", type=str, default=None, help="Rover start heading (N, E, S, W).")
    parser.add_argument("--commands", type=str, default=None, help='Command string, e.g. "MMRMM" or "M M R".')
    parser.add_argument("--telemetry", type=str, default=None, help="Write JSONL step telemetry to this path.")
    parser.add_argument("--show-grid", action="store_true", help="Print the grid before and after the run.")
    parser.add_argument("--verbose", action="store_true", help="Print the outcome of every command.")
    return parser


def resolve_scenario(args: argparse.Namespace) -> Scenario:
    """Merge config file / interactive input with command-line overrides."""
    if args.interactive:
        scenario = prompt_scenario()
    elif args.config is not None:
        scenario = load_scenario(args.config)
    else:
        missing = [name for name in ("width", "height", "x", "y", "heading") if getattr(args, name) is None]
        if missing:
            flags = ", ".join(f"--{m}" for m in missing)
            raise ScenarioError(f"no --config given and missing {flags}")
        scenario = Scenario(width=0, height=0, start_x=0, start_y=0, heading=Heading.N)

    if args.width is not None:
        scenario.width = args.width
    if args.height is not None:
        scenario.height = args.height
    if args.obstacle is not None:
        scenario.obstacles = parse_obstacles(args.obstacle)
    if args.x is not None:
        scenario.start_x = args.x
    if args.y is not None:
        scenario.start_y = args.y
    if args.heading is not None:
        scenario.heading = parse_heading(args.heading, "--heading")
    if args.commands is not None:
        scenario.commands = parse_commands(tokenize_commands(args.commands))
    if args.telemetry is not None:
        scenario.telemetry_path = args.telemetry
    return scenario


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        scenario = resolve_scenario(args)
    except ScenarioError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    grid = scenario.build_grid()
    rover = scenario.build_rover(grid)

    if args.show_grid:
        print(render_ascii(grid, rover))
        print()

    logger = TelemetryLogger(scenario.telemetry_path) if scenario.telemetry_path else None
    try:
        result = Simulator(logger=logger).execute(rover, scenario.commands)
    finally:
        if logger is not None:
            logger.close()

    if args.verbose:
        for step in result.steps:
            outcome = step.outcome.value if step.outcome is not None else "turned"
            print(f"[{step.index}] {step.command.value}: {outcome} -> ({step.state.x}, {step.state.y}) {step.state.heading.value}")

    if args.show_grid:
        print(render_ascii(grid, rover))
        print()

    print(result.status)
    return 0


if __name__ == "__main__":
    sys.exit(main())
