from __future__ import annotations

from grid_rover.commands import Command, parse_commands
from grid_rover.grid import Grid
from grid_rover.heading import Heading
from grid_rover.rover import MoveOutcome, Rover, RoverState
from grid_rover.simulator import Simulator
from telemetry.logger import TelemetryLogger, read_records

M, L, R = Command.MOVE, Command.TURN_LEFT, Command.TURN_RIGHT


def test_open_grid_scenario() -> None:
    rover = Rover(x=0, y=0, heading=Heading.N, grid=Grid(5, 5))
    status = Simulator().run(rover, [M, M, R, M, M])
    assert rover.get_state() == RoverState(x=2, y=2, heading=Heading.E)
    assert "(2, 2)" in status
    assert "E" in status
    assert status == "Rover is at (2, 2) facing E. No Obstacles detected."


def test_obstacle_blocks_every_attempt() -> None:
    rover = Rover(x=0, y=0, heading=Heading.E, grid=Grid(3, 3, [(1, 0)]))
    result = Simulator().execute(rover, [M, M])
    assert [s.outcome for s in result.steps] == [MoveOutcome.BLOCKED_BY_OBSTACLE] * 2
    assert result.final_state == RoverState(x=0, y=0, heading=Heading.E)
    assert result.blocked_moves == 2
    assert result.moves == 0


def test_out_of_bounds_move_keeps_state() -> None:
    rover = Rover(x=1, y=1, heading=Heading.N, grid=Grid(2, 2))
    result = Simulator().execute(rover, [M])
    assert result.steps[0].outcome is MoveOutcome.OUT_OF_BOUNDS
    assert result.final_state == RoverState(x=1, y=1, heading=Heading.N)


def test_empty_sequence_reports_initial_state() -> None:
    rover = Rover(x=3, y=1, heading=Heading.S, grid=Grid(4, 4))
    initial = rover.status_report()
    result = Simulator().execute(rover, [])
    assert result.status == initial
    assert result.steps == []


def test_run_continues_after_blocked_moves() -> None:
    grid = Grid(3, 3, [(0, 1)])
    rover = Rover(x=0, y=0, heading=Heading.N, grid=grid)
    result = Simulator().execute(rover, parse_commands("MRMMLM"))
    outcomes = [s.outcome for s in result.steps]
    assert outcomes == [
        MoveOutcome.BLOCKED_BY_OBSTACLE,
        None,
        MoveOutcome.MOVED,
        MoveOutcome.MOVED,
        None,
        MoveOutcome.MOVED,
    ]
    assert result.final_state == RoverState(x=2, y=1, heading=Heading.N)
    assert [s.index for s in result.steps] == list(range(6))


def test_telemetry_records_steps_and_summary(tmp_path) -> None:
    path = tmp_path / "logs" / "run.jsonl"
    rover = Rover(x=0, y=0, heading=Heading.E, grid=Grid(2, 1))
    with TelemetryLogger(str(path)) as logger:
        status = Simulator(logger=logger).run(rover, [M, M, L])

    records = read_records(str(path))
    assert [r["event"] for r in records] == ["step", "step", "step", "summary"]
    assert records[0] == {"event": "step", "index": 0, "command": "M", "outcome": "moved", "x": 1, "y": 0, "heading": "E"}
    assert records[1]["outcome"] == "out_of_bounds"
    assert records[2]["outcome"] is None
    assert records[2]["heading"] == "N"
    summary = records[-1]
    assert summary["status"] == status
    assert summary["moves"] == 1
    assert summary["blocked_moves"] == 1
    assert summary["commands"] == 3
