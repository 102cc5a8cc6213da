from __future__ import annotations

from grid_rover.grid import Grid
from grid_rover.heading import Heading
from grid_rover.rover import MoveOutcome, Rover, RoverState


def test_move_forward_commits_free_cell() -> None:
    rover = Rover(x=1, y=1, heading=Heading.N, grid=Grid(3, 3))
    assert rover.move_forward() is MoveOutcome.MOVED
    assert rover.get_state() == RoverState(x=1, y=2, heading=Heading.N)


def test_move_into_obstacle_is_blocked() -> None:
    rover = Rover(x=0, y=0, heading=Heading.E, grid=Grid(3, 3, [(1, 0)]))
    outcome = rover.move_forward()
    assert outcome is MoveOutcome.BLOCKED_BY_OBSTACLE
    assert outcome.blocked
    assert rover.position == (0, 0)
    assert rover.heading is Heading.E


def test_move_off_grid_is_out_of_bounds() -> None:
    rover = Rover(x=0, y=0, heading=Heading.W, grid=Grid(3, 3))
    assert rover.move_forward() is MoveOutcome.OUT_OF_BOUNDS
    assert rover.position == (0, 0)


def test_blocked_move_is_idempotent() -> None:
    rover = Rover(x=1, y=1, heading=Heading.N, grid=Grid(2, 2))
    before = rover.get_state()
    for _ in range(5):
        assert rover.move_forward() is MoveOutcome.OUT_OF_BOUNDS
        assert rover.get_state() == before


def test_turns_change_heading_only() -> None:
    rover = Rover(x=2, y=2, heading=Heading.N, grid=Grid(5, 5))
    rover.turn_left()
    assert rover.heading is Heading.W
    rover.turn_right()
    rover.turn_right()
    assert rover.heading is Heading.E
    assert rover.position == (2, 2)


def test_initial_position_is_not_validated() -> None:
    grid = Grid(3, 3, [(1, 1)])
    rover = Rover(x=1, y=1, heading="s", grid=grid)
    assert rover.heading is Heading.S
    # Moving out of an obstacle cell onto a free one is allowed.
    assert rover.move_forward() is MoveOutcome.MOVED
    assert rover.position == (1, 0)


def test_status_report_format() -> None:
    rover = Rover(x=3, y=4, heading=Heading.W, grid=Grid(5, 5))
    assert rover.status_report() == "Rover is at (3, 4) facing W. No Obstacles detected."
    assert rover.to_dict() == {"x": 3, "y": 4, "heading": "W"}


def test_off_grid_obstacle_reports_out_of_bounds() -> None:
    rover = Rover(x=0, y=0, heading=Heading.W, grid=Grid(2, 2, [(-1, 0)]))
    assert rover.move_forward() is MoveOutcome.OUT_OF_BOUNDS
    assert rover.position == (0, 0)
