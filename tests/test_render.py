from __future__ import annotations

from grid_rover.grid import Grid
from grid_rover.heading import Heading
from grid_rover.render import render_ascii
from grid_rover.rover import Rover


def test_render_draws_obstacles_and_rover() -> None:
    grid = Grid(width=3, height=2, obstacles=[(2, 1)])
    rover = Rover(x=0, y=0, heading=Heading.E, grid=grid)
    assert render_ascii(grid, rover) == "..#\n>.."


def test_render_without_rover_and_degenerate_grid() -> None:
    assert render_ascii(Grid(2, 1)) == ".."
    assert render_ascii(Grid(0, 4)) == ""


def test_render_skips_rover_outside_grid() -> None:
    grid = Grid(2, 2)
    rover = Rover(x=5, y=5, heading=Heading.N, grid=grid)
    assert render_ascii(grid, rover) == "..\n.."
