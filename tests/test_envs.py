#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import numpy as np
import pytest

from envs.grid import CellKind, NoStartOrGoal, OccupancyGrid, OutOfBounds, PATH
from envs.layouts import (REFERENCE_MAZE, get_layout, multi_target_grid,
                          reference_grid, single_target_grid, stamp)

def test_reference_bounds_and_states():
    grid = single_target_grid()
    assert grid.shape == (12, 24)
    assert (grid.H, grid.W) == (12, 24)
    assert grid.state_at(2, 2).kind is CellKind.START
    assert grid.state_at(0, 0).kind is CellKind.WALL
    assert grid.state_at(1, 1).kind is CellKind.FREE
    goal = grid.state_at(4, 20)
    assert goal.kind is CellKind.GOAL and goal.rank == 9
    assert grid.find_start() == (2, 2)
    assert grid.find_goals() == [(4, 20)]

@pytest.mark.parametrize("cell", [(-1, 0), (0, -1), (12, 0), (0, 24)])
def test_state_at_out_of_bounds(cell):
    grid = single_target_grid()
    with pytest.raises(OutOfBounds):
        grid.state_at(*cell)
    # still an IndexError for callers that only know the builtin
    with pytest.raises(IndexError):
        grid.state_at(*cell)

def test_traversable():
    grid = single_target_grid()
    assert not grid.is_traversable(0, 0)       # wall
    assert not grid.is_traversable(-1, 3)      # outside
    assert not grid.is_traversable(3, 24)
    assert grid.is_traversable(2, 2)           # start
    assert grid.is_traversable(4, 20)          # goal
    assert grid.is_traversable(1, 1)

def test_mark_path_only_on_free_and_idempotent():
    grid = single_target_grid()
    assert grid.mark_path(1, 1) is True
    assert grid.state_at(1, 1).kind is CellKind.PATH
    assert grid.mark_path(1, 1) is False
    assert grid.state_at(1, 1).kind is CellKind.PATH

    for cell, kind in [((2, 2), CellKind.START), ((4, 20), CellKind.GOAL), ((0, 0), CellKind.WALL)]:
        assert grid.mark_path(*cell) is False
        assert grid.state_at(*cell).kind is kind

def test_multi_goals_row_major_order():
    grid = multi_target_grid()
    assert grid.find_goals() == [(4, 20), (5, 5), (7, 15), (9, 18)]
    assert [grid.state_at(*g).rank for g in grid.find_goals()] == [9, 7, 8, 6]

def test_invalid_grids_rejected():
    with pytest.raises(ValueError):
        OccupancyGrid(stamp(REFERENCE_MAZE, {(1, 1): 3}))
    with pytest.raises(ValueError):
        OccupancyGrid(stamp(REFERENCE_MAZE, {(1, 1): -1}))  # second start
    with pytest.raises(ValueError):
        OccupancyGrid([1, 0, 1])

def test_no_start_is_allowed_at_construction():
    grid = single_target_grid()
    assert grid.remove_start() == (2, 2)
    assert grid.find_start() is None
    assert grid.state_at(2, 2).kind is CellKind.FREE
    # NoStartOrGoal is raised by the orchestrator, not the model
    assert issubclass(NoStartOrGoal, ValueError)

def test_mark_reached_only_goals():
    grid = multi_target_grid()
    assert grid.mark_reached(5, 5) is True
    assert grid.is_reached(5, 5)
    assert grid.state_at(5, 5).kind is CellKind.GOAL
    assert grid.mark_reached(1, 1) is False
    assert not grid.is_reached(1, 1)

def test_snapshot_is_read_only_copy():
    grid = single_target_grid()
    cells, reached = grid.snapshot()
    with pytest.raises(ValueError):
        cells[1, 1] = PATH
    grid.mark_path(1, 1)
    assert cells[1, 1] == 0
    assert reached.dtype == bool and not reached.any()

def test_copy_is_independent():
    grid = single_target_grid()
    dup = grid.copy()
    dup.mark_path(1, 1)
    assert grid.state_at(1, 1).kind is CellKind.FREE
    assert dup.state_at(1, 1).kind is CellKind.PATH

def test_counts():
    grid = reference_grid()
    walls = int((np.array(REFERENCE_MAZE) == 1).sum())
    assert grid.count(CellKind.WALL) == walls
    assert grid.count(CellKind.START) == 1
    assert grid.count(CellKind.GOAL) == 0
    assert grid.count(CellKind.FREE) == 12 * 24 - walls - 1

def test_layouts_are_fresh():
    a = get_layout("single")
    a.mark_path(1, 1)
    b = get_layout("single")
    assert b.state_at(1, 1).kind is CellKind.FREE
    with pytest.raises(ValueError):
        get_layout("nope")
