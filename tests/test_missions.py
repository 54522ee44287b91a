#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from envs.grid import CellKind, NoStartOrGoal, OccupancyGrid
from envs.layouts import (MULTI_TARGET_GOALS, REFERENCE_MAZE, enclosed_goal_grid,
                          multi_target_grid, single_target_grid, stamp)
from eval.metrics import is_valid_path, reachable_region_size
from missions import run_multi_target, run_single_target
from planners.a_star import AStarPlanner

# --- Helpers ------------------------------------------------------------------

class CountingPlanner(AStarPlanner):
    """A* that counts find_path invocations."""
    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.calls = 0

    def find_path(self, grid, start, goal, on_expand=None):
        self.calls += 1
        return super().find_path(grid, start, goal, on_expand=on_expand)

class Sink:
    def __init__(self):
        self.items = []

    def __call__(self, item):
        self.items.append(item)

def multi_grid_with_sealed_goal():
    """Multi layout where the (5, 5) target is walled in on all four sides."""
    cells = dict(MULTI_TARGET_GOALS)
    cells.update({(4, 5): 1, (5, 4): 1, (5, 6): 1})  # (6, 5) is already a wall
    return OccupancyGrid(stamp(REFERENCE_MAZE, cells))

# --- Single target ------------------------------------------------------------

def test_single_target_success_reports_once():
    grid = single_target_grid()
    walls = grid.count(CellKind.WALL)
    free = grid.count(CellKind.FREE)
    report = Sink()
    mission = run_single_target(grid, report=report)
    assert mission.success and mission.exit_code == 0
    assert mission.final_position == (4, 20)
    assert mission.searches == 1
    assert mission.metrics.path_length == 54
    assert mission.metrics.obstacles == walls
    assert mission.metrics.free_spaces == free
    assert mission.reachable_cells == reachable_region_size(single_target_grid(), (2, 2))
    assert report.items == [mission]

def test_single_target_no_path():
    grid = enclosed_goal_grid()
    report = Sink()
    mission = run_single_target(grid, report=report)
    assert not mission.success
    assert mission.exit_code == 1
    assert mission.final_position == mission.start
    assert report.items == []
    assert grid.count(CellKind.PATH) == 0

def test_single_target_rejects_several_goals():
    with pytest.raises(ValueError):
        run_single_target(multi_target_grid())

def test_single_target_frames():
    frames = Sink()
    mission = run_single_target(single_target_grid(), on_frame=frames)
    leg = mission.legs[0].metrics
    # one frame per non-goal expansion + the final frame
    assert len(frames.items) == leg.nodes_expanded
    last = frames.items[-1]
    assert not last.multi
    assert last.metrics.path_length == 54
    assert last.metrics.obstacles == mission.metrics.obstacles
    assert not last.cells.flags.writeable

# --- Multi target -------------------------------------------------------------

def test_multi_target_reference_run():
    grid = multi_target_grid()
    report = Sink()
    mission = run_multi_target(grid, report=report, verbose=False)
    assert mission.goals == [(4, 20), (5, 5), (7, 15), (9, 18)]
    assert mission.metrics.targets_reached == 4
    assert mission.final_position == (9, 18)
    assert mission.exit_code == 0
    assert [leg.found for leg in mission.legs] == [True] * 4
    assert [leg.start for leg in mission.legs] == [(2, 2), (4, 20), (5, 5), (7, 15)]
    assert all(grid.is_reached(*g) for g in mission.goals)
    assert report.items == [mission]

def test_multi_target_metrics_accumulate():
    grid = multi_target_grid()
    mission = run_multi_target(grid, verbose=False)
    legs = [leg.metrics for leg in mission.legs]
    total = mission.metrics
    assert total.nodes_explored == sum(m.nodes_explored for m in legs)
    assert total.path_length == sum(m.path_length for m in legs)
    assert total.execution_time_ms == pytest.approx(sum(m.execution_time_ms for m in legs))
    # continuous route: junction cells are not repeated
    assert len(total.path) == total.path_length + 1
    assert total.path[0] == (2, 2) and total.path[-1] == (9, 18)
    assert is_valid_path(grid, total.path)

def test_multi_target_failed_leg_keeps_position(capsys):
    grid = multi_grid_with_sealed_goal()
    mission = run_multi_target(grid, verbose=True)
    assert "No path found to target 2" in capsys.readouterr().out
    assert [leg.found for leg in mission.legs] == [True, False, True, True]
    # leg 3 starts where leg 1 arrived
    assert mission.legs[2].start == (4, 20)
    assert mission.metrics.targets_reached == 3
    assert mission.final_position == (9, 18)
    assert mission.exit_code == 0
    assert not grid.is_reached(5, 5)

def test_multi_target_frames_carry_goal_index():
    frames = Sink()
    mission = run_multi_target(multi_target_grid(), on_frame=frames, verbose=False)
    expanded = sum(leg.metrics.nodes_expanded - 1 for leg in mission.legs)
    assert len(frames.items) == expanded + 1
    first, last = frames.items[0], frames.items[-1]
    assert first.multi and first.goal_index == 0 and first.total_goals == 4
    assert first.metrics.targets_reached == 0
    assert last.goal_index == 3
    assert last.metrics.targets_reached == 4
    assert sorted({f.goal_index for f in frames.items}) == [0, 1, 2, 3]

# --- Missing markers ------------------------------------------------------------

def test_missing_start_aborts_before_search():
    grid = multi_target_grid()
    grid.remove_start()
    planner = CountingPlanner()
    report = Sink()
    with pytest.raises(NoStartOrGoal):
        run_multi_target(grid, planner=planner, report=report)
    with pytest.raises(NoStartOrGoal):
        run_single_target(grid, planner=planner, report=report)
    assert planner.calls == 0
    assert report.items == []

def test_missing_goals_aborts():
    grid = OccupancyGrid(REFERENCE_MAZE)
    planner = CountingPlanner()
    with pytest.raises(NoStartOrGoal):
        run_multi_target(grid, planner=planner)
    assert planner.calls == 0
