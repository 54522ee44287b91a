#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
missions.py
-----------
Run orchestration: glue between the A* engine, the terminal renderer and the
report writer.

- run_single_target(): one search from the grid's start to its only goal
- run_multi_target():  goals visited in row-major scan order, each leg starting
                       where the previous successful leg arrived

Both return a MissionResult. Metrics of a multi-target run are totals over
all legs; each LegResult keeps its own per-leg metrics.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from envs.grid import NoStartOrGoal, OccupancyGrid
from eval.metrics import PerformanceMetrics, environment_stats, reachable_region_size
from planners.a_star import AStarPlanner, NotFound
from viz.terminal import FrameSnapshot

Cell = Tuple[int, int]
FrameSink = Callable[[FrameSnapshot], None]


@dataclass
class LegResult:
    index: int
    start: Cell
    goal: Cell
    found: bool
    metrics: PerformanceMetrics

    @property
    def path(self) -> List[Cell]:
        return self.metrics.path


@dataclass
class MissionResult:
    mode: str                    # "single" | "multi"
    shape: Tuple[int, int]
    start: Cell
    goals: List[Cell]
    legs: List[LegResult] = field(default_factory=list)
    metrics: PerformanceMetrics = field(default_factory=PerformanceMetrics)
    final_position: Optional[Cell] = None
    reachable_cells: Optional[int] = None

    @property
    def success(self) -> bool:
        # A multi-target run completes even when some legs fail.
        if self.mode == "single":
            return bool(self.legs) and self.legs[0].found
        return True

    @property
    def exit_code(self) -> int:
        return 0 if self.success else 1

    @property
    def searches(self) -> int:
        return len(self.legs)


def locate_start_and_goals(grid: OccupancyGrid) -> Tuple[Cell, List[Cell]]:
    start = grid.find_start()
    goals = grid.find_goals()
    if start is None or not goals:
        raise NoStartOrGoal(
            f"grid needs a start marker and at least one goal "
            f"(start={start}, goals={len(goals)})"
        )
    return start, goals


def _frame_adapter(on_frame: Optional[FrameSink], totals: PerformanceMetrics,
                   goal_index: int, total_goals: int, multi: bool):
    """Wrap a frame sink into the engine's on_expand(grid, metrics) callback."""
    if on_frame is None:
        return None

    def _on_expand(grid: OccupancyGrid, leg_metrics: PerformanceMetrics) -> None:
        # leg_metrics is already a private copy
        leg_metrics.targets_reached = totals.targets_reached
        leg_metrics.obstacles = totals.obstacles
        leg_metrics.free_spaces = totals.free_spaces
        on_frame(FrameSnapshot.capture(grid, leg_metrics, goal_index, total_goals, multi))

    return _on_expand


def run_single_target(grid: OccupancyGrid,
                      planner: Optional[AStarPlanner] = None,
                      on_frame: Optional[FrameSink] = None,
                      report: Optional[Callable[[MissionResult], object]] = None,
                      verbose: bool = False) -> MissionResult:
    start, goals = locate_start_and_goals(grid)
    if len(goals) != 1:
        raise ValueError(f"single-target run expects exactly one goal, found {len(goals)}")
    goal = goals[0]
    planner = planner or AStarPlanner()

    totals = PerformanceMetrics(**environment_stats(grid))
    mission = MissionResult(mode="single", shape=grid.shape, start=start, goals=goals,
                            metrics=totals, final_position=start,
                            reachable_cells=reachable_region_size(grid, start))

    cb = _frame_adapter(on_frame, totals, 0, 1, multi=False)
    try:
        res = planner.find_path(grid, start, goal, on_expand=cb)
    except NotFound as e:
        mission.legs.append(LegResult(0, start, goal, False, e.metrics))
        totals.absorb(e.metrics, reached=False)
        if verbose:
            print("No path found.")
        return mission

    mission.legs.append(LegResult(0, start, goal, True, res.metrics))
    totals.absorb(res.metrics, reached=True)
    mission.final_position = goal

    if on_frame is not None:
        on_frame(FrameSnapshot.capture(grid, totals, 0, 1, multi=False))
    if report is not None:
        report(mission)
    return mission


def run_multi_target(grid: OccupancyGrid,
                     planner: Optional[AStarPlanner] = None,
                     on_frame: Optional[FrameSink] = None,
                     report: Optional[Callable[[MissionResult], object]] = None,
                     verbose: bool = True) -> MissionResult:
    start, goals = locate_start_and_goals(grid)
    planner = planner or AStarPlanner()

    totals = PerformanceMetrics(**environment_stats(grid))
    mission = MissionResult(mode="multi", shape=grid.shape, start=start, goals=goals,
                            metrics=totals, final_position=start)
    current = start

    for i, goal in enumerate(goals):
        cb = _frame_adapter(on_frame, totals, i, len(goals), multi=True)
        try:
            res = planner.find_path(grid, current, goal, on_expand=cb)
        except NotFound as e:
            mission.legs.append(LegResult(i, current, goal, False, e.metrics))
            totals.absorb(e.metrics, reached=False)
            if verbose:
                print(f"No path found to target {i + 1}")
            continue

        mission.legs.append(LegResult(i, current, goal, True, res.metrics))
        totals.absorb(res.metrics, reached=True)
        current = goal
        grid.mark_reached(*goal)
        totals.targets_reached += 1

    mission.final_position = current

    if on_frame is not None:
        on_frame(FrameSnapshot.capture(grid, totals, len(goals) - 1, len(goals), multi=True))
    if report is not None:
        report(mission)
    return mission
