#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
A* path planner for 4-connected occupancy grids.
- Walls block; every other cell (free, start, goal, path) is traversable.
- Heuristic: Manhattan. Unit step cost.
- Frontier entries are (f, h, arena_index): equal f prefers the lower h
  (deeper node), then insertion order.
- Nodes live in a per-search arena and point at their parent by index; the
  frontier is never updated in place, stale duplicates are skipped on pop.

find_path(grid, start, goal, on_expand=None) -> SearchResult, raises NotFound.
plan(grid, start, goal) -> {'success': bool, 'path': list[(r,c)] or None, 'metrics': ...}.
"""

from __future__ import annotations

import heapq
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

from envs.grid import OccupancyGrid, OutOfBounds
from eval.metrics import PerformanceMetrics
from planners.grid_utils import DELTAS_4, heuristic, neighbors

Cell = Tuple[int, int]
ExpandCallback = Callable[[OccupancyGrid, PerformanceMetrics], None]

NO_PARENT = -1


@dataclass
class SearchNode:
    pos: Cell
    g: int
    h: int
    parent: int = NO_PARENT  # arena index

    @property
    def f(self) -> int:
        return self.g + self.h


@dataclass
class SearchResult:
    path: List[Cell]               # start..goal inclusive
    metrics: PerformanceMetrics

    @property
    def length(self) -> int:
        return self.metrics.path_length


class NotFound(Exception):
    """The frontier drained before the goal was reached."""

    def __init__(self, start: Cell, goal: Cell, metrics: PerformanceMetrics):
        self.start = start
        self.goal = goal
        self.metrics = metrics
        super().__init__(f"no path from {start} to {goal} "
                         f"({metrics.nodes_explored} nodes explored)")


class AStarPlanner:
    name = "A* Search"

    def __init__(self, frame_delay: float = 0.0,
                 sleep: Callable[[float], None] = time.sleep,
                 clock: Callable[[], float] = time.perf_counter):
        if frame_delay < 0:
            raise ValueError(f"frame_delay must be >= 0, got {frame_delay}")
        self.frame_delay = float(frame_delay)
        self.deltas = DELTAS_4
        self._sleep = sleep
        self._clock = clock

    @staticmethod
    def _reconstruct(arena: List[SearchNode], idx: int) -> List[Cell]:
        path: List[Cell] = []
        while idx != NO_PARENT:
            node = arena[idx]
            path.append(node.pos)
            idx = node.parent
        path.reverse()
        return path

    def _elapsed_ms(self, t0: float) -> float:
        return (self._clock() - t0) * 1000.0

    def find_path(self, grid: OccupancyGrid, start: Cell, goal: Cell,
                  on_expand: Optional[ExpandCallback] = None) -> SearchResult:
        start = (int(start[0]), int(start[1]))
        goal = (int(goal[0]), int(goal[1]))
        for cell in (start, goal):
            if not grid.in_bounds(*cell):
                raise OutOfBounds(cell[0], cell[1], grid.shape)

        t0 = self._clock()
        metrics = PerformanceMetrics()
        closed = np.zeros(grid.shape, dtype=bool)

        arena: List[SearchNode] = [SearchNode(start, 0, heuristic(start, goal))]
        pq: List[Tuple[int, int, int]] = [(arena[0].f, arena[0].h, 0)]

        while pq:
            _, _, idx = heapq.heappop(pq)
            current = arena[idx]
            metrics.nodes_explored += 1

            # Stale duplicate of an already finalized position
            if closed[current.pos]:
                continue
            closed[current.pos] = True
            metrics.nodes_expanded += 1

            if current.pos == goal:
                path = self._reconstruct(arena, idx)
                grid.mark_path_cells(path[1:-1])
                metrics.path = path
                metrics.path_length = len(path) - 1
                metrics.execution_time_ms = self._elapsed_ms(t0)
                return SearchResult(path=path, metrics=metrics)

            for nb in neighbors(current.pos, self.deltas):
                if not grid.is_traversable(*nb) or closed[nb]:
                    continue
                arena.append(SearchNode(nb, current.g + 1, heuristic(nb, goal), parent=idx))
                child = arena[-1]
                heapq.heappush(pq, (child.f, child.h, len(arena) - 1))

            if on_expand is not None:
                metrics.execution_time_ms = self._elapsed_ms(t0)
                on_expand(grid, metrics.snapshot())
            if self.frame_delay > 0:
                self._sleep(self.frame_delay)

        metrics.execution_time_ms = self._elapsed_ms(t0)
        raise NotFound(start, goal, metrics)

    def plan(self, grid: OccupancyGrid, start: Cell, goal: Cell) -> Dict:
        try:
            res = self.find_path(grid, start, goal)
        except NotFound as e:
            return {'success': False, 'path': None, 'metrics': e.metrics}
        return {'success': True, 'path': res.path, 'metrics': res.metrics}
