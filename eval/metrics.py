#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
metrics.py
----------
Performance metrics for A* runs and static environment statistics.

What's inside
-------------
- PerformanceMetrics: counters filled by the search engine, aggregated by the
  mission orchestrator (multi-target runs sum legs together)
- environment_stats(): wall / free counts of an OccupancyGrid
- reachable_region_size(): 4-connected free region size around a cell
- is_valid_path(): adjacency + traversability check for a (r, c) path
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

try:
    from scipy.ndimage import label as cc_label
except Exception as e:
    raise ImportError(
        "scipy.ndimage is required. Install with: pip install scipy"
    ) from e

from envs.grid import CellKind, OccupancyGrid

Cell = Tuple[int, int]

# 4-connectivity structuring element (no diagonals)
CROSS = np.array([[0, 1, 0],
                  [1, 1, 1],
                  [0, 1, 0]], dtype=np.uint8)


@dataclass
class PerformanceMetrics:
    nodes_explored: int = 0       # frontier pops, stale ones included
    nodes_expanded: int = 0       # positions closed (each at most once)
    path_length: int = 0          # parent links walked
    execution_time_ms: float = 0.0
    path: List[Cell] = field(default_factory=list)
    targets_reached: int = 0
    obstacles: int = 0
    free_spaces: int = 0

    def snapshot(self) -> "PerformanceMetrics":
        """Independent copy, safe to hand to a sink."""
        return replace(self, path=list(self.path))

    def absorb(self, leg: "PerformanceMetrics", reached: bool) -> None:
        """Fold one leg into running totals.

        Explored nodes and time always add up; path length and coordinates
        only for legs that reached their goal. The junction cell shared by
        consecutive legs is kept once.
        """
        self.nodes_explored += leg.nodes_explored
        self.nodes_expanded += leg.nodes_expanded
        self.execution_time_ms += leg.execution_time_ms
        if not reached:
            return
        self.path_length += leg.path_length
        route = leg.path
        if self.path and route and self.path[-1] == route[0]:
            route = route[1:]
        self.path.extend(route)


def environment_stats(grid: OccupancyGrid) -> Dict[str, int]:
    """Wall and free-cell counts, taken before any path is marked."""
    return {
        "obstacles": grid.count(CellKind.WALL),
        "free_spaces": grid.count(CellKind.FREE),
    }


def reachable_region_size(grid: OccupancyGrid, start: Cell) -> int:
    """Number of traversable cells 4-connected to `start` (start included)."""
    if not grid.is_traversable(*start):
        return 0
    labels, _ = cc_label((~grid.walls()).astype(np.uint8), structure=CROSS)
    return int((labels == labels[start]).sum())


def is_valid_path(grid: OccupancyGrid, path: Sequence[Cell],
                  start: Optional[Cell] = None, goal: Optional[Cell] = None) -> bool:
    """Unit 4-connected steps over traversable cells, optionally pinned at both ends."""
    if not path:
        return False
    if start is not None and tuple(path[0]) != tuple(start):
        return False
    if goal is not None and tuple(path[-1]) != tuple(goal):
        return False
    for r, c in path:
        if not grid.is_traversable(r, c):
            return False
    for (r0, c0), (r1, c1) in zip(path[:-1], path[1:]):
        if abs(r1 - r0) + abs(c1 - c0) != 1:
            return False
    return True
