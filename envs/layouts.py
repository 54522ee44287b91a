#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
layouts.py
----------
Built-in grid literals. The reference maze is 12x24 with the robot start at
(2, 2); goal markers are stamped on top of it per variant.

Every getter returns a *fresh* OccupancyGrid, so runs never share state.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Sequence, Tuple

from envs.grid import OccupancyGrid, Cell

REFERENCE_MAZE: Tuple[Tuple[int, ...], ...] = (
    (1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1),
    (1,0,0,0,0,0,0,0,0,1,0,0,0,0,0,0,0,0,0,0,0,0,0,1),
    (1,0,-1,0,0,0,0,0,0,1,0,0,0,0,0,0,0,1,1,1,1,1,0,1),
    (1,0,0,0,0,0,0,0,0,1,0,0,0,0,0,0,0,1,0,0,0,1,0,1),
    (1,0,0,0,0,0,0,0,0,1,0,0,0,1,1,1,1,1,0,0,0,1,0,1),
    (1,0,0,0,0,0,0,0,0,1,0,0,0,1,1,0,0,1,0,0,0,1,0,1),
    (1,0,1,1,1,1,1,1,1,1,0,0,0,1,0,0,0,1,0,0,0,1,0,1),
    (1,0,0,0,0,0,0,0,0,1,0,0,0,1,0,1,0,1,0,0,0,1,0,1),
    (1,0,0,0,0,0,0,0,0,1,0,0,0,1,1,1,0,1,0,0,0,1,0,1),
    (1,0,1,1,1,0,0,0,0,0,0,0,0,0,0,0,0,1,0,0,0,1,0,1),
    (1,0,0,0,1,0,1,1,1,1,0,0,0,0,0,0,0,1,0,0,0,0,0,1),
    (1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1),
)

# (row, col) -> goal rank
SINGLE_TARGET_GOALS: Dict[Cell, int] = {(4, 20): 9}
MULTI_TARGET_GOALS: Dict[Cell, int] = {
    (4, 20): 9,
    (7, 15): 8,
    (5, 5): 7,
    (9, 18): 6,
}

# Goal sealed off by a ring of walls; used to show the no-path outcome.
ENCLOSED_GOAL = (4, 5)
ENCLOSED_RING = [(3, 5), (5, 5), (4, 4), (4, 6)]


def stamp(base: Sequence[Sequence[int]], cells: Dict[Cell, int]) -> List[List[int]]:
    """Copy `base` and overwrite the given cells with the given codes."""
    out = [list(row) for row in base]
    for (r, c), code in cells.items():
        out[r][c] = code
    return out


def reference_grid() -> OccupancyGrid:
    """The bare maze: start marker only, no goals."""
    return OccupancyGrid(REFERENCE_MAZE)


def single_target_grid() -> OccupancyGrid:
    return OccupancyGrid(stamp(REFERENCE_MAZE, SINGLE_TARGET_GOALS))


def multi_target_grid() -> OccupancyGrid:
    return OccupancyGrid(stamp(REFERENCE_MAZE, MULTI_TARGET_GOALS))


def enclosed_goal_grid() -> OccupancyGrid:
    cells = {cell: 1 for cell in ENCLOSED_RING}
    cells[ENCLOSED_GOAL] = 9
    return OccupancyGrid(stamp(REFERENCE_MAZE, cells))


LAYOUTS: Dict[str, Callable[[], OccupancyGrid]] = {
    "single": single_target_grid,
    "multi": multi_target_grid,
    "enclosed": enclosed_goal_grid,
    "bare": reference_grid,
}


def get_layout(name: str) -> OccupancyGrid:
    name = name.strip().lower()
    if name not in LAYOUTS:
        raise ValueError(f"Unknown layout '{name}'. Available: {sorted(LAYOUTS)}")
    return LAYOUTS[name]()
