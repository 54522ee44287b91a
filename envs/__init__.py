# -*- coding: utf-8 -*-
"""
Grid model and built-in layouts.
Exposes:
- OccupancyGrid, CellState, CellKind (grid.py)
- OutOfBounds, NoStartOrGoal (grid.py)
- get_layout(...) and the named layout builders (layouts.py)
"""

from __future__ import annotations

from .grid import CellKind, CellState, NoStartOrGoal, OccupancyGrid, OutOfBounds
from .layouts import (
    LAYOUTS,
    enclosed_goal_grid,
    get_layout,
    multi_target_grid,
    reference_grid,
    single_target_grid,
)

__all__ = [
    "OccupancyGrid",
    "CellState",
    "CellKind",
    "OutOfBounds",
    "NoStartOrGoal",
    "LAYOUTS",
    "get_layout",
    "reference_grid",
    "single_target_grid",
    "multi_target_grid",
    "enclosed_goal_grid",
]
