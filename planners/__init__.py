# -*- coding: utf-8 -*-
"""
Grid planners with a unified API:
planner.plan(grid: OccupancyGrid, start: (r,c), goal: (r,c))
  -> {'success': bool, 'path': List[(r,c)] or None, 'metrics': PerformanceMetrics}
"""

from __future__ import annotations
from typing import Dict, Type

from .a_star import AStarPlanner, NotFound, SearchNode, SearchResult
from .grid_utils import DELTAS_4, heuristic, neighbors

# Mapping used by factories/CLIs
PLANNERS: Dict[str, Type] = {
    "a_star": AStarPlanner,
}


def get_planner(name: str, **kwargs) -> AStarPlanner:
    """Instantiate a planner by name; kwargs go to its constructor."""
    name = name.strip().lower()
    if name not in PLANNERS:
        raise ValueError(f"Unknown planner '{name}'. Available: {sorted(PLANNERS)}")
    return PLANNERS[name](**kwargs)


__all__ = [
    "AStarPlanner",
    "NotFound",
    "SearchNode",
    "SearchResult",
    "DELTAS_4",
    "heuristic",
    "neighbors",
    "PLANNERS",
    "get_planner",
]
