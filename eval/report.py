#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
report.py
---------
Plain-text performance reports written once per run.

- format_single_report(): one start -> one goal
- format_multi_report():  ordered goal sequence, totals over all legs
- write_report():         dump text to disk (parent dirs created)
- ReportWriter:           callable sink handed to the mission orchestrator
"""

from __future__ import annotations

import os
from typing import List, Optional, Sequence, Tuple

from eval.metrics import PerformanceMetrics

Cell = Tuple[int, int]

ALGORITHM_NAME = "A* Search"
SINGLE_REPORT_PATH = "single_target_report.txt"
MULTI_REPORT_PATH = "performance_report.txt"


def _fmt_cell(cell: Sequence[int]) -> str:
    return f"({int(cell[0])}, {int(cell[1])})"


def _path_lines(path: Sequence[Cell]) -> List[str]:
    return ["Path Coordinates:"] + [_fmt_cell(p) for p in path]


def format_single_report(metrics: PerformanceMetrics, shape: Tuple[int, int],
                         start: Cell, goal: Cell,
                         reachable_cells: Optional[int] = None) -> str:
    H, W = shape
    lines = [
        "=== Single-Target A* Path Planning Performance Report ===",
        "",
        f"Algorithm: {ALGORITHM_NAME}",
        f"Environment Size: {H}x{W}",
        "",
        "Performance Metrics:",
        "-------------------",
        f"Nodes Explored: {metrics.nodes_explored}",
        f"Path Length: {metrics.path_length}",
        f"Execution Time: {metrics.execution_time_ms:.3f} ms",
        f"Obstacles: {metrics.obstacles}",
        f"Free Spaces: {metrics.free_spaces}",
    ]
    if reachable_cells is not None:
        lines.append(f"Reachable Cells: {reachable_cells}")
    lines += [
        "",
        f"Start Position: {_fmt_cell(start)}",
        f"Target Position: {_fmt_cell(goal)}",
        "",
    ]
    lines += _path_lines(metrics.path)
    return "\n".join(lines) + "\n"


def format_multi_report(metrics: PerformanceMetrics, shape: Tuple[int, int],
                        goals: Sequence[Cell], legs: Sequence = ()) -> str:
    """`legs` holds LegResult-like objects (index, start, goal, found, metrics)."""
    H, W = shape
    lines = [
        "=== Multi-Target A* Path Planning Performance Report ===",
        "",
        f"Algorithm: {ALGORITHM_NAME}",
        f"Environment Size: {H}x{W}",
        f"Total Targets: {len(goals)}",
        "",
        "Performance Metrics:",
        "-------------------",
        f"Total Nodes Explored: {metrics.nodes_explored}",
        f"Total Path Length: {metrics.path_length}",
        f"Total Execution Time: {metrics.execution_time_ms:.3f} ms",
        f"Targets Successfully Reached: {metrics.targets_reached}",
        "",
        "Target Positions:",
    ]
    lines += [f"Target {i + 1}: {_fmt_cell(g)}" for i, g in enumerate(goals)]
    if legs:
        lines += ["", "Legs:"]
        for leg in legs:
            status = "reached" if leg.found else "no path"
            lines.append(
                f"Leg {leg.index + 1}: {_fmt_cell(leg.start)} -> {_fmt_cell(leg.goal)}  "
                f"{status}, nodes={leg.metrics.nodes_explored}, length={leg.metrics.path_length}"
            )
    lines.append("")
    lines += _path_lines(metrics.path)
    return "\n".join(lines) + "\n"


def write_report(text: str, path: str) -> str:
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    return path


class ReportWriter:
    """Report sink: called by the orchestrator with the finished MissionResult."""

    def __init__(self, path: Optional[str] = None):
        self.path = path
        self.last_path: Optional[str] = None

    def __call__(self, mission) -> str:
        if mission.mode == "single":
            text = format_single_report(mission.metrics, mission.shape, mission.start,
                                        mission.goals[0], reachable_cells=mission.reachable_cells)
            path = self.path or SINGLE_REPORT_PATH
        else:
            text = format_multi_report(mission.metrics, mission.shape, mission.goals, mission.legs)
            path = self.path or MULTI_REPORT_PATH
        self.last_path = write_report(text, path)
        return self.last_path
