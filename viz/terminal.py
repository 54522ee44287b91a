#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
terminal.py
-----------
ANSI frame renderer for the A* simulations.

One frame = title + fixed legend + colored grid dump (two characters per cell)
+ metrics panel. The renderer only reads FrameSnapshot objects; it never
touches the live grid.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import IO, List, Optional

import numpy as np

from envs.grid import MIN_GOAL_CODE, PATH, START, WALL, OccupancyGrid
from eval.metrics import PerformanceMetrics

DEFAULT_FRAME_DELAY = 0.1  # seconds per frame

RESET = "\x1b[0m"
GREEN = "\x1b[32m"
RED = "\x1b[31m"
BLUE = "\x1b[34m"
YELLOW = "\x1b[33m"
WHITE = "\x1b[37m"
MAGENTA = "\x1b[35m"
CYAN = "\x1b[36m"
BOLD = "\x1b[1m"

CLEAR_SCREEN = "\x1b[2J\x1b[H"

# goal rank -> style
GOAL_STYLES = {
    9: BOLD + BLUE,
    8: BOLD + MAGENTA,
    7: BOLD + YELLOW,
    6: BOLD + CYAN,
}
GOAL_STYLE_DEFAULT = BOLD + WHITE

SINGLE_TITLE = "Optimal Path Planning for Robot in a Dynamic Environment"
MULTI_TITLE = "Multi-Target Path Planning for Robot in a Dynamic Environment"


@dataclass(frozen=True)
class FrameSnapshot:
    cells: np.ndarray            # read-only int8 codes
    reached: np.ndarray          # read-only bool overlay
    metrics: PerformanceMetrics
    goal_index: int = 0
    total_goals: int = 1
    multi: bool = False

    @classmethod
    def capture(cls, grid: OccupancyGrid, metrics: PerformanceMetrics,
                goal_index: int = 0, total_goals: int = 1, multi: bool = False) -> "FrameSnapshot":
        cells, reached = grid.snapshot()
        return cls(cells=cells, reached=reached, metrics=metrics.snapshot(),
                   goal_index=goal_index, total_goals=total_goals, multi=multi)


def _paint(text: str, style: str, color: bool) -> str:
    return f"{style}{text}{RESET}" if color else text


def render_legend(snapshot: FrameSnapshot, color: bool = True) -> str:
    parts = [
        _paint("■", GREEN, color) + " Wall (1)",
        _paint("□", WHITE, color) + " Space (0)",
        _paint("●", RED, color) + " Start (-1)",
    ]
    ranks = sorted({int(v) for v in np.unique(snapshot.cells) if v >= MIN_GOAL_CODE}, reverse=True)
    if snapshot.multi:
        for i, rank in enumerate(ranks):
            parts.append(_paint("▲", GOAL_STYLES.get(rank, GOAL_STYLE_DEFAULT), color)
                         + f" Target {i + 1} ({rank})")
    else:
        for rank in ranks:
            parts.append(_paint("▲", GOAL_STYLES.get(rank, GOAL_STYLE_DEFAULT), color)
                         + f" Target ({rank})")
    parts.append(_paint("●", YELLOW, color) + " Path (2)")
    return "  ".join(parts)


def _render_cell(code: int, reached: bool, color: bool) -> str:
    if code == WALL:
        return _paint("██", GREEN, color)
    if code == START:
        return _paint(" R", RED, color)
    if code >= MIN_GOAL_CODE:
        if reached:
            return _paint(" .", YELLOW, color)
        return _paint(" ▲", GOAL_STYLES.get(code, GOAL_STYLE_DEFAULT), color)
    if code == PATH:
        return _paint(" .", YELLOW, color)
    return "  "


def render_grid(snapshot: FrameSnapshot, color: bool = True) -> str:
    H, W = snapshot.cells.shape
    rows: List[str] = []
    for r in range(H):
        rows.append("".join(_render_cell(int(snapshot.cells[r, c]), bool(snapshot.reached[r, c]), color)
                            for c in range(W)))
    return "\n".join(rows)


def render_stats(snapshot: FrameSnapshot, color: bool = True) -> str:
    m = snapshot.metrics
    lines = [
        _paint("=== Performance Metrics ===", CYAN, color),
        f"Nodes Explored: {m.nodes_explored}",
        f"Path Length: {m.path_length}",
        f"Execution Time: {m.execution_time_ms:.3f} ms",
    ]
    if snapshot.multi:
        lines += [
            f"Targets Reached: {m.targets_reached}/{snapshot.total_goals}",
            f"Current Target: {snapshot.goal_index + 1}",
        ]
    else:
        lines += [
            f"Obstacles: {m.obstacles}",
            f"Free Spaces: {m.free_spaces}",
        ]
    lines.append(_paint("========================", CYAN, color))
    return "\n".join(lines)


def render_frame(snapshot: FrameSnapshot, color: bool = True) -> str:
    title = MULTI_TITLE if snapshot.multi else SINGLE_TITLE
    return "\n".join([
        "",
        _paint(f"● {title}", GREEN, color),
        render_legend(snapshot, color),
        "",
        render_grid(snapshot, color),
        "",
        render_stats(snapshot, color),
    ]) + "\n"


class TerminalRenderer:
    """Visualization sink: clear the screen and draw one frame per call."""

    def __init__(self, stream: Optional[IO[str]] = None, clear: bool = True, color: bool = True):
        self.stream = stream if stream is not None else sys.stdout
        self.clear = clear
        self.color = color
        self.frames = 0

    def __call__(self, snapshot: FrameSnapshot) -> None:
        out = render_frame(snapshot, color=self.color)
        if self.clear:
            out = CLEAR_SCREEN + out
        self.stream.write(out)
        self.stream.flush()
        self.frames += 1
