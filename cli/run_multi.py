#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
run_multi.py
------------
Multi-target A* demo: visit every goal in row-major scan order, one animated
search per leg, then write the aggregated performance report.

Example:
    python -m cli.run_multi
    python -m cli.run_multi --no-prompt --delay 0 --no-clear

Exit code 0 once all legs were attempted (failed legs are reported and
skipped), 1 when the layout has no start or no goals.
"""

from __future__ import annotations

import sys
from typing import List, Optional

from cli.common import NO_START_OR_GOAL_MSG, build_parser, wait_for_enter
from envs.grid import NoStartOrGoal
from envs.layouts import get_layout
from eval.report import MULTI_REPORT_PATH, ReportWriter
from missions import locate_start_and_goals, run_multi_target
from planners.a_star import AStarPlanner
from viz.terminal import TerminalRenderer


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser("Multi-target A* path planning with terminal animation.",
                      default_layout="multi", default_report=MULTI_REPORT_PATH)
    args = ap.parse_args(argv)

    grid = get_layout(args.layout)
    try:
        locate_start_and_goals(grid)
    except NoStartOrGoal:
        print(NO_START_OR_GOAL_MSG)
        return 1

    print("\nStarting Multi-Target Path Planning...")
    wait_for_enter(not args.no_prompt)

    renderer = TerminalRenderer(clear=not args.no_clear, color=not args.no_color)
    planner = AStarPlanner(frame_delay=args.delay)
    writer = ReportWriter(args.report)

    mission = run_multi_target(grid, planner, on_frame=renderer, report=writer, verbose=True)

    print("\nMulti-target path planning complete.")
    print(f"Targets reached: {mission.metrics.targets_reached}/{len(mission.goals)}")
    print(f"\nPerformance report has been saved to '{writer.last_path}'")
    return mission.exit_code


if __name__ == "__main__":
    sys.exit(main())
