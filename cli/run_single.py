#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
run_single.py
-------------
Single-target A* demo: animate the search from the robot start to the goal,
then write the performance report.

Example:
    python -m cli.run_single
    python -m cli.run_single --no-prompt --delay 0 --report out/single.txt

Exit code 0 when a path is found, 1 when none exists or the layout has no
start/goal.
"""

from __future__ import annotations

import sys
from typing import List, Optional

from cli.common import NO_START_OR_GOAL_MSG, build_parser, wait_for_enter
from envs.grid import NoStartOrGoal
from envs.layouts import get_layout
from eval.report import SINGLE_REPORT_PATH, ReportWriter
from missions import locate_start_and_goals, run_single_target
from planners.a_star import AStarPlanner
from viz.terminal import TerminalRenderer


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser("Single-target A* path planning with terminal animation.",
                      default_layout="single", default_report=SINGLE_REPORT_PATH)
    args = ap.parse_args(argv)

    grid = get_layout(args.layout)
    try:
        locate_start_and_goals(grid)
    except NoStartOrGoal:
        print(NO_START_OR_GOAL_MSG)
        return 1

    print("\nStarting Single-Target Path Planning...")
    wait_for_enter(not args.no_prompt)

    renderer = TerminalRenderer(clear=not args.no_clear, color=not args.no_color)
    planner = AStarPlanner(frame_delay=args.delay)
    writer = ReportWriter(args.report)

    try:
        mission = run_single_target(grid, planner, on_frame=renderer, report=writer, verbose=True)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    if not mission.success:
        return mission.exit_code

    print("\nPath visualization complete.")
    print(f"\nPerformance report has been saved to '{writer.last_path}'")
    return mission.exit_code


if __name__ == "__main__":
    sys.exit(main())
