#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Shared argparse flags and console helpers for the run_single / run_multi CLIs.
Defaults reproduce the reference demo: Enter prompt, 100 ms frames, colors on.
"""

from __future__ import annotations

import argparse

from envs.layouts import LAYOUTS
from viz.terminal import DEFAULT_FRAME_DELAY

NO_START_OR_GOAL_MSG = "Error: No start position or targets found!"


def build_parser(description: str, default_layout: str, default_report: str) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description=description)
    ap.add_argument("--layout", type=str, default=default_layout, choices=sorted(LAYOUTS),
                    help="Built-in grid layout to run on")
    ap.add_argument("--delay", type=float, default=DEFAULT_FRAME_DELAY,
                    help="Seconds to pause after each rendered frame (0 disables pacing)")
    ap.add_argument("--no-prompt", action="store_true",
                    help="Start immediately instead of waiting for Enter")
    ap.add_argument("--no-clear", action="store_true",
                    help="Do not clear the screen between frames")
    ap.add_argument("--no-color", action="store_true",
                    help="Plain text frames without ANSI colors")
    ap.add_argument("--report", type=str, default=default_report,
                    help="Where to write the plain-text performance report")
    return ap


def wait_for_enter(enabled: bool) -> None:
    if not enabled:
        return
    try:
        input("Press Enter to begin...")
    except EOFError:
        # stdin closed (piped run); start right away
        print()
