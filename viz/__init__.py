# -*- coding: utf-8 -*-
"""
Terminal visualization of A* runs (ANSI frames).
"""

from __future__ import annotations

from .terminal import (
    DEFAULT_FRAME_DELAY,
    FrameSnapshot,
    TerminalRenderer,
    render_frame,
)

__all__ = [
    "DEFAULT_FRAME_DELAY",
    "FrameSnapshot",
    "TerminalRenderer",
    "render_frame",
]
