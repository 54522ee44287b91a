#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pure helpers over (row, col) grid coordinates shared by the planners.
"""

from __future__ import annotations

from typing import Iterator, Sequence, Tuple

import numpy as np

Cell = Tuple[int, int]

# 4-connected neighborhood deltas: up, down, left, right.
# The order decides tie-breaks between equal-cost routes; keep it fixed.
DELTAS_4 = np.array([(-1, 0), (1, 0), (0, -1), (0, 1)], dtype=np.int8)


def heuristic(a: Cell, b: Cell) -> int:
    """Manhattan distance; admissible and consistent for unit 4-connected moves."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def neighbors(pos: Cell, deltas: Sequence = DELTAS_4) -> Iterator[Cell]:
    """Yield the unit-step positions around `pos` in delta order (unfiltered)."""
    r, c = pos
    for dr, dc in deltas:
        yield (r + int(dr), c + int(dc))
