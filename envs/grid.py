#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
grid.py
-------
Occupancy-grid model for the A* robot simulations.

Raw cell codes (same convention as the built-in layouts):
    1   wall
    0   free
   -1   start (at most one)
    2   visited path (written only by mark_path)
   >5   goal; the value is the goal's rank (9, 8, 7, 6 in the reference maps)

The grid owns a numpy int8 code array plus a boolean *reached* overlay used in
multi-target runs. Only the methods below mutate either array.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

Cell = Tuple[int, int]  # (row, col)

WALL = 1
FREE = 0
START = -1
PATH = 2
MIN_GOAL_CODE = 6


# ------------------------------- Errors ------------------------------------ #

class OutOfBounds(IndexError):
    """A (row, col) query fell outside [0, H) x [0, W)."""

    def __init__(self, row: int, col: int, shape: Tuple[int, int]):
        self.row = row
        self.col = col
        self.shape = shape
        super().__init__(f"cell ({row}, {col}) is outside grid of shape {shape[0]}x{shape[1]}")


class NoStartOrGoal(ValueError):
    """The grid lacks a start marker or has no goal marker at all."""


# ------------------------------- Cell states ------------------------------- #

class CellKind(enum.Enum):
    FREE = "free"
    WALL = "wall"
    START = "start"
    GOAL = "goal"
    PATH = "path"


@dataclass(frozen=True)
class CellState:
    kind: CellKind
    rank: Optional[int] = None  # only set for goals

    @classmethod
    def from_code(cls, code: int) -> "CellState":
        code = int(code)
        if code == WALL:
            return cls(CellKind.WALL)
        if code == FREE:
            return cls(CellKind.FREE)
        if code == START:
            return cls(CellKind.START)
        if code == PATH:
            return cls(CellKind.PATH)
        if code >= MIN_GOAL_CODE:
            return cls(CellKind.GOAL, rank=code)
        raise ValueError(f"Unknown cell code {code}")


def _valid_code_mask(codes: np.ndarray) -> np.ndarray:
    return np.isin(codes, (WALL, FREE, START, PATH)) | (codes >= MIN_GOAL_CODE)


# ------------------------------- Grid model -------------------------------- #

class OccupancyGrid:
    """Fixed-size H x W grid of cell codes with a path-marking overlay."""

    def __init__(self, cells: Sequence[Sequence[int]]):
        codes = np.array(cells, dtype=np.int8)
        if codes.ndim != 2 or codes.size == 0:
            raise ValueError(f"Grid must be a non-empty 2D array, got shape {codes.shape}")
        bad = ~_valid_code_mask(codes)
        if bad.any():
            r, c = (int(v) for v in np.argwhere(bad)[0])
            raise ValueError(f"Invalid cell code {int(codes[r, c])} at ({r}, {c})")
        if int((codes == START).sum()) > 1:
            raise ValueError("Grid has more than one start marker")

        self._codes = codes
        self._reached = np.zeros(codes.shape, dtype=bool)

    # -- bounds -- #

    @property
    def shape(self) -> Tuple[int, int]:
        return self._codes.shape

    @property
    def H(self) -> int:
        return self._codes.shape[0]

    @property
    def W(self) -> int:
        return self._codes.shape[1]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.H and 0 <= col < self.W

    def _check(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise OutOfBounds(row, col, self.shape)

    # -- queries -- #

    def code_at(self, row: int, col: int) -> int:
        self._check(row, col)
        return int(self._codes[row, col])

    def state_at(self, row: int, col: int) -> CellState:
        return CellState.from_code(self.code_at(row, col))

    def is_traversable(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and self._codes[row, col] != WALL

    def is_reached(self, row: int, col: int) -> bool:
        self._check(row, col)
        return bool(self._reached[row, col])

    def find_start(self) -> Optional[Cell]:
        hits = np.argwhere(self._codes == START)
        if hits.size == 0:
            return None
        return (int(hits[0, 0]), int(hits[0, 1]))

    def find_goals(self) -> List[Cell]:
        """All goal cells in row-major scan order (this is the visiting order)."""
        # np.argwhere walks C-order, i.e. row-major
        return [(int(r), int(c)) for r, c in np.argwhere(self._codes >= MIN_GOAL_CODE)]

    def count(self, kind: CellKind) -> int:
        if kind is CellKind.GOAL:
            return int((self._codes >= MIN_GOAL_CODE).sum())
        code = {CellKind.WALL: WALL, CellKind.FREE: FREE,
                CellKind.START: START, CellKind.PATH: PATH}[kind]
        return int((self._codes == code).sum())

    def walls(self) -> np.ndarray:
        """(H, W) bool mask, True = wall."""
        return self._codes == WALL

    # -- mutation -- #

    def mark_path(self, row: int, col: int) -> bool:
        """Set a FREE cell to PATH. Start/goal/wall/path cells are left as-is."""
        self._check(row, col)
        if self._codes[row, col] != FREE:
            return False
        self._codes[row, col] = PATH
        return True

    def mark_path_cells(self, cells: Iterable[Cell]) -> int:
        return sum(1 for r, c in cells if self.mark_path(r, c))

    def mark_reached(self, row: int, col: int) -> bool:
        """Flag a goal cell as reached. Non-goal cells are ignored."""
        self._check(row, col)
        if self._codes[row, col] < MIN_GOAL_CODE:
            return False
        self._reached[row, col] = True
        return True

    def remove_start(self) -> Optional[Cell]:
        """Clear the start marker (turns it into a free cell). Returns where it was."""
        pos = self.find_start()
        if pos is not None:
            self._codes[pos] = FREE
        return pos

    # -- copies -- #

    def snapshot(self) -> Tuple[np.ndarray, np.ndarray]:
        """Read-only copies of (codes, reached)."""
        codes = self._codes.copy()
        reached = self._reached.copy()
        codes.setflags(write=False)
        reached.setflags(write=False)
        return codes, reached

    def copy(self) -> "OccupancyGrid":
        dup = OccupancyGrid(self._codes)
        dup._reached = self._reached.copy()
        return dup

    def to_list(self) -> List[List[int]]:
        return self._codes.tolist()

    def __repr__(self) -> str:
        return f"OccupancyGrid(H={self.H}, W={self.W}, start={self.find_start()}, goals={self.find_goals()})"
