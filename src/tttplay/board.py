"""
Board state for Tic-Tac-Toe: cells, move counter, win/draw checks.
Notes:
- Cells hold EMPTY (-1) or a side (0 = X, 1 = O). X always moves first.
- The side to move is move_count % 2; there is no separate turn flag.
- undo_move is a backtracking primitive: it must mirror the last apply_move.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

EMPTY = -1
SIDES = (0, 1)
MARKS = {0: "X", 1: "O"}

WIN_PATTERNS = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)

BOARD_TEMPLATE = "0|1|2\n-----\n3|4|5\n-----\n6|7|8"

_EMPTY_CHARS = ".-_"


def other_side(side: int) -> int:
    return 1 - side


def has_won(cells: Sequence[int], side: int) -> bool:
    for a, b, c in WIN_PATTERNS:
        if cells[a] == side and cells[b] == side and cells[c] == side:
            return True
    return False


def is_reachable(cells: Sequence[int]) -> bool:
    """True if the cells can arise from legal play with X moving first."""
    x = sum(1 for v in cells if v == 0)
    o = sum(1 for v in cells if v == 1)
    if not (x == o or x == o + 1):
        return False
    x_won, o_won = has_won(cells, 0), has_won(cells, 1)
    if x_won and o_won:
        return False
    if x_won and x != o + 1:
        return False
    if o_won and x != o:
        return False
    return True


def parse_board(text: str) -> List[int]:
    """Parse a 9-character board string into cell values.

    X/O (any case) are sides; '.', '-', '_' and digits are empty.
    """
    raw = text.strip()
    if len(raw) != 9:
        raise ValueError(f"Board string must have 9 cells, got {len(raw)}: {text!r}")
    cells: List[int] = []
    for ch in raw:
        up = ch.upper()
        if up == "X":
            cells.append(0)
        elif up == "O":
            cells.append(1)
        elif ch in _EMPTY_CHARS or ch.isdigit():
            cells.append(EMPTY)
        else:
            raise ValueError(f"Invalid board character {ch!r} in {text!r}")
    return cells


class Board:
    def __init__(self) -> None:
        self._cells: List[int] = [EMPTY] * 9
        self._move_count = 0

    @classmethod
    def from_cells(cls, cells: Iterable[int]) -> "Board":
        values = list(cells)
        if len(values) != 9:
            raise ValueError(f"Board needs 9 cells, got {len(values)}")
        for v in values:
            if v not in (EMPTY, 0, 1):
                raise ValueError(f"Invalid cell value: {v!r}")
        board = cls()
        board._cells = values
        board._move_count = sum(1 for v in values if v != EMPTY)
        return board

    @classmethod
    def from_string(cls, text: str) -> "Board":
        return cls.from_cells(parse_board(text))

    @property
    def cells(self) -> Tuple[int, ...]:
        return tuple(self._cells)

    @property
    def move_count(self) -> int:
        return self._move_count

    @property
    def to_move(self) -> int:
        return self._move_count % 2

    def copy(self) -> "Board":
        return Board.from_cells(self._cells)

    def apply_move(self, cell: int) -> bool:
        """Place the side to move on `cell`.

        Returns False (and leaves the board untouched) if the cell is taken.
        Raises IndexError for indices outside 0..8.
        """
        if not 0 <= cell <= 8:
            raise IndexError(f"Cell index out of range: {cell}")
        if self._cells[cell] != EMPTY:
            logging.debug("invalid move! cell %d is occupied by %s", cell, MARKS[self._cells[cell]])
            return False
        self._cells[cell] = self.to_move
        self._move_count += 1
        return True

    def undo_move(self, cell: int) -> None:
        assert self._cells[cell] != EMPTY, f"undo of empty cell {cell}"
        assert self._move_count > 0, "undo with no moves applied"
        self._cells[cell] = EMPTY
        self._move_count -= 1

    @contextmanager
    def trial_move(self, cell: int) -> Iterator["Board"]:
        """Apply `cell` for the duration of the block, then undo it."""
        if not self.apply_move(cell):
            raise ValueError(f"Cannot try occupied cell {cell}")
        try:
            yield self
        finally:
            self.undo_move(cell)

    def is_win(self, side: int) -> bool:
        return has_won(self._cells, side)

    def is_full(self) -> bool:
        return EMPTY not in self._cells

    def winner(self) -> Optional[int]:
        for side in SIDES:
            if self.is_win(side):
                return side
        return None

    def is_terminal(self) -> bool:
        return self.winner() is not None or self.is_full()

    def legal_moves(self) -> List[int]:
        return [i for i, v in enumerate(self._cells) if v == EMPTY]

    def render(self) -> str:
        text = BOARD_TEMPLATE
        for i, v in enumerate(self._cells):
            if v != EMPTY:
                text = text.replace(str(i), MARKS[v])
        return text

    def serialize(self) -> str:
        return "".join(MARKS[v] if v != EMPTY else "." for v in self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells and self._move_count == other._move_count

    def __repr__(self) -> str:
        return f"Board({self.serialize()!r}, move_count={self._move_count})"

    def __str__(self) -> str:
        return self.render()
