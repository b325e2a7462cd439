"""
Exhaustive game-tree search (plain minimax, no pruning, no memoization).
Scoring is absolute, not side-to-move relative:
- +1 if X (side 0) wins, -1 if O (side 1) wins, 0 for a draw.
- X maximizes, O minimizes.
Tie-break policy:
- Moves are scanned in ascending cell order and only a strictly better score
  replaces the current best, so the lowest-index optimal move is returned.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .board import Board, other_side

MAXIMIZER = 0
MINIMIZER = 1

WIN_SCORE = {0: +1, 1: -1}
DRAW_SCORE = 0


@dataclass(frozen=True)
class SearchResult:
    score: int
    move: Optional[int]
    nodes: int


def terminal_score(board: Board) -> Optional[int]:
    if board.is_win(0):
        return WIN_SCORE[0]
    if board.is_win(1):
        return WIN_SCORE[1]
    if board.is_full():
        return DRAW_SCORE
    return None


def _search(board: Board, side: int, counter: List[int]) -> Tuple[int, Optional[int]]:
    counter[0] += 1
    score = terminal_score(board)
    if score is not None:
        return score, None
    best_score: Optional[int] = None
    best_move: Optional[int] = None
    for mv in board.legal_moves():
        with board.trial_move(mv):
            child_score, _ = _search(board, other_side(side), counter)
        if best_score is None:
            best_score, best_move = child_score, mv
        elif side == MAXIMIZER and child_score > best_score:
            best_score, best_move = child_score, mv
        elif side == MINIMIZER and child_score < best_score:
            best_score, best_move = child_score, mv
    assert best_score is not None, "non-terminal board without legal moves"
    return best_score, best_move


def minimax(board: Board, side: Optional[int] = None) -> SearchResult:
    """Search the full tree below `board` for `side` (default: side to move).

    The board is mutated during the search and restored before returning.
    On a terminal board the result carries the terminal score and no move.
    """
    if side is None:
        side = board.to_move
    counter = [0]
    before = board.cells
    score, move = _search(board, side, counter)
    assert board.cells == before, "search left the board modified"
    logging.debug("minimax side=%d score=%d move=%s nodes=%d", side, score, move, counter[0])
    return SearchResult(score=score, move=move, nodes=counter[0])


def principal_variation(board: Board) -> List[int]:
    """Optimal line from `board` to the end of the game under mutual best play."""
    scratch = board.copy()
    line: List[int] = []
    while True:
        res = minimax(scratch)
        if res.move is None:
            return line
        scratch.apply_move(res.move)
        line.append(res.move)
