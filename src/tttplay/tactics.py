"""
Tactics and simple motifs: immediate wins and forks.
Both helpers probe candidate moves in place and restore the board.
"""
from typing import List, Sequence

from .board import EMPTY, Board, has_won


def _threat_count(cells: Sequence[int], side: int) -> int:
    probe = list(cells)
    threats = 0
    for j, v in enumerate(probe):
        if v != EMPTY:
            continue
        probe[j] = side
        if has_won(probe, side):
            threats += 1
        probe[j] = EMPTY
    return threats


def immediate_winning_moves(board: Board, side: int) -> List[int]:
    wins: List[int] = []
    if board.to_move != side:
        return wins
    for i in board.legal_moves():
        with board.trial_move(i):
            if board.is_win(side):
                wins.append(i)
    return wins


def fork_moves(board: Board, side: int) -> List[int]:
    forks: List[int] = []
    if board.to_move != side:
        return forks
    for i in board.legal_moves():
        with board.trial_move(i):
            if board.is_win(side):
                continue
            if _threat_count(board.cells, side) >= 2:
                forks.append(i)
    return forks
