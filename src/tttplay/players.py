"""
Player strategies. Every player exposes `play(board) -> int`: it applies
exactly one accepted move to the shared board and returns the cell played.

Kinds:
- random:  uniform over legal moves.
- greedy:  takes an immediate win for its side if one exists, else random.
           It does not look for the opponent's threats.
- minimax: exhaustive search, never loses.
- human:   reads a cell index from an input callable, retrying until the
           board accepts it.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional

import numpy as np

from .board import MARKS, Board
from .search import minimax
from .tactics import immediate_winning_moves

PLAYER_KINDS = ("random", "greedy", "minimax", "human")

PROMPT = "Your move (0-8): "
MSG_NOT_A_NUMBER = "Please enter a number between 0 and 8."
MSG_OUT_OF_RANGE = "Cell {} is out of range; choose 0-8."
MSG_OCCUPIED = "invalid move! cell {} is already taken."


def _require_playable(board: Board) -> None:
    if board.is_terminal():
        raise ValueError(f"No move possible on a finished board: {board.serialize()}")


class Player(ABC):
    name = "player"

    @abstractmethod
    def play(self, board: Board) -> int:
        raise NotImplementedError


class RandomPlayer(Player):
    name = "random player"

    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng if rng is not None else np.random.default_rng()

    def play(self, board: Board) -> int:
        _require_playable(board)
        mv = int(self.rng.choice(board.legal_moves()))
        board.apply_move(mv)
        return mv


class GreedyPlayer(Player):
    name = "greedy player"

    def __init__(self, side: int, rng: Optional[np.random.Generator] = None) -> None:
        self.side = side
        self.rng = rng if rng is not None else np.random.default_rng()

    def play(self, board: Board) -> int:
        _require_playable(board)
        wins = immediate_winning_moves(board, self.side)
        if wins:
            mv = wins[0]
            logging.debug("%s (%s) completes a line at %d", self.name, MARKS[self.side], mv)
        else:
            mv = int(self.rng.choice(board.legal_moves()))
        board.apply_move(mv)
        return mv


class MinimaxPlayer(Player):
    name = "minimax player"

    def play(self, board: Board) -> int:
        _require_playable(board)
        res = minimax(board, board.to_move)
        assert res.move is not None
        logging.debug("%s evaluated %d positions (score %d)", self.name, res.nodes, res.score)
        board.apply_move(res.move)
        return res.move


class HumanPlayer(Player):
    name = "human"

    def __init__(
        self,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self.read = read
        self.write = write

    def play(self, board: Board) -> int:
        _require_playable(board)
        while True:
            raw = self.read(PROMPT)
            try:
                mv = int(raw.strip())
            except ValueError:
                self.write(MSG_NOT_A_NUMBER)
                continue
            if not 0 <= mv <= 8:
                self.write(MSG_OUT_OF_RANGE.format(mv))
                continue
            if not board.apply_move(mv):
                self.write(MSG_OCCUPIED.format(mv))
                continue
            return mv


def make_player(
    kind: str,
    side: int,
    rng: Optional[np.random.Generator] = None,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> Player:
    if kind == "random":
        return RandomPlayer(rng)
    if kind == "greedy":
        return GreedyPlayer(side, rng)
    if kind == "minimax":
        return MinimaxPlayer()
    if kind == "human":
        return HumanPlayer(read=read, write=write)
    raise ValueError(f"Unknown player kind: {kind!r} (expected one of {', '.join(PLAYER_KINDS)})")
