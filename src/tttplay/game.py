"""Turn loop: two players alternate on one shared board until a win or a draw."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from .board import MARKS, Board
from .players import Player


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass
class GameResult:
    status: GameStatus
    winner: Optional[int] = None
    moves: List[int] = field(default_factory=list)

    def message(self) -> str:
        if self.status is GameStatus.WON and self.winner is not None:
            return f"{MARKS[self.winner]} wins"
        if self.status is GameStatus.DRAW:
            return "draw"
        return "in progress"


def evaluate_after_move(board: Board, side: int) -> Tuple[GameStatus, Optional[int]]:
    """Status after `side` has moved: its win first, then a full board."""
    if board.is_win(side):
        return GameStatus.WON, side
    if board.is_full():
        return GameStatus.DRAW, None
    return GameStatus.IN_PROGRESS, None


def play_game(
    players: Sequence[Player],
    board: Optional[Board] = None,
    write: Callable[[str], None] = print,
) -> GameResult:
    if len(players) != 2:
        raise ValueError(f"Exactly two players are required, got {len(players)}")
    if board is None:
        board = Board()
    result = GameResult(status=GameStatus.IN_PROGRESS)
    if board.is_terminal():
        raise ValueError(f"Cannot start a game on a finished board: {board.serialize()}")

    while result.status is GameStatus.IN_PROGRESS:
        side = board.to_move
        player = players[side]
        mv = player.play(board)
        result.moves.append(mv)
        logging.debug("%s (%s) -> %d", player.name, MARKS[side], mv)
        write(f"{player.name}: {mv}")
        write(board.render())
        result.status, result.winner = evaluate_after_move(board, side)

    write(result.message())
    logging.info("game over after %d moves: %s", board.move_count, result.message())
    return result
