"""tttplay package.

Board state machine, exhaustive minimax search, player strategies and a
console game loop.

Convenience imports are exposed for common workflows.
"""

from .board import Board
from .game import GameResult, GameStatus, play_game
from .players import GreedyPlayer, HumanPlayer, MinimaxPlayer, RandomPlayer, make_player
from .search import minimax

__all__ = [
    "Board",
    "minimax",
    "play_game",
    "GameResult",
    "GameStatus",
    "make_player",
    "RandomPlayer",
    "GreedyPlayer",
    "MinimaxPlayer",
    "HumanPlayer",
]
