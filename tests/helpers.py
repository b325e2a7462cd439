from typing import Iterable, List, Optional

from tttplay.board import Board


def play_out(moves: Iterable[int], board: Optional[Board] = None) -> Board:
    """Apply moves in order, stopping early once the game is decided."""
    b = board if board is not None else Board()
    for mv in moves:
        if b.is_terminal():
            break
        assert b.apply_move(mv)
    return b


def scripted(lines: List[str]):
    """Input callable that replays `lines` and records the prompts it was given."""
    it = iter(lines)
    prompts: List[str] = []

    def read(prompt: str) -> str:
        prompts.append(prompt)
        return next(it)

    read.prompts = prompts  # type: ignore[attr-defined]
    return read
