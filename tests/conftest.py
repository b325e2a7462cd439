import pytest

from tttplay.board import Board
from tttplay.search import minimax


@pytest.fixture(scope="session")
def empty_board_result():
    # full-tree search from the opening; shared because it is the slowest call
    return minimax(Board())
