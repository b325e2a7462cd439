import numpy as np
import pytest

from tttplay.board import Board
from tttplay.players import (
    MSG_NOT_A_NUMBER,
    MSG_OCCUPIED,
    MSG_OUT_OF_RANGE,
    PLAYER_KINDS,
    PROMPT,
    GreedyPlayer,
    HumanPlayer,
    MinimaxPlayer,
    RandomPlayer,
    make_player,
)

from helpers import play_out, scripted


class LastChoice:
    """Stand-in generator that always picks the last candidate."""

    def choice(self, seq):
        return seq[-1]


def test_random_player_plays_one_legal_move():
    b = play_out([4])
    legal = b.legal_moves()
    mv = RandomPlayer(np.random.default_rng(0)).play(b)
    assert mv in legal
    assert b.move_count == 2
    assert b.cells[mv] == 1


def test_random_player_is_reproducible_with_seed():
    picks = []
    for _ in range(2):
        b = Board()
        p = RandomPlayer(np.random.default_rng(123))
        picks.append([p.play(b) for _ in range(5)])
    assert picks[0] == picks[1]


def test_greedy_takes_immediate_win_as_x():
    b = Board.from_string("XX.OO....")
    assert GreedyPlayer(0, LastChoice()).play(b) == 2
    assert b.is_win(0)


def test_greedy_takes_immediate_win_as_o():
    b = Board.from_string("XX.OO.X..")
    assert GreedyPlayer(1, LastChoice()).play(b) == 5
    assert b.is_win(1)


def test_greedy_picks_lowest_winning_cell():
    b = Board.from_string("XX.XOO.O.")
    assert GreedyPlayer(0, LastChoice()).play(b) == 2


def test_greedy_does_not_block_opponent():
    # X threatens 2; O has no win of its own and falls back to the generator
    b = play_out([0, 4, 1])
    assert GreedyPlayer(1, LastChoice()).play(b) == 8
    assert b.move_count == 4


def test_greedy_for_the_other_side_never_sees_a_win():
    # configured as O while X is to move with a win available
    b = Board.from_string("XX.OO....")
    assert GreedyPlayer(1, LastChoice()).play(b) == 8
    assert not b.is_win(0)


def test_minimax_player_completes_line():
    b = Board.from_string("XX.......")
    assert MinimaxPlayer().play(b) == 2
    assert b.is_win(0)


def test_human_retries_until_move_accepted():
    b = play_out([4])
    written = []
    read = scripted(["abc", "", "-1", "9", "4", " 7 "])
    mv = HumanPlayer(read=read, write=written.append).play(b)
    assert mv == 7
    assert b.cells[7] == 1
    assert b.move_count == 2
    assert read.prompts == [PROMPT] * 6
    assert written == [
        MSG_NOT_A_NUMBER,
        MSG_NOT_A_NUMBER,
        MSG_OUT_OF_RANGE.format(-1),
        MSG_OUT_OF_RANGE.format(9),
        MSG_OCCUPIED.format(4),
    ]


def test_human_rejections_leave_board_unchanged():
    b = play_out([4])
    snapshot = b.copy()
    read = scripted(["x", "10", "4"])
    with pytest.raises(StopIteration):
        HumanPlayer(read=read, write=lambda s: None).play(b)
    assert b == snapshot


def test_human_eof_propagates():
    def read(prompt):
        raise EOFError

    with pytest.raises(EOFError):
        HumanPlayer(read=read, write=lambda s: None).play(Board())


@pytest.mark.parametrize("player", [
    RandomPlayer(np.random.default_rng(0)),
    GreedyPlayer(0, np.random.default_rng(0)),
    MinimaxPlayer(),
    HumanPlayer(read=lambda p: "0", write=lambda s: None),
])
def test_players_refuse_finished_board(player):
    b = Board.from_string("XXX.OO...")
    with pytest.raises(ValueError):
        player.play(b)


@pytest.mark.parametrize("kind,cls", [
    ("random", RandomPlayer),
    ("greedy", GreedyPlayer),
    ("minimax", MinimaxPlayer),
    ("human", HumanPlayer),
])
def test_make_player_kinds(kind, cls):
    p = make_player(kind, 1, np.random.default_rng(0))
    assert isinstance(p, cls)
    assert kind in PLAYER_KINDS


def test_make_player_greedy_keeps_side():
    assert make_player("greedy", 1).side == 1


def test_make_player_unknown_kind():
    with pytest.raises(ValueError):
        make_player("alphabeta", 0)
