from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .board import MARKS, Board, is_reachable, parse_board
from .config import GameConfig
from .game import play_game
from .players import PLAYER_KINDS, make_player
from .search import minimax, principal_variation
from .tactics import fork_moves, immediate_winning_moves

BOARD_HELP = "Board string of 9 cells, X/O for marks and '.' for empty, e.g. X...O...."


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt", description="Console tic-tac-toe")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--info",
        action="store_true",
        help="Print environment and dependency info and exit",
    )
    p.add_argument(
        "--seed", type=int, default=None, help="Seed for the random strategies (overrides TTT_SEED)"
    )

    p_play = sub.add_parser("play", help="Play one game between two strategies")
    p_play.add_argument(
        "--x",
        choices=PLAYER_KINDS,
        default=None,
        help="Strategy for X, who moves first (default: TTT_PLAYER_X or greedy)",
    )
    p_play.add_argument(
        "--o",
        choices=PLAYER_KINDS,
        default=None,
        help="Strategy for O (default: TTT_PLAYER_O or random)",
    )
    # same dest as the global flag; SUPPRESS keeps a value given before the subcommand
    p_play.add_argument(
        "--seed",
        type=int,
        default=argparse.SUPPRESS,
        help="Seed for the random strategies (overrides TTT_SEED)",
    )

    p_sol = sub.add_parser("solve", help="Minimax value, best move and optimal line for side-to-move")
    p_sol.add_argument("--board", required=True, help=BOARD_HELP)

    p_tac = sub.add_parser("tactics", help="List immediate wins and forks for side-to-move")
    p_tac.add_argument("--board", required=True, help=BOARD_HELP)

    return p


def _print_info() -> None:
    import importlib.util
    import platform
    import sys

    print(f"python={sys.version.split()[0]} platform={platform.platform()}")
    for pkg in ["numpy"]:
        spec = importlib.util.find_spec(pkg)
        if spec is None:
            print(f"{pkg}=<not installed>")
        else:
            mod = __import__(pkg)
            ver = getattr(mod, "__version__", "?")
            print(f"{pkg}={ver}")


def _load_board(raw: str) -> Optional[Board]:
    try:
        cells = parse_board(raw)
    except ValueError as e:
        logging.error("Invalid board string: %s", e)
        return None
    if not is_reachable(cells):
        logging.error("Board is not a valid reachable state.")
        return None
    return Board.from_cells(cells)


def _run_play(ns: argparse.Namespace) -> int:
    try:
        cfg = GameConfig.from_env().override(player_x=ns.x, player_o=ns.o, seed=ns.seed)
    except ValueError as e:
        logging.error("%s", e)
        return 2
    logging.debug("config=%s", cfg)
    rng = cfg.rng()
    players = [
        make_player(cfg.player_x, 0, rng),
        make_player(cfg.player_o, 1, rng),
    ]
    logging.info(
        "%s (%s) vs %s (%s)",
        players[0].name, MARKS[0], players[1].name, MARKS[1],
    )
    try:
        play_game(players)
    except (EOFError, KeyboardInterrupt):
        logging.error("Game aborted.")
        return 1
    return 0


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    # Early exits
    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("tttplay"))
        except Exception:
            print("unknown")
        return 0
    if getattr(ns, "info", False):
        _print_info()
        return 0

    if ns.cmd == "play":
        return _run_play(ns)

    if ns.cmd == "solve":
        b = _load_board(ns.board)
        if b is None:
            return 2
        res = minimax(b)
        logging.info(
            "value=%d move=%s nodes=%d line=%s",
            res.score,
            res.move,
            res.nodes,
            principal_variation(b),
        )
        return 0

    if ns.cmd == "tactics":
        b = _load_board(ns.board)
        if b is None:
            return 2
        p = b.to_move
        logging.info(
            "to_move=%s wins=%s forks=%s",
            MARKS[p],
            immediate_winning_moves(b, p),
            fork_moves(b, p),
        )
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
