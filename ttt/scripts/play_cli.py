import argparse
import sys
from typing import List, Optional

from ttt.config import PlayConfig, load_config_from_yaml
from ttt.env.state import Board, PlayerIdentity
from ttt.agents.random import RandomAgent
from ttt.eval.games import play_game

SEPARATOR = "-" * 10


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Watch two random players play Tic-Tac-Toe")
    parser.add_argument("--config", default=None,
                        help="YAML file with seed / show_summary")
    parser.add_argument("--seed", type=int, default=None,
                        help="RNG seed (overrides the config file)")
    parser.add_argument("--summary", action="store_true",
                        help="print the outcome after the final board")
    args = parser.parse_args(argv)

    cfg = load_config_from_yaml(args.config) if args.config else PlayConfig()
    if args.seed is not None:
        cfg.seed = args.seed
    if args.summary:
        cfg.show_summary = True

    # Both players share one generator so a seed fixes the whole game
    rand_X = RandomAgent(PlayerIdentity.X, seed=cfg.seed)
    rand_O = RandomAgent(PlayerIdentity.O, rng=rand_X.rng)

    def show(board: Board) -> None:
        print(board.render())
        print(SEPARATOR)

    result = play_game(rand_X, rand_O, on_move=show)
    if cfg.show_summary:
        print(result.describe())
    return 0


if __name__ == "__main__":
    sys.exit(main())
