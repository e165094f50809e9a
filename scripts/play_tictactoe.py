#!/usr/bin/env python3
"""Play tic-tac-toe against the search on the console.

Cells are entered as digits:

    1 2 3
    4 5 6
    7 8 9

Usage:
    python scripts/play_tictactoe.py --iterations 1000
    python scripts/play_tictactoe.py --config configs/default.yaml --computer_first
"""

import argparse
import logging

from arena_mcts.games.tictactoe import GameState, Player, move_between
from arena_mcts.mcts.search import MCTSSearch
from arena_mcts.utils.config import load_config
from arena_mcts.utils.logging import setup_logging
from arena_mcts.utils.seed import set_seed

logger = logging.getLogger(__name__)


def read_human_move(state: GameState) -> int:
    """Prompt until the human enters a free cell."""
    while True:
        text = input("Your move (1-9): ").strip()
        try:
            cell = int(text) - 1
        except ValueError:
            print("Please enter a single digit between 1 and 9.")
            continue
        if not 0 <= cell < 9:
            print("Please enter a single digit between 1 and 9.")
            continue
        if cell not in state.legal_moves():
            print(f"Field {cell + 1} already taken!")
            continue
        return cell


def main():
    parser = argparse.ArgumentParser(description="Play tic-tac-toe against MCTS")
    parser.add_argument("--config", type=str, default=None,
                        help="YAML config file")
    parser.add_argument("--iterations", type=int, default=None,
                        help="Search iterations per computer move")
    parser.add_argument("--exploration", type=float, default=None,
                        help="UCB1 exploration constant")
    parser.add_argument("--final_selection", type=str, default=None,
                        choices=["ucb1", "most_visited"],
                        help="How the computer picks its move at the root")
    parser.add_argument("--computer_first", action="store_true",
                        help="Let the computer open the game")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--verbose", action="store_true", help="Log search progress")

    args = parser.parse_args()

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    config = load_config(args.config, {
        "iterations": args.iterations,
        "exploration": args.exploration,
        "final_selection": args.final_selection,
        "seed": args.seed
    })
    set_seed(config.seed)

    search = MCTSSearch(config)
    state = GameState(player=Player.COMPUTER if args.computer_first else Player.HUMAN)

    while not state.is_terminal():
        print(state)
        if state.player is Player.HUMAN:
            state.play(read_human_move(state))
        else:
            next_state = search.search(state)
            cell = move_between(state, next_state)
            logger.info(f"Computer plays {cell + 1}: {search.get_statistics()}")
            state = next_state

    print(state)
    winner = state.winner()
    if winner is Player.HUMAN:
        print("You won human, this cannot be!")
    elif winner is Player.COMPUTER:
        print("I won human, you will never defeat me!")
    else:
        print("Game over! It's a draw.")


if __name__ == "__main__":
    main()
