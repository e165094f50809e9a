#!/usr/bin/env python3
"""Evaluate the search against a uniformly random tic-tac-toe opponent.

Plays a match, then tests whether the computer loses significantly less
often than a random player would in its seat.

Usage:
    python experiments/evaluate_vs_random.py \
        --config configs/default.yaml \
        --games 100 \
        --iterations 1000
"""

import argparse
import logging

from arena_mcts.comparison.match import play_match
from arena_mcts.comparison.statistical_tests import match_significance_test
from arena_mcts.games.tictactoe import Player
from arena_mcts.mcts.search import MCTSSearch
from arena_mcts.utils.config import load_config, load_yaml
from arena_mcts.utils.logging import setup_logging
from arena_mcts.utils.seed import set_seed

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Evaluate MCTS against random play")
    parser.add_argument("--config", type=str, default=None,
                        help="YAML config file")
    parser.add_argument("--games", type=int, default=None,
                        help="Number of games")
    parser.add_argument("--iterations", type=int, default=None,
                        help="Search iterations per move")
    parser.add_argument("--final_selection", type=str, default=None,
                        choices=["ucb1", "most_visited"])
    parser.add_argument("--computer_first", action="store_true",
                        help="Computer opens every game")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--log_file", type=str, default=None)

    args = parser.parse_args()

    setup_logging(logging.INFO, args.log_file)

    evaluation = load_yaml(args.config).get('evaluation', {}) if args.config else {}
    games = args.games or evaluation.get('games', 100)
    alpha = evaluation.get('alpha', 0.05)

    config = load_config(args.config, {
        "iterations": args.iterations,
        "final_selection": args.final_selection,
        "seed": args.seed,
        "log_every": 0
    })
    set_seed(config.seed)

    first = Player.COMPUTER if args.computer_first else Player.HUMAN
    search = MCTSSearch(config)

    logger.info("=" * 60)
    logger.info(f"MCTS ({config.iterations} iterations, {config.final_selection}) vs random")
    logger.info("=" * 60)

    result = play_match(search, games, first)
    summary = match_significance_test(result, first, alpha=alpha)

    logger.info(f"Wins: {result.wins}, Draws: {result.draws}, Losses: {result.losses}")
    logger.info(f"Loss rate: {result.loss_rate:.3f}")
    if 'error' in summary:
        logger.warning(summary['error'])
        return

    logger.info(f"Random baseline loss rate: {summary['baseline_loss_rate']:.3f}")
    logger.info(f"Binomial test p-value: {summary['p_value']:.2e}")
    logger.info(f"Chi-square vs random outcomes: {summary['chi2']:.2f} "
                f"(p={summary['chi2_p_value']:.2e})")
    logger.info(f"Significantly better than random: {summary['significant']}")


if __name__ == "__main__":
    main()
