"""Matches between the search and a uniformly random opponent."""

import logging
from dataclasses import dataclass
from typing import List, Optional

from ..games.tictactoe import GameState, Player
from ..mcts.search import MCTSSearch

logger = logging.getLogger(__name__)


@dataclass
class MatchResult:
    """Outcome counts from the computer's point of view."""
    wins: int = 0
    draws: int = 0
    losses: int = 0

    @property
    def games(self) -> int:
        return self.wins + self.draws + self.losses

    @property
    def loss_rate(self) -> float:
        if self.games == 0:
            return 0.0
        return self.losses / self.games

    def record(self, reward: float) -> None:
        if reward > 0:
            self.wins += 1
        elif reward < 0:
            self.losses += 1
        else:
            self.draws += 1

    def as_list(self) -> List[int]:
        return [self.wins, self.draws, self.losses]


def play_game(
    search: Optional[MCTSSearch],
    first: Player = Player.HUMAN
) -> float:
    """Play one game of search (computer) against random moves (human).

    Args:
        search: Search used for the computer's moves; None makes both sides random
        first: Player to move first

    Returns:
        Final reward (+1 computer win, -1 human win, 0 draw)
    """
    state = GameState(player=first)

    while not state.is_terminal():
        if state.player is Player.COMPUTER and search is not None:
            index = search.search_child_index(state)
            cell = state.legal_moves()[index]
        else:
            cell = state.random_move()
        state.play(cell)

    return state.reward()


def play_match(
    search: Optional[MCTSSearch],
    games: int,
    first: Player = Player.HUMAN
) -> MatchResult:
    """Play `games` games and tally the outcomes."""
    result = MatchResult()

    for i in range(games):
        result.record(play_game(search, first))

        if (i + 1) % 10 == 0:
            logger.info(
                f"Game {i + 1}/{games}: wins={result.wins}, "
                f"draws={result.draws}, losses={result.losses}"
            )

    return result
