"""Pytest fixtures for testing."""

import pytest
import random
import numpy as np
from dataclasses import dataclass
from typing import Tuple

from arena_mcts.mcts.domain import SearchDomain
from arena_mcts.games.tictactoe import GameState, Player


@dataclass
class ChoiceSequence(SearchDomain):
    """Deterministic toy domain.

    A game is `depth` choices from range(branching). A finished game is
    worth the sum of its choices; random completion always picks 0, so
    `terminate` is the sum of the choices made so far.
    """
    choices: Tuple[int, ...] = ()
    depth: int = 2
    branching: int = 2

    def available_moves(self):
        if len(self.choices) >= self.depth:
            return []
        return [
            ChoiceSequence(self.choices + (i,), self.depth, self.branching)
            for i in range(self.branching)
        ]

    def terminate(self) -> float:
        return float(sum(self.choices))


@pytest.fixture
def seed():
    """Set random seed for reproducibility."""
    seed_value = 42
    random.seed(seed_value)
    np.random.seed(seed_value)
    return seed_value


@pytest.fixture
def choice_game():
    """Root state of a depth-2, branching-2 toy game."""
    return ChoiceSequence()


@pytest.fixture
def empty_board():
    """Fresh tic-tac-toe game, human to move."""
    return GameState()


@pytest.fixture
def computer_can_win():
    """Computer to move with two in the top row and cell 3 (index 2) open.

        o o .
        x x .
        . . .
    """
    state = GameState(player=Player.COMPUTER)
    state.board[0] = Player.COMPUTER
    state.board[1] = Player.COMPUTER
    state.board[3] = Player.HUMAN
    state.board[4] = Player.HUMAN
    return state
