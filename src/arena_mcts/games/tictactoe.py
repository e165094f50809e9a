"""3-in-a-row (tic-tac-toe) between a human and the computer.

Board cells are indexed row by row:

    0 1 2
    3 4 5
    6 7 8

Rewards are absolute: +1 computer win, -1 human win, 0 draw.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

import numpy as np

from ..mcts.domain import SearchDomain

BOARD_SIZE = 9

LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
)


class Player(Enum):
    NONE = 0
    HUMAN = 1
    COMPUTER = 2

    @property
    def opponent(self) -> "Player":
        if self is Player.HUMAN:
            return Player.COMPUTER
        if self is Player.COMPUTER:
            return Player.HUMAN
        raise ValueError("Player.NONE has no opponent")

    @property
    def symbol(self) -> str:
        return {Player.NONE: ".", Player.HUMAN: "x", Player.COMPUTER: "o"}[self]


REWARDS = {Player.COMPUTER: 1.0, Player.HUMAN: -1.0, Player.NONE: 0.0}


def new_board() -> List[Player]:
    return [Player.NONE] * BOARD_SIZE


@dataclass
class GameState(SearchDomain):
    """Board plus the player to move. The human moves first."""
    player: Player = Player.HUMAN
    board: List[Player] = field(default_factory=new_board)

    def __post_init__(self):
        if len(self.board) != BOARD_SIZE:
            raise ValueError(f"Board must have {BOARD_SIZE} cells, got {len(self.board)}")

    def copy(self) -> "GameState":
        return GameState(player=self.player, board=list(self.board))

    def legal_moves(self) -> List[int]:
        """Empty cells, or nothing once the game is over."""
        if self.winner() is not Player.NONE:
            return []
        return [i for i, cell in enumerate(self.board) if cell is Player.NONE]

    def winner(self) -> Player:
        """Owner of a completed line, Player.NONE if there is none."""
        for a, b, c in LINES:
            if self.board[a] is not Player.NONE and self.board[a] is self.board[b] is self.board[c]:
                return self.board[a]
        return Player.NONE

    def is_terminal(self) -> bool:
        return self.winner() is not Player.NONE or Player.NONE not in self.board

    def reward(self) -> float:
        """Reward of a finished game.

        Raises:
            ValueError: game is not over yet
        """
        if not self.is_terminal():
            raise ValueError("Game is not over")
        return REWARDS[self.winner()]

    def play(self, cell: int) -> None:
        """Place the mover's mark on `cell` and pass the turn (in place)."""
        if not 0 <= cell < BOARD_SIZE:
            raise ValueError(f"Cell {cell} is off the board")
        if self.is_terminal():
            raise ValueError("Game is already over")
        if self.board[cell] is not Player.NONE:
            raise ValueError(f"Field {cell + 1} already taken")

        self.board[cell] = self.player
        if not self.is_terminal():
            self.player = self.player.opponent

    def apply_move(self, cell: int) -> "GameState":
        """State after playing `cell`; this state is left unchanged."""
        state = self.copy()
        state.play(cell)
        return state

    def random_move(self) -> Optional[int]:
        """Uniformly random legal cell, None when the game is over."""
        moves = self.legal_moves()
        if not moves:
            return None
        return moves[np.random.randint(len(moves))]

    def available_moves(self) -> List["GameState"]:
        return [self.apply_move(cell) for cell in self.legal_moves()]

    def terminate(self) -> float:
        state = self.copy()
        while not state.is_terminal():
            state.play(state.random_move())
        return state.reward()

    def __str__(self) -> str:
        rows = []
        for start in range(0, BOARD_SIZE, 3):
            rows.append(" ".join(cell.symbol for cell in self.board[start:start + 3]))
        return "\n".join(rows) + "\n"


def move_between(before: GameState, after: GameState) -> int:
    """Cell that was filled to get from `before` to `after`."""
    changed = [i for i in range(BOARD_SIZE) if before.board[i] is not after.board[i]]
    if len(changed) != 1:
        raise ValueError(f"States differ in {len(changed)} cells, expected 1")
    return changed[0]
