"""Reference domains for the search engine."""

from .tictactoe import GameState, Player, move_between

__all__ = ["GameState", "Player", "move_between"]
