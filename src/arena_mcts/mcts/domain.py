"""Capability a game state must provide to be searchable."""

from abc import ABC, abstractmethod
from typing import Sequence


class SearchDomain(ABC):
    """Base class for searchable domain states.

    The engine never looks inside a state. It only asks for the successor
    states and for the value of a random playout. Neither call may mutate
    the state it is invoked on: every node keeps its own snapshot.
    """

    @abstractmethod
    def available_moves(self) -> Sequence["SearchDomain"]:
        """
        One resulting state per legal move from this state.

        Returns:
            Successor states in a stable order, empty if the state is terminal
        """
        pass

    @abstractmethod
    def terminate(self) -> float:
        """
        Play uniformly random legal moves until the game ends.

        The reward follows a fixed absolute convention chosen by the domain
        (for example -1 for a loss, 0 for a draw, +1 for a win). On a state
        that is already terminal the reward is returned immediately.

        Returns:
            Scalar reward of the terminal position
        """
        pass
