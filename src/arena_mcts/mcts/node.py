"""MCTS node stored in an arena."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional


class InvariantError(RuntimeError):
    """Raised when the search tree reaches a state the driver never produces.

    These are defects, not runtime conditions: the current search is aborted.
    """


class NodePhase(Enum):
    """Lifecycle of a node during search."""
    UNVISITED = "unvisited"    # eligible for rollout
    SIMULATED = "simulated"    # rolled out once, eligible for expansion
    EXPANDED = "expanded"      # has children, selection passes through it
    TERMINAL = "terminal"      # expansion found no successors


@dataclass
class Node:
    """One vertex of the search tree.

    Links to other nodes are arena handles, never object references.

    Attributes:
        id: Handle of this node (its index in the arena)
        state: Domain state reached from the root by the moves on the path
        parent: Handle of the parent node (None for the root)
        visits: Number of simulations credited to this node
        score: Sum of rewards credited to this node (not an average)
        children: Child handles in expansion order
        terminal: Set when expansion produced no successor states
    """
    id: int
    state: Any
    parent: Optional[int] = None
    visits: int = 0
    score: float = 0.0
    children: List[int] = field(default_factory=list)
    terminal: bool = False

    @property
    def mean_score(self) -> float:
        """Average reward (score / visits)."""
        if self.visits == 0:
            return 0.0
        return self.score / self.visits

    @property
    def phase(self) -> NodePhase:
        """Lifecycle phase derived from visits, children and the terminal flag.

        Raises:
            InvariantError: childless, non-terminal node visited twice or more
        """
        if self.children:
            return NodePhase.EXPANDED
        if self.terminal:
            return NodePhase.TERMINAL
        if self.visits == 0:
            return NodePhase.UNVISITED
        if self.visits == 1:
            return NodePhase.SIMULATED
        raise InvariantError(
            f"node {self.id} has {self.visits} visits but was never expanded"
        )

    def is_leaf(self) -> bool:
        """Check if node has no children."""
        return len(self.children) == 0

    def is_root(self) -> bool:
        return self.parent is None

    def __repr__(self) -> str:
        return (f"Node(id={self.id}, parent={self.parent}, visits={self.visits}, "
                f"score={self.score:.3f}, children={len(self.children)})")
