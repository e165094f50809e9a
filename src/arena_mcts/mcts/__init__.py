"""MCTS module: tree search over any searchable domain.

The tree lives in an arena and nodes point at each other by handle.
UCB1 picks the path.
A random playout scores a new leaf.
Backpropagation credits every ancestor.
"""

from .domain import SearchDomain
from .node import Node, NodePhase, InvariantError
from .arena import Arena, InvalidHandleError
from .ucb import ucb_score, ucb_select, select_child, select_most_visited
from .backprop import propagate_from, rollout, recredit_terminal
from .search import MCTSSearch, SearchConfig, iterate, recommend
from .tree import get_statistics, to_networkx

__all__ = [
    "SearchDomain",
    "Node",
    "NodePhase",
    "InvariantError",
    "Arena",
    "InvalidHandleError",
    "ucb_score",
    "ucb_select",
    "select_child",
    "select_most_visited",
    "propagate_from",
    "rollout",
    "recredit_terminal",
    "MCTSSearch",
    "SearchConfig",
    "iterate",
    "recommend",
    "get_statistics",
    "to_networkx"
]
