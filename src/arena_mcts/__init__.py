"""Arena-allocated Monte Carlo Tree Search.

Any game state is searchable once it implements two operations:
enumerate the successor states, and play a random game to the end.

Core loop:
1. Select: descend from the root by UCB1 to a leaf
2. Rollout: an unvisited leaf is scored by one random playout
3. Expand: a leaf simulated once gets one child per legal move
4. Backprop: the playout reward is added to every ancestor

Components:
- mcts/ - Arena, nodes, UCB1, backprop, search driver
- games/ - Tic-tac-toe reference domain
- comparison/ - Matches against random play, significance tests
- utils/ - Logging, seeding, YAML config
"""

__version__ = "0.1.0"

from .mcts.arena import Arena
from .mcts.domain import SearchDomain
from .mcts.search import MCTSSearch, SearchConfig, iterate

__all__ = [
    "Arena",
    "SearchDomain",
    "MCTSSearch",
    "SearchConfig",
    "iterate",
    "best_move"
]


def best_move(state, iterations: int = 1000, **kwargs):
    """High-level API: search from `state` and return the chosen successor.

    Args:
        state: Domain state implementing SearchDomain
        iterations: Search passes for this decision
        **kwargs: Other SearchConfig options

    Returns:
        Successor state of the recommended move
    """
    config = SearchConfig(iterations=iterations, **kwargs)
    return MCTSSearch(config).search(state)
