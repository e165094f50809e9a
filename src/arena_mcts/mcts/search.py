"""Main MCTS search.

One pass of the search loop:

def iterate(arena):
    leaf = ucb_select(arena)
    if leaf is unvisited:
        rollout(leaf)              # terminate() + backprop to root
    elif leaf was simulated once:
        arena.expand(leaf)         # children appear, no statistics change
    elif leaf is terminal:
        recredit_terminal(leaf)

Statistics only change through rollouts, so a pass that expands a node
does not touch any visit count.
"""

import logging
import time
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Optional

from .arena import Arena
from .backprop import recredit_terminal, rollout
from .node import InvariantError, NodePhase
from .tree import get_statistics
from .ucb import select_child, select_most_visited, ucb_select

logger = logging.getLogger(__name__)

FINAL_SELECTION_POLICIES = ("ucb1", "most_visited")


@dataclass
class SearchConfig:
    """Configuration for MCTS search."""
    iterations: int = 1000
    # UCB1 exploration constant
    exploration: float = 2.0
    # How the move is read off the root: "ucb1" reuses the tree policy,
    # "most_visited" picks the robust child
    final_selection: str = "ucb1"
    # Progress is logged every `log_every` passes (0 disables it)
    log_every: int = 100
    seed: Optional[int] = None

    def __post_init__(self):
        """Validate configuration."""
        if self.iterations < 0:
            raise ValueError("iterations must be non-negative")
        if self.exploration < 0:
            raise ValueError("exploration constant must be non-negative")
        if self.final_selection not in FINAL_SELECTION_POLICIES:
            raise ValueError(
                f"Unknown final selection policy: {self.final_selection}"
            )

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "SearchConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(values) - known
        if unknown:
            raise ValueError(f"Unknown search config keys: {sorted(unknown)}")
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def iterate(
    arena: Arena,
    n: int,
    c: float = 2.0,
    log_every: int = 0
) -> int:
    """Run `n` search passes, each starting from the root.

    Args:
        arena: Arena to grow
        n: Number of passes
        c: UCB1 exploration constant
        log_every: Log tree statistics every this many passes (0 disables)

    Returns:
        Number of passes that ran a simulation

    Raises:
        InvariantError: tree reached a state the lifecycle does not allow
    """
    if n < 0:
        raise ValueError("iteration count must be non-negative")

    simulations = 0

    for i in range(n):
        leaf = ucb_select(arena, c)
        phase = arena.get(leaf).phase

        if phase is NodePhase.UNVISITED:
            rollout(arena, leaf)
            simulations += 1
        elif phase is NodePhase.SIMULATED:
            arena.expand(leaf)
        elif phase is NodePhase.TERMINAL:
            recredit_terminal(arena, leaf)
            simulations += 1
        else:
            raise InvariantError(f"selection stopped at node {leaf} in phase {phase.value}")

        if log_every and (i + 1) % log_every == 0 and logger.isEnabledFor(logging.DEBUG):
            stats = get_statistics(arena)
            logger.debug(
                f"Iteration {i + 1}/{n}: "
                f"nodes={stats['total_nodes']}, depth={stats['max_depth']}, "
                f"root_visits={stats['root_visits']}, "
                f"root_mean={stats['root_mean_score']:.3f}"
            )

    return simulations


def recommend(arena: Arena, policy: str = "ucb1", c: float = 2.0) -> int:
    """Handle of the root child to play.

    The default reuses the UCB1 comparator of the tree policy (first
    maximum wins), so the exploration bonus still takes part in the choice.

    Raises:
        ValueError: root was never expanded, or unknown policy
    """
    if not arena.root.children:
        raise ValueError("root has no children; run more iterations")

    if policy == "ucb1":
        return select_child(arena, 0, c)
    if policy == "most_visited":
        return select_most_visited(arena, 0)
    raise ValueError(f"Unknown final selection policy: {policy}")


class MCTSSearch:
    """MCTS move selection for any `SearchDomain` state.

    Every call to `search` builds a fresh arena and discards it afterwards.
    """

    def __init__(self, config: Optional[SearchConfig] = None):
        self.config = config or SearchConfig()
        self.last_statistics: Dict[str, Any] = {}

    def build_arena(self, state: Any, iterations: Optional[int] = None) -> Arena:
        """Grow a search tree rooted at `state`."""
        num_iterations = self.config.iterations if iterations is None else iterations

        arena = Arena(state)
        start_time = time.time()
        simulations = iterate(
            arena,
            num_iterations,
            c=self.config.exploration,
            log_every=self.config.log_every
        )
        elapsed = time.time() - start_time

        self.last_statistics = get_statistics(arena)
        self.last_statistics["simulations"] = simulations
        self.last_statistics["elapsed_time"] = elapsed

        logger.info(
            f"Search finished: {num_iterations} iterations, "
            f"{simulations} simulations, {len(arena)} nodes in {elapsed:.2f}s"
        )
        return arena

    def search(self, state: Any, iterations: Optional[int] = None) -> Any:
        """Run a search and return the state reached by the recommended move."""
        arena = self.build_arena(state, iterations)
        choice = recommend(arena, self.config.final_selection, self.config.exploration)
        return arena.get(choice).state

    def search_child_index(self, state: Any, iterations: Optional[int] = None) -> int:
        """Index (into `state.available_moves()`) of the recommended move."""
        arena = self.build_arena(state, iterations)
        choice = recommend(arena, self.config.final_selection, self.config.exploration)
        return arena.root.children.index(choice)

    def get_statistics(self) -> dict:
        """Return statistics of the last search."""
        return dict(self.last_statistics)
