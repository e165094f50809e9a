"""Arena owning every node of one search.

Nodes refer to each other through integer handles (indices into the
arena's node list). The list is append-only: a handle, once handed out,
addresses the same node for the lifetime of the arena.
"""

import logging
from typing import Any, Callable, List, Optional

from .node import InvariantError, Node

logger = logging.getLogger(__name__)


class InvalidHandleError(InvariantError, IndexError):
    """Handle does not address a node of this arena."""


class Arena:
    """Append-only node storage for a single search."""

    def __init__(self, initial_state: Any):
        self.nodes: List[Node] = [Node(id=0, state=initial_state)]

    @classmethod
    def from_default(cls, state_factory: Callable[[], Any]) -> "Arena":
        """Create an arena whose root holds a default-constructed state.

        Args:
            state_factory: Domain state type (or any zero-argument callable)
        """
        return cls(state_factory())

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, handle: int) -> Node:
        return self.get(handle)

    def __iter__(self):
        return iter(self.nodes)

    @property
    def root(self) -> Node:
        return self.nodes[0]

    def get(self, handle: int) -> Node:
        """Return the node at `handle`.

        Nodes are mutable, so the same call serves readers and writers.

        Raises:
            InvalidHandleError: handle was not produced by this arena
        """
        if not isinstance(handle, int) or not 0 <= handle < len(self.nodes):
            raise InvalidHandleError(
                f"handle {handle!r} out of range for arena of {len(self.nodes)} nodes"
            )
        return self.nodes[handle]

    def next_id(self) -> int:
        return len(self.nodes)

    def add_child(self, parent: int, child_state: Any) -> None:
        """Append a fresh node under `parent`.

        The new handle is `len(arena) - 1` after the call.
        """
        parent_node = self.get(parent)
        child = Node(id=self.next_id(), state=child_state, parent=parent)
        self.nodes.append(child)
        parent_node.children.append(child.id)

    def expand(self, handle: int) -> None:
        """Add one child per successor state of the node, in domain order.

        A state without successors adds nothing and marks the node terminal.
        """
        node = self.get(handle)
        successors = node.state.available_moves()

        for state in successors:
            self.add_child(handle, state)

        if not node.children:
            node.terminal = True
            logger.debug(f"Node {handle} has no successors, marked terminal")

    def children_of(self, handle: int) -> List[Node]:
        return [self.nodes[child] for child in self.get(handle).children]

    def path_to_root(self, handle: int) -> List[int]:
        """Handles from `handle` up to and including the root."""
        path = []
        current: Optional[int] = handle
        while current is not None:
            path.append(current)
            current = self.get(current).parent
        return path

    def ucb1_of(self, handle: int, c: float = 2.0) -> float:
        """UCB1 value of a node (see `ucb.ucb_score`)."""
        from .ucb import ucb_score
        return ucb_score(self, handle, c)

    def rollout(self, handle: int) -> float:
        from .backprop import rollout
        return rollout(self, handle)

    def propagate_from(self, handle: int) -> None:
        from .backprop import propagate_from
        propagate_from(self, handle)

    def iterate(self, n: int, c: float = 2.0) -> int:
        """Run `n` search passes from the root (see `search.iterate`)."""
        from .search import iterate
        return iterate(self, n, c)

    def recommend(self, policy: str = "ucb1", c: float = 2.0) -> int:
        """Handle of the recommended root child (see `search.recommend`)."""
        from .search import recommend
        return recommend(self, policy, c)

    def __repr__(self) -> str:
        return f"Arena(nodes={len(self.nodes)}, root_visits={self.root.visits})"
