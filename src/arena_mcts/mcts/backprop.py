"""Rollout and backpropagation.

Each rollout updates:
- The leaf it started from (score set, one visit)
- Every ancestor up to the root (score and visits accumulated)

The reward is added unchanged at every level. It is not negated per ply:
the domain's reward convention is already absolute.
"""

from typing import TYPE_CHECKING

from .node import InvariantError, NodePhase

if TYPE_CHECKING:
    from .arena import Arena


def propagate_from(arena: "Arena", handle: int) -> None:
    """Add the leaf's score and one visit to each of its ancestors.

    The leaf itself is left untouched.

    Args:
        arena: Arena holding the node
        handle: Leaf handle

    Raises:
        InvariantError: node has children (its statistics would be double counted)
    """
    node = arena.get(handle)
    if not node.is_leaf():
        raise InvariantError(f"propagation started from non-leaf node {handle}")

    _credit_ancestors(arena, node.parent, node.score)


def _credit_ancestors(arena: "Arena", handle, reward: float) -> None:
    current = handle
    while current is not None:
        ancestor = arena.get(current)
        ancestor.score += reward
        ancestor.visits += 1
        current = ancestor.parent


def rollout(arena: "Arena", handle: int) -> float:
    """Simulate from an unvisited leaf and credit the result up the tree.

    Returns:
        Reward of the random playout
    """
    node = arena.get(handle)
    if node.phase is not NodePhase.UNVISITED:
        raise InvariantError(f"rollout on node {handle} in phase {node.phase.value}")

    reward = float(node.state.terminate())
    node.score = reward
    node.visits = 1
    propagate_from(arena, handle)

    return reward


def recredit_terminal(arena: "Arena", handle: int) -> float:
    """Count another visit to a terminal node.

    A terminal state has a single outcome, so its reward is added again to
    the node and to every ancestor.

    Returns:
        Terminal reward
    """
    node = arena.get(handle)
    if node.phase is not NodePhase.TERMINAL:
        raise InvariantError(f"node {handle} is not terminal")

    reward = float(node.state.terminate())
    node.score += reward
    node.visits += 1
    _credit_ancestors(arena, node.parent, reward)

    return reward
