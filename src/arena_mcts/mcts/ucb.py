"""UCB1 tree policy."""

import math
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from .arena import Arena


def ucb_score(
    arena: "Arena",
    handle: int,
    c: float = 2.0
) -> float:
    """Compute UCB1 score.

    UCB1 = score / visits + c * sqrt(ln(N_parent) / visits)

    Unvisited nodes score +inf so that every untried child is sampled
    before any sibling is revisited. The root has no parent visit count
    to draw on and always scores -inf.

    Args:
        arena: Arena holding the node
        handle: Node handle
        c: Exploration constant

    Returns:
        UCB1 score
    """
    node = arena.get(handle)

    if node.parent is None:
        return float('-inf')

    if node.visits == 0:
        return float('inf')

    parent = arena.get(node.parent)
    exploitation = node.score / node.visits
    exploration = c * math.sqrt(math.log(parent.visits) / node.visits)

    return exploitation + exploration


def select_child(
    arena: "Arena",
    handle: int,
    c: float = 2.0
) -> Optional[int]:
    """Child of `handle` with the highest UCB1 score.

    Ties go to the first child in expansion order.

    Returns:
        Child handle, or None for a leaf
    """
    best_child = None
    best_score = float('-inf')

    for child in arena.get(handle).children:
        score = ucb_score(arena, child, c)
        if best_child is None or score > best_score:
            best_score = score
            best_child = child

    return best_child


def ucb_select(
    arena: "Arena",
    c: float = 2.0
) -> int:
    """Descend from the root by UCB1 until reaching a leaf.

    Args:
        arena: Arena to search
        c: Exploration constant

    Returns:
        Selected leaf handle
    """
    handle = 0

    while arena.get(handle).children:
        handle = select_child(arena, handle, c)

    return handle


def select_most_visited(arena: "Arena", handle: int) -> Optional[int]:
    """Most visited child (robust-child selection), first one on ties."""
    children: List[int] = arena.get(handle).children

    if not children:
        return None

    return max(children, key=lambda child: arena.get(child).visits)
