"""Read-only views over a search tree."""

from typing import TYPE_CHECKING

import networkx as nx

if TYPE_CHECKING:
    from .arena import Arena


def get_depths(arena: "Arena") -> list:
    """Depth of every node, indexed by handle.

    Children are always appended after their parent, so one forward pass
    over the arena sees each parent before its children.
    """
    depths = [0] * len(arena)
    for node in arena:
        if node.parent is not None:
            depths[node.id] = depths[node.parent] + 1
    return depths


def get_statistics(arena: "Arena") -> dict:
    """Get tree statistics."""
    depths = get_depths(arena)
    expanded = sum(1 for node in arena if node.children)
    terminal = sum(1 for node in arena if node.terminal)

    return {
        "total_nodes": len(arena),
        "expanded_nodes": expanded,
        "leaf_nodes": len(arena) - expanded,
        "terminal_nodes": terminal,
        "max_depth": max(depths),
        "root_visits": arena.root.visits,
        "root_mean_score": arena.root.mean_score
    }


def to_networkx(arena: "Arena") -> nx.DiGraph:
    """Export the tree as a directed graph.

    Graph nodes are arena handles with `visits`, `score` and `depth`
    attributes; edges point from parent to child.
    """
    graph = nx.DiGraph()
    depths = get_depths(arena)

    for node in arena:
        graph.add_node(
            node.id,
            visits=node.visits,
            score=node.score,
            depth=depths[node.id],
            terminal=node.terminal
        )
        if node.parent is not None:
            graph.add_edge(node.parent, node.id)

    return graph
