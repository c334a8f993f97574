"""Depth-first path search.

The search keeps one visited set for the whole run. A vertex that was
entered once is never entered again, also after its branch failed, so
``visited`` records the full footprint of the search.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Set, Union

from .directed_graph import DirectedGraph, E, V
from .path import GraphPath

logger = logging.getLogger(__name__)


def depth_first_search(
    graph: DirectedGraph[V, E],
    start: Union[V, str],
    target: Union[V, str],
    visited: Optional[List[V]] = None,
) -> Optional[GraphPath[V]]:
    """Find a path from ``start`` to ``target`` by depth-first search.

    Neighbours are explored in the graph's edge insertion order; the
    first branch that reaches the target wins, which is not necessarily
    the shortest one.

    Parameters
    ----------
    graph:
        The graph to search. It is not modified.
    start:
        Start vertex or its identity.
    target:
        Target vertex or its identity.
    visited:
        Optional empty list that receives every visited vertex, also
        when no path is found.

    Returns
    -------
    GraphPath or None
        The path found, or None if start or target cannot be resolved
        or the target is unreachable.
    """
    source = graph.resolve(start)
    goal = graph.resolve(target)
    if source is None or goal is None:
        return None

    visited = visited if visited is not None else []
    visited.append(source)
    visited_ids: Set[str] = {source.id}
    chain: List[V] = [source]

    if source.id == goal.id:
        return GraphPath(vertices=tuple(chain), visited=tuple(visited))

    # stack[i] iterates the neighbours of chain[i]
    stack: List[Iterator[V]] = [iter(graph.get_neighbours(source) or ())]
    while stack:
        neighbour = next(stack[-1], None)
        if neighbour is None:
            stack.pop()
            chain.pop()
            continue
        if neighbour.id in visited_ids:
            continue

        visited_ids.add(neighbour.id)
        visited.append(neighbour)
        chain.append(neighbour)

        if neighbour.id == goal.id:
            return GraphPath(vertices=tuple(chain), visited=tuple(visited))

        stack.append(iter(graph.get_neighbours(neighbour) or ()))

    logger.debug(
        "Depth-first search exhausted",
        extra={"start": source.id, "target": goal.id, "visited": len(visited)},
    )
    return None
