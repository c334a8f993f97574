"""Breadth-first path search, shortest in number of hops."""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Dict, List, Optional, Set, Union

from .directed_graph import DirectedGraph, E, V
from .path import GraphPath

logger = logging.getLogger(__name__)


def breadth_first_search(
    graph: DirectedGraph[V, E],
    start: Union[V, str],
    target: Union[V, str],
    visited: Optional[List[V]] = None,
) -> Optional[GraphPath[V]]:
    """Find a path with the fewest edges from ``start`` to ``target``.

    Vertices are explored level by level, so the first time the target
    shows up as a neighbour the path through the current vertex is a
    shortest one by hop count. Edge weights are ignored.

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

    if source.id == goal.id:
        return GraphPath(vertices=(source,), visited=tuple(visited))

    queue: Deque[V] = deque([source])
    predecessors: Dict[str, Optional[V]] = {source.id: None}

    while queue:
        current = queue.popleft()
        for neighbour in graph.get_neighbours(current) or ():
            if neighbour.id == goal.id:
                chain: List[V] = []
                step: Optional[V] = current
                while step is not None:
                    chain.append(step)
                    step = predecessors[step.id]
                chain.reverse()
                chain.append(neighbour)
                return GraphPath(vertices=tuple(chain), visited=tuple(visited))

            if neighbour.id not in predecessors and neighbour.id not in visited_ids:
                predecessors[neighbour.id] = current
                visited_ids.add(neighbour.id)
                visited.append(neighbour)
                queue.append(neighbour)

    logger.debug(
        "Breadth-first search exhausted",
        extra={"start": source.id, "target": goal.id, "visited": len(visited)},
    )
    return None
