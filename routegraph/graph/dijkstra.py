"""Shortest-path computation using Dijkstra's algorithm.

Two ways of selecting the next vertex to finalize are available:

- ``"scan"``: a linear scan for the smallest tentative weight, O(V^2).
  Ties go to the vertex that was added to the graph first.
- ``"heap"``: a binary heap with lazy deletion, O((V + E) log V).
  Ties go to the vertex whose weight was improved first.

Both stop as soon as the target is finalized. Edge weights must be
non-negative.
"""

from __future__ import annotations

import heapq
import logging
from typing import Callable, Dict, List, Literal, Optional, Set, Tuple, Union

from ..domain.errors import ConfigurationError, InvalidWeightError
from .directed_graph import DirectedGraph, E, V
from .path import GraphPath

logger = logging.getLogger(__name__)

DijkstraStrategy = Literal["scan", "heap"]

INFINITY = float("inf")


def dijkstra_shortest_path(
    graph: DirectedGraph[V, E],
    start: Union[V, str],
    target: Union[V, str],
    weight_mapper: Callable[[E], float],
    strategy: DijkstraStrategy = "scan",
    visited: Optional[List[V]] = None,
) -> Optional[GraphPath[V]]:
    """Compute the edge-weighted shortest path from start to target.

    Parameters
    ----------
    graph:
        The graph to search. It is not modified.
    start:
        Start vertex or its identity.
    target:
        Target vertex or its identity.
    weight_mapper:
        Function giving the (non-negative) weight of an edge payload.
    strategy:
        ``"scan"`` or ``"heap"`` selection of the next vertex.
    visited:
        Optional empty list that receives every finalized vertex, also
        when no path is found.

    Returns
    -------
    GraphPath or None
        The shortest path with its total weight, or None if start or
        target cannot be resolved or the target is unreachable.

    Raises
    ------
    InvalidWeightError
        If the weight mapper returns a negative weight.
    ConfigurationError
        If ``strategy`` is unknown.
    """
    if strategy not in ("scan", "heap"):
        raise ConfigurationError(
            f"Unknown Dijkstra strategy: {strategy!r}",
            setting_name="dijkstra_strategy",
            expected_type="'scan' or 'heap'",
        )

    source = graph.resolve(start)
    goal = graph.resolve(target)
    if source is None or goal is None:
        return None

    trail: List[V] = visited if visited is not None else []

    if source.id == goal.id:
        trail.append(source)
        return GraphPath(vertices=(source,), visited=tuple(trail), total_weight=0.0)

    weights: Dict[str, float] = {source.id: 0.0}
    predecessors: Dict[str, V] = {}
    finalized: Set[str] = set()

    def finalize(vertex: V) -> List[V]:
        finalized.add(vertex.id)
        trail.append(vertex)
        if vertex.id == goal.id:
            return []
        return _relax(graph, vertex, weights, predecessors, weight_mapper)

    if strategy == "scan":
        candidates = graph.vertices
        current: Optional[V] = source
        while current is not None:
            finalize(current)
            if current.id == goal.id:
                break
            current = _closest_unfinalized(candidates, weights, finalized)
    else:
        counter = 0
        heap: List[Tuple[float, int, str]] = [(0.0, counter, source.id)]
        while heap:
            _, _, vertex_id = heapq.heappop(heap)
            if vertex_id in finalized:
                continue
            vertex = graph.get_vertex(vertex_id)
            assert vertex is not None
            for improved in finalize(vertex):
                counter += 1
                heapq.heappush(heap, (weights[improved.id], counter, improved.id))
            if vertex_id == goal.id:
                break

    if goal.id not in predecessors:
        logger.debug(
            "Target unreachable",
            extra={"start": source.id, "target": goal.id, "visited": len(trail)},
        )
        return None

    chain: List[V] = [goal]
    while chain[-1].id != source.id:
        chain.append(predecessors[chain[-1].id])
    chain.reverse()

    return GraphPath(
        vertices=tuple(chain),
        visited=tuple(trail),
        total_weight=weights[goal.id],
    )


def _relax(
    graph: DirectedGraph[V, E],
    current: V,
    weights: Dict[str, float],
    predecessors: Dict[str, V],
    weight_mapper: Callable[[E], float],
) -> List[V]:
    """Relax the outgoing edges of ``current``.

    Returns the neighbours whose tentative weight improved.
    """
    improved: List[V] = []
    base = weights[current.id]
    for neighbour in graph.get_neighbours(current) or ():
        edge = graph.get_edge(current, neighbour)
        weight = float(weight_mapper(edge))  # type: ignore[arg-type]
        if weight < 0:
            raise InvalidWeightError(
                f"Negative edge weight {weight} from {current.id} to {neighbour.id}",
                from_id=current.id,
                to_id=neighbour.id,
                weight=weight,
            )
        candidate = base + weight
        if candidate < weights.get(neighbour.id, INFINITY):
            weights[neighbour.id] = candidate
            predecessors[neighbour.id] = current
            improved.append(neighbour)
    return improved


def _closest_unfinalized(
    candidates: List[V],
    weights: Dict[str, float],
    finalized: Set[str],
) -> Optional[V]:
    """Unfinalized vertex with the smallest finite tentative weight."""
    closest: Optional[V] = None
    closest_weight = INFINITY
    for vertex in candidates:
        if vertex.id in finalized:
            continue
        weight = weights.get(vertex.id, INFINITY)
        if weight < closest_weight:
            closest = vertex
            closest_weight = weight
    return closest
