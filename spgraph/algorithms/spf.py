"""Shortest-path-first (SPF) search between two vertices.

Implements single-source Dijkstra over an `EdgeStore` with early termination
once the destination is settled.

Notes:
    - Every vertex is queued up front with distance 0 (source) or infinity
      (everything else); relaxations lower priorities in place.
    - Edges are relaxed in adjacency insertion order and a distance is only
      replaced by a strictly smaller one, so among equal-cost alternatives
      the first one discovered is kept. Parallel tagged edges are separate
      candidates.
    - Infinity is the configured ``max_distance``. Once the popped minimum is
      infinite the rest of the queue is unreachable and the search stops.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from spgraph.algorithms.pqueue import IndexedMinHeap
from spgraph.config import PathConfig
from spgraph.errors import InvalidArgumentError
from spgraph.graph.edge_store import EdgeStore
from spgraph.graph.vertex import Vertex
from spgraph.logging import get_logger
from spgraph.model.path import PathEdge
from spgraph.types.base import Distance

logger = get_logger(__name__)


def _resolve_path(dest: Vertex, pred: Dict[Vertex, PathEdge]) -> List[PathEdge]:
    """Walk predecessor hops back from ``dest`` and return them source-first."""
    path: List[PathEdge] = []
    node = dest
    while node in pred:
        hop = pred[node]
        path.append(hop)
        node = hop.source
    path.reverse()
    return path


def shortest_path(
    store: EdgeStore,
    src: Vertex,
    dest: Vertex,
    config: Optional[PathConfig] = None,
) -> List[PathEdge]:
    """Compute the cheapest path from ``src`` to ``dest``.

    Args:
        store: Graph storage to search. It is only read.
        src: Source vertex.
        dest: Destination vertex.
        config: Numeric settings; defaults to the store's config.

    Returns:
        List[PathEdge]: Hops in traversal order. Empty if ``dest`` is
        unreachable or equal to ``src``.

    Raises:
        InvalidArgumentError: If ``src`` or ``dest`` is not in the store.
        DistanceOverflowError: If a distance leaves the configured range and
            saturation is disabled.
    """
    config = config or store.path_config
    source = store.canonical(src)
    target = store.canonical(dest)
    if source is None:
        raise InvalidArgumentError(f"Source vertex '{src}' is not in the graph.")
    if target is None:
        raise InvalidArgumentError(f"Destination vertex '{dest}' is not in the graph.")

    infinity = config.max_distance
    distance: Dict[Vertex, Distance] = {}
    min_pq: IndexedMinHeap[Vertex] = IndexedMinHeap()
    for vertex in store.vertex_list():
        distance[vertex] = 0 if vertex == source else infinity
        min_pq.push(vertex, distance[vertex])

    pred: Dict[Vertex, PathEdge] = {}
    settled = 0

    while min_pq:
        node, node_dist = min_pq.pop()
        settled += 1
        if node == target or node_dist >= infinity:
            break

        for edge in store.outgoing(node):
            neighbor = edge.destination
            if neighbor not in min_pq:
                # Already settled at a distance no relaxation can beat.
                continue
            candidate = config.add_distance(node_dist, edge.weight)
            if candidate < distance[neighbor]:
                distance[neighbor] = candidate
                pred[neighbor] = PathEdge(node, neighbor, edge.weight, edge.tag)
                min_pq.decrease(neighbor, candidate)

    path = _resolve_path(target, pred)
    logger.debug(
        "SPF %s -> %s: settled %d of %d vertices, %d hop(s)",
        source,
        target,
        settled,
        len(distance),
        len(path),
    )
    return path
