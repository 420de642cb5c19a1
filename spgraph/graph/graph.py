"""Thread-safe directed, weighted graph with shortest-path queries.

`Graph` owns an `EdgeStore` and a `ReadWriteLock`. Mutations take the
exclusive lock, queries (including `shortest_path`) take the shared lock for
their whole duration. Failed mutations leave the graph unchanged.

Vertices may be passed either as `Vertex` objects or as raw values, which
are wrapped automatically. Equal values always denote the same vertex.
"""

from __future__ import annotations

from typing import Any, Hashable, List, Optional, Union

from spgraph.algorithms.spf import shortest_path as _spf
from spgraph.config import PATH_CONFIG, PathConfig
from spgraph.errors import GraphError, VertexNotFoundError
from spgraph.graph.edge_store import EdgeStore, TagLike, WeightedEdge
from spgraph.graph.rwlock import ReadWriteLock
from spgraph.graph.vertex import Vertex
from spgraph.logging import get_logger
from spgraph.model.path import PathEdge
from spgraph.types.base import Weight, as_tag

logger = get_logger(__name__)

VertexLike = Union[Vertex, Hashable]


def _as_vertex(v: Optional[VertexLike]) -> Optional[Vertex]:
    if v is None or isinstance(v, Vertex):
        return v
    return Vertex(v)


def _maybe_vertex(v: Optional[VertexLike]) -> Optional[Vertex]:
    """Like `_as_vertex`, but unwrappable values yield None."""
    try:
        return _as_vertex(v)
    except GraphError:
        return None


class Graph:
    """A directed, weighted graph supporting parallel tagged edges.

    Example:
        >>> g = Graph()
        >>> a, b = g.add_vertex("A"), g.add_vertex("B")
        >>> g.add_edge(a, b, 3)
        >>> [str(hop) for hop in g.shortest_path(a, b)]
        ['A -> B, Cost: 3']
    """

    def __init__(self, config: Optional[PathConfig] = None) -> None:
        """Create an empty graph.

        Args:
            config: Numeric settings for weights and path distances.

        Raises:
            InvalidArgumentError: If ``config`` is invalid.
        """
        self.config = config or PATH_CONFIG
        self.config.validate()
        self._store = EdgeStore(config=self.config)
        self._lock = ReadWriteLock()

    def __len__(self) -> int:
        with self._lock.read_locked():
            return self._store.number_of_nodes()

    def __contains__(self, v: object) -> bool:
        return self.contains_vertex(v)

    def __repr__(self) -> str:
        with self._lock.read_locked():
            return (
                f"Graph(vertices={self._store.number_of_nodes()}, "
                f"edges={self._store.number_of_edges()})"
            )

    #
    # Mutations
    #
    def add_vertex(self, v: VertexLike) -> Vertex:
        """Add a vertex; a no-op if an equal vertex is already present.

        Returns:
            Vertex: The vertex stored in the graph for this value.
        """
        vertex = _as_vertex(v)
        with self._lock.write_locked():
            stored = self._store.add_node(vertex)
        if stored is vertex:
            logger.debug("Added vertex %s", vertex)
        return stored

    def add_edge(
        self,
        src: VertexLike,
        dest: VertexLike,
        weight: Weight,
        tag: TagLike = None,
    ) -> None:
        """Add the directed edge ``src -> dest``.

        Args:
            src: Source vertex; must be in the graph.
            dest: Destination vertex; must be in the graph.
            weight: Positive integer weight.
            tag: Optional tag distinguishing parallel edges.

        Raises:
            InvalidArgumentError: For a zero/invalid weight or a missing endpoint.
            DuplicateEdgeError: If the (src, dest, tag) edge already exists.
        """
        u, v = _as_vertex(src), _as_vertex(dest)
        with self._lock.write_locked():
            stored_tag = self._store.add_edge(u, v, key=tag, weight=weight)
        logger.debug("Added edge %s -> %s (%d, %s)", u, v, weight, stored_tag)

    def add_symmetric_edge(
        self,
        src: VertexLike,
        dest: VertexLike,
        weight: Weight,
        tag: TagLike = None,
    ) -> None:
        """Add ``src -> dest`` and ``dest -> src`` with the same weight and tag.

        Either both edges are added or neither is: if the reverse insertion
        fails, the forward edge is removed again before the error propagates.

        Raises:
            InvalidArgumentError: For a zero/invalid weight or a missing endpoint.
            DuplicateEdgeError: If either directed edge already exists.
        """
        u, v = _as_vertex(src), _as_vertex(dest)
        tag = as_tag(tag)
        with self._lock.write_locked():
            self._store.check_edge(u, v, weight)
            self._store.add_edge(u, v, key=tag, weight=weight)
            try:
                self._store.add_edge(v, u, key=tag, weight=weight)
            except GraphError:
                self._store.remove_edge(u, v, key=tag)
                logger.debug("Rolled back edge %s -> %s (%s)", u, v, tag)
                raise
        logger.debug("Added symmetric edge %s <-> %s (%d, %s)", u, v, weight, tag)

    def remove_edge(self, src: VertexLike, dest: VertexLike, tag: TagLike = None) -> None:
        """Remove ``src -> dest`` with ``tag``; a no-op if it does not exist."""
        u, v = _maybe_vertex(src), _maybe_vertex(dest)
        with self._lock.write_locked():
            removed = self._store.remove_edge(u, v, key=tag)
        if removed:
            logger.debug("Removed edge %s -> %s (%s)", u, v, as_tag(tag))

    def remove_symmetric_edge(
        self, src: VertexLike, dest: VertexLike, tag: TagLike = None
    ) -> None:
        """Remove both ``src -> dest`` and ``dest -> src`` carrying ``tag``.

        Each direction is removed independently if present; absence is not an
        error.
        """
        u, v = _maybe_vertex(src), _maybe_vertex(dest)
        with self._lock.write_locked():
            forward = self._store.remove_edge(u, v, key=tag)
            backward = self._store.remove_edge(v, u, key=tag)
        if forward or backward:
            logger.debug("Removed symmetric edge %s <-> %s (%s)", u, v, as_tag(tag))

    #
    # Queries
    #
    def contains_vertex(self, v: Any) -> bool:
        vertex = _maybe_vertex(v)
        with self._lock.read_locked():
            return self._store.canonical(vertex) is not None

    def contains_edge(self, src: VertexLike, dest: VertexLike, tag: TagLike = None) -> bool:
        """Check for the directed edge ``src -> dest`` with exactly ``tag``."""
        u, v = _maybe_vertex(src), _maybe_vertex(dest)
        with self._lock.read_locked():
            return self._store.has_tagged_edge(u, v, tag)

    def contains_symmetric_edge(
        self, src: VertexLike, dest: VertexLike, tag: TagLike = None
    ) -> bool:
        """Check that both directions exist with ``tag`` and share a weight."""
        u, v = _maybe_vertex(src), _maybe_vertex(dest)
        with self._lock.read_locked():
            if not (
                self._store.has_tagged_edge(u, v, tag)
                and self._store.has_tagged_edge(v, u, tag)
            ):
                return False
            forward = self._store.tagged_edge(u, v, tag)
            backward = self._store.tagged_edge(v, u, tag)
        return forward.weight == backward.weight

    def get_edge(self, src: VertexLike, dest: VertexLike, tag: TagLike = None) -> WeightedEdge:
        """Return the directed edge ``src -> dest`` with ``tag``.

        Raises:
            EdgeNotFoundError: If no such edge exists.
        """
        u, v = _maybe_vertex(src), _maybe_vertex(dest)
        with self._lock.read_locked():
            return self._store.tagged_edge(u, v, tag)

    def vertex(self, value: Hashable) -> Vertex:
        """Look up the stored vertex wrapping ``value``.

        Raises:
            VertexNotFoundError: If no vertex wraps ``value``.
        """
        with self._lock.read_locked():
            found = self._store.lookup(value)
        if found is None:
            raise VertexNotFoundError(f"No vertex with value {value!r}.")
        return found

    def vertices(self) -> List[Vertex]:
        """Snapshot of all vertices in insertion order."""
        with self._lock.read_locked():
            return self._store.vertex_list()

    def edges_from(self, src: VertexLike) -> List[WeightedEdge]:
        """Snapshot of the edges leaving ``src``; empty for unknown vertices."""
        u = _maybe_vertex(src)
        with self._lock.read_locked():
            return list(self._store.outgoing(u)) if u is not None else []

    def shortest_path(self, src: VertexLike, dest: VertexLike) -> List[PathEdge]:
        """Cheapest path from ``src`` to ``dest`` (Dijkstra).

        The shared lock is held for the whole search, so concurrent queries
        may overlap but mutations wait until it finishes.

        Returns:
            List[PathEdge]: Hops in order; empty if unreachable or src == dest.

        Raises:
            InvalidArgumentError: If ``src`` or ``dest`` is not in the graph.
        """
        u, v = _as_vertex(src), _as_vertex(dest)
        with self._lock.read_locked():
            return _spf(self._store, u, v, self.config)
