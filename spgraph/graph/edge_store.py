"""Adjacency storage for directed, weighted, optionally tagged edges.

`EdgeStore` extends `networkx.MultiDiGraph`. Nodes are `Vertex` objects and
edge keys are `Tag` values, so parallel edges between the same ordered pair
of vertices are told apart by their tag. Each edge carries a ``weight``
attribute. The store enforces:
  - No implicit node creation when adding an edge.
  - Idempotent vertex insertion, one canonical vertex per value.
  - No duplicate (source, destination, tag) triples.
  - Strictly positive integer weights below the configured distance ceiling.
  - Removing an absent edge is a no-op.
  - Vertices are append-only: node removal raises.
  - Bulk inserts and `copy()` go through the same checks.

The store performs no locking; `spgraph.graph.graph.Graph` wraps it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Hashable, Iterable, Iterator, List, Optional, Union

import networkx as nx

from spgraph.config import PATH_CONFIG, PathConfig
from spgraph.errors import DuplicateEdgeError, EdgeNotFoundError, InvalidArgumentError
from spgraph.graph.vertex import Vertex
from spgraph.types.base import Tag, Weight, as_tag

TagLike = Union[None, str, Tag]

WEIGHT_ATTR = "weight"


@dataclass(frozen=True)
class WeightedEdge:
    """Read-only view of one stored edge.

    Attributes:
        source: Vertex the edge leaves.
        destination: Vertex the edge enters.
        weight: Positive integer weight.
        tag: Edge tag (`Untagged` or `Tagged`).
    """

    source: Vertex
    destination: Vertex
    weight: Weight
    tag: Tag

    def __str__(self) -> str:
        return f"{self.source} -> {self.destination} ({self.weight}, {self.tag})"


class EdgeStore(nx.MultiDiGraph):
    """Vertex set plus per-vertex outgoing edge lists.

    Adjacency iteration follows insertion order: neighbours in the order
    their first edge was added, then parallel edges in tag insertion order.
    """

    def __init__(self, config: Optional[PathConfig] = None, **attr: Any) -> None:
        """Initialize an empty store.

        Args:
            config: Numeric settings; weights must stay below its ``max_distance``.
            **attr: Graph attributes forwarded to ``networkx.MultiDiGraph``.
        """
        super().__init__(**attr)
        self.path_config = config or PATH_CONFIG
        # Wrapped value -> canonical vertex, in insertion order.
        self._vertices: Dict[Hashable, Vertex] = {}

    #
    # Vertex management
    #
    def add_node(self, node_for_adding: Vertex, **attr: Any) -> Vertex:  # type: ignore[override]
        """Add a vertex unless an equal one is already stored.

        Args:
            node_for_adding: Vertex to add.
            **attr: Node attributes (applied only on first insertion).

        Returns:
            Vertex: The canonical stored vertex for this value.

        Raises:
            InvalidArgumentError: If ``node_for_adding`` is not a `Vertex`.
        """
        if not isinstance(node_for_adding, Vertex):
            raise InvalidArgumentError(
                f"Expected a Vertex, got {type(node_for_adding).__name__}."
            )
        existing = self._vertices.get(node_for_adding.value)
        if existing is not None:
            return existing
        super().add_node(node_for_adding, **attr)
        self._vertices[node_for_adding.value] = node_for_adding
        return node_for_adding

    def add_nodes_from(self, nodes_for_adding: Iterable[Any], **attr: Any) -> None:
        """Add several vertices through `add_node`.

        Items are vertices or ``(vertex, attr_dict)`` pairs, as in networkx.
        """
        for item in nodes_for_adding:
            if isinstance(item, tuple) and len(item) == 2 and isinstance(item[1], dict):
                node, node_attr = item
                self.add_node(node, **{**attr, **node_attr})
            else:
                self.add_node(item, **attr)

    def remove_node(self, n: Vertex) -> None:
        """Vertices are append-only; always raises.

        Raises:
            InvalidArgumentError: On every call.
        """
        raise InvalidArgumentError(f"Cannot remove vertex '{n}': vertices are append-only.")

    def remove_nodes_from(self, nodes: Iterable[Vertex]) -> None:
        """Vertices are append-only; always raises."""
        raise InvalidArgumentError("Cannot remove vertices: vertices are append-only.")

    def clear(self) -> None:
        """Drop every vertex and edge, leaving an empty store."""
        super().clear()
        self._vertices.clear()

    def copy(self, as_view: bool = False) -> EdgeStore:
        """Return an independent store with the same vertices, edges and config.

        Vertices keep their insertion order and each vertex keeps its
        outgoing edge order, so searches on the copy behave identically.

        Args:
            as_view: Unsupported; read-only views would bypass the vertex index.

        Raises:
            InvalidArgumentError: If ``as_view`` is True.
        """
        if as_view:
            raise InvalidArgumentError("EdgeStore does not support graph views.")
        clone = self.__class__(config=self.path_config, **self.graph)
        for vertex in self.vertex_list():
            clone.add_node(vertex, **self._node[vertex])
        for u, v, tag, edge_attr in self.edges(keys=True, data=True):
            clone.add_edge(u, v, key=tag, **edge_attr)
        return clone

    def canonical(self, vertex: Optional[Vertex]) -> Optional[Vertex]:
        """Return the stored vertex equal to ``vertex``, or None."""
        if not isinstance(vertex, Vertex):
            return None
        return self._vertices.get(vertex.value)

    def lookup(self, value: Hashable) -> Optional[Vertex]:
        """Return the stored vertex wrapping ``value``, or None."""
        try:
            return self._vertices.get(value)
        except TypeError:
            return None

    def vertex_list(self) -> List[Vertex]:
        """Stored vertices in insertion order."""
        return list(self._vertices.values())

    #
    # Edge management
    #
    def check_edge(self, src: Optional[Vertex], dest: Optional[Vertex], weight: Any) -> None:
        """Validate endpoints and weight without touching the store.

        Raises:
            InvalidArgumentError: If the weight is not a positive integer below
                the distance ceiling, or an endpoint is missing or unknown.
        """
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise InvalidArgumentError(
                f"Weight must be an integer, got {type(weight).__name__}."
            )
        if weight <= 0:
            raise InvalidArgumentError(f"Weight must be positive, got {weight}.")
        if weight >= self.path_config.max_distance:
            raise InvalidArgumentError(
                f"Weight {weight} does not fit the {self.path_config.distance_bits}-bit "
                f"distance range."
            )
        if src is None:
            raise InvalidArgumentError("Source vertex cannot be None.")
        if dest is None:
            raise InvalidArgumentError("Destination vertex cannot be None.")
        if self.canonical(src) is None:
            raise InvalidArgumentError(f"Source vertex '{src}' is not in the graph.")
        if self.canonical(dest) is None:
            raise InvalidArgumentError(f"Destination vertex '{dest}' is not in the graph.")

    def add_edge(  # type: ignore[override]
        self,
        u_for_edge: Vertex,
        v_for_edge: Vertex,
        key: TagLike = None,
        **attr: Any,
    ) -> Tag:
        """Add a directed edge ``u_for_edge -> v_for_edge``.

        Both vertices must already be stored. The edge weight is taken from
        the ``weight`` attribute.

        Args:
            u_for_edge: Source vertex.
            v_for_edge: Destination vertex.
            key: Edge tag; None means untagged.
            **attr: Edge attributes; must include ``weight``.

        Returns:
            Tag: The normalized tag the edge is stored under.

        Raises:
            InvalidArgumentError: For a bad weight, tag, or endpoint.
            DuplicateEdgeError: If the (source, destination, tag) edge exists.
        """
        tag = as_tag(key)
        self.check_edge(u_for_edge, v_for_edge, attr.get(WEIGHT_ATTR))
        if self.has_tagged_edge(u_for_edge, v_for_edge, tag):
            raise DuplicateEdgeError(
                f"Edge {u_for_edge} -> {v_for_edge} with tag {tag} already exists."
            )
        super().add_edge(
            self.canonical(u_for_edge), self.canonical(v_for_edge), key=tag, **attr
        )
        return tag

    def remove_edge(self, u: Vertex, v: Vertex, key: TagLike = None) -> bool:  # type: ignore[override]
        """Remove the edge ``u -> v`` carrying tag ``key``, if present.

        Returns:
            bool: True if an edge was removed.
        """
        tag = as_tag(key)
        if not self.has_tagged_edge(u, v, tag):
            return False
        super().remove_edge(u, v, key=tag)
        return True

    def add_edges_from(self, ebunch_to_add: Iterable[tuple], **attr: Any) -> List[Tag]:  # type: ignore[override]
        """Add several edges through `add_edge`.

        Accepts the networkx edge forms ``(u, v)``, ``(u, v, attr_dict)``,
        ``(u, v, key)`` and ``(u, v, key, attr_dict)``; ``attr`` supplies
        defaults such as a shared ``weight``. Edges before a failing one stay
        added.

        Returns:
            List[Tag]: The tag of each added edge, in order.
        """
        tags: List[Tag] = []
        for edge in ebunch_to_add:
            if len(edge) == 4:
                u, v, key, edge_attr = edge
            elif len(edge) == 3:
                u, v, third = edge
                key, edge_attr = (None, third) if isinstance(third, dict) else (third, {})
            elif len(edge) == 2:
                u, v = edge
                key, edge_attr = None, {}
            else:
                raise InvalidArgumentError(f"Edge tuple {edge!r} must have 2 to 4 items.")
            tags.append(self.add_edge(u, v, key=key, **{**attr, **edge_attr}))
        return tags

    #
    # Queries
    #
    def has_tagged_edge(self, u: Optional[Vertex], v: Optional[Vertex], key: TagLike = None) -> bool:
        """Check for the exact (source, destination, tag) edge."""
        if not isinstance(u, Vertex) or not isinstance(v, Vertex):
            return False
        tag = as_tag(key)
        nbrs = self._adj.get(u)
        if nbrs is None:
            return False
        keydict = nbrs.get(v)
        return keydict is not None and tag in keydict

    def tagged_edge(self, u: Optional[Vertex], v: Optional[Vertex], key: TagLike = None) -> WeightedEdge:
        """Return the (source, destination, tag) edge.

        Raises:
            EdgeNotFoundError: If no such edge is stored.
        """
        tag = as_tag(key)
        if not self.has_tagged_edge(u, v, tag):
            raise EdgeNotFoundError(f"No edge {u} -> {v} with tag {tag}.")
        return WeightedEdge(
            self.canonical(u),
            self.canonical(v),
            self._adj[u][v][tag][WEIGHT_ATTR],
            tag,
        )

    def outgoing(self, u: Vertex) -> Iterator[WeightedEdge]:
        """Yield edges leaving ``u`` in adjacency insertion order."""
        src = self.canonical(u)
        if src is None:
            return
        for dest, keydict in self._adj[src].items():
            for tag, edge_attr in keydict.items():
                yield WeightedEdge(src, dest, edge_attr[WEIGHT_ATTR], tag)
