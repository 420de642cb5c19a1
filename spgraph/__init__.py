"""spgraph: in-memory directed, weighted graph with shortest-path queries.

Vertices wrap hashable values; edges are directed, carry a positive integer
weight and an optional tag that tells parallel edges apart. Shortest paths
are computed with Dijkstra's algorithm.

Example:
    from spgraph import Graph

    g = Graph()
    for name in "ABCD":
        g.add_vertex(name)
    g.add_edge("A", "B", 1)
    g.add_edge("B", "C", 10)
    g.add_edge("A", "D", 5)
    g.add_edge("D", "C", 5)

    for hop in g.shortest_path("A", "C"):
        print(hop)  # A -> D, Cost: 5 / D -> C, Cost: 5
"""

from __future__ import annotations

from spgraph import logging
from spgraph._version import __version__
from spgraph.config import PATH_CONFIG, PathConfig
from spgraph.errors import (
    DistanceOverflowError,
    DuplicateEdgeError,
    EdgeNotFoundError,
    GraphError,
    InvalidArgumentError,
    VertexNotFoundError,
)
from spgraph.graph.edge_store import WeightedEdge
from spgraph.graph.graph import Graph
from spgraph.graph.vertex import Vertex
from spgraph.model.path import PathEdge, path_cost, path_vertices
from spgraph.types.base import UNTAGGED, Tag, Tagged, Untagged

__all__ = [
    # Version
    "__version__",
    # Graph
    "Graph",
    "Vertex",
    "WeightedEdge",
    # Paths
    "PathEdge",
    "path_cost",
    "path_vertices",
    # Tags
    "Tag",
    "Tagged",
    "Untagged",
    "UNTAGGED",
    # Configuration
    "PathConfig",
    "PATH_CONFIG",
    # Errors
    "GraphError",
    "InvalidArgumentError",
    "DuplicateEdgeError",
    "EdgeNotFoundError",
    "VertexNotFoundError",
    "DistanceOverflowError",
    # Utilities
    "logging",
]
