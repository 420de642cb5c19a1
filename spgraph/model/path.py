"""Shortest-path result records.

A resolved path is a list of `PathEdge` hops in traversal order. The empty
list means "no hops": either the destination is unreachable or it equals
the source.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from spgraph.graph.vertex import Vertex
from spgraph.types.base import UNTAGGED, Distance, Tag, Weight


@dataclass(frozen=True)
class PathEdge:
    """One hop of a resolved shortest path.

    Attributes:
        source: Vertex the hop leaves.
        destination: Vertex the hop enters.
        weight: Weight of the edge taken.
        tag: Tag of the edge taken, distinguishing it from parallel edges.
    """

    source: Vertex
    destination: Vertex
    weight: Weight
    tag: Tag = UNTAGGED

    def __str__(self) -> str:
        text = f"{self.source} -> {self.destination}, Cost: {self.weight}"
        if self.tag.value is None:
            return text
        return f"{text}, tag: '{self.tag.value}'"


def path_cost(path: Sequence[PathEdge]) -> Distance:
    """Total weight of a path; 0 for an empty path."""
    return sum(hop.weight for hop in path)


def path_vertices(path: Sequence[PathEdge]) -> List[Vertex]:
    """Vertices visited by a path, source first.

    Returns an empty list for an empty path.
    """
    if not path:
        return []
    return [path[0].source] + [hop.destination for hop in path]
