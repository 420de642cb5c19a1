"""Shared pytest fixtures: small sample graphs.

Diagrams show edge weights in brackets.
"""

from __future__ import annotations

import pytest

from spgraph import Graph


@pytest.fixture
def square1():
    # Weight:
    #       [1]        [10]
    #   ┌────────►B─────────┐
    #   │                   │
    #   │                   ▼
    #   A                   C
    #   │                   ▲
    #   │   [5]        [5]  │
    #   └────────►D─────────┘
    g = Graph()
    for name in ("A", "B", "C", "D"):
        g.add_vertex(name)

    g.add_edge("A", "B", 1)
    g.add_edge("B", "C", 10)
    g.add_edge("A", "D", 5)
    g.add_edge("D", "C", 5)
    return g


@pytest.fixture
def square_tie():
    # Both routes cost 2; A->B is inserted first.
    #       [1]        [1]
    #   ┌────────►B─────────┐
    #   │                   ▼
    #   A                   C
    #   │                   ▲
    #   │   [1]        [1]  │
    #   └────────►D─────────┘
    g = Graph()
    for name in ("A", "B", "C", "D"):
        g.add_vertex(name)

    g.add_edge("A", "B", 1)
    g.add_edge("A", "D", 1)
    g.add_edge("B", "C", 1)
    g.add_edge("D", "C", 1)
    return g


@pytest.fixture
def line_parallel():
    # Parallel tagged edges:
    #      [4]         [3, 1 "fast", 2 "slow"]
    #  A────────►B════════►C
    g = Graph()
    for name in ("A", "B", "C"):
        g.add_vertex(name)

    g.add_edge("A", "B", 4)
    g.add_edge("B", "C", 3)
    g.add_edge("B", "C", 1, tag="fast")
    g.add_edge("B", "C", 2, tag="slow")
    return g


@pytest.fixture
def mesh1():
    # Symmetric mesh; E is isolated.
    #        [2]
    #   A◄─────────►B
    #   ▲ ▲         ▲
    #   │  \[7]     │ [3]
    #   │[9] \      ▼
    #   ▼     ►D◄──►C
    #   F          [1]
    #
    #   E
    g = Graph()
    for name in ("A", "B", "C", "D", "E", "F"):
        g.add_vertex(name)

    g.add_symmetric_edge("A", "B", 2)
    g.add_symmetric_edge("B", "C", 3)
    g.add_symmetric_edge("C", "D", 1)
    g.add_symmetric_edge("A", "D", 7)
    g.add_symmetric_edge("A", "F", 9)
    return g
