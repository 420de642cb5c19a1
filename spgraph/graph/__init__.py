"""Graph primitives.

This package provides the `Vertex` type, the `EdgeStore` adjacency structure
built on ``networkx.MultiDiGraph``, the reader-writer lock, and the
thread-safe `Graph` facade (`spgraph.graph.graph`).
"""
