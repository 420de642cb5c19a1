"""Shared type definitions."""

from spgraph.types.base import (
    UNTAGGED,
    Distance,
    Tag,
    Tagged,
    Untagged,
    Weight,
    as_tag,
)

__all__ = [
    "Distance",
    "Tag",
    "Tagged",
    "Untagged",
    "UNTAGGED",
    "Weight",
    "as_tag",
]
