"""Base types shared across graph storage and path algorithms.

Edge tags are modeled as a small sum type: an edge is either `Untagged` or
`Tagged` with a name. Two untagged edges between the same pair of vertices
are the same edge; tagged edges are distinguished by name.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from spgraph.errors import InvalidArgumentError

#: Positive integer weight of a single edge.
Weight = int

#: Non-negative integer length of a path (sum of edge weights).
Distance = int


@dataclass(frozen=True)
class Untagged:
    """Marker for an edge without a tag. All instances compare equal."""

    @property
    def value(self) -> Optional[str]:
        return None

    def __str__(self) -> str:
        return "<untagged>"


@dataclass(frozen=True)
class Tagged:
    """An edge tag carrying a name.

    Attributes:
        name: Tag string distinguishing parallel edges between the same pair.
    """

    name: str

    @property
    def value(self) -> Optional[str]:
        return self.name

    def __str__(self) -> str:
        return self.name


#: Edge tag: either `Untagged` or `Tagged`.
Tag = Union[Untagged, Tagged]

#: Shared untagged value.
UNTAGGED = Untagged()


def as_tag(value: Union[None, str, Tag]) -> Tag:
    """Normalize caller input into a `Tag`.

    Args:
        value: ``None`` for no tag, a string for a named tag, or an existing tag.

    Returns:
        The corresponding `Tag` value.

    Raises:
        InvalidArgumentError: If ``value`` is of any other type.
    """
    if value is None:
        return UNTAGGED
    if isinstance(value, (Untagged, Tagged)):
        return value
    if isinstance(value, str):
        return Tagged(value)
    raise InvalidArgumentError(
        f"Tag must be None, a string, or a Tag; got {type(value).__name__}."
    )
