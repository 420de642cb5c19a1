"""Graph vertex wrapping a caller-supplied hashable value."""

from __future__ import annotations

from typing import Any, Generic, Hashable, TypeVar

from spgraph.errors import InvalidArgumentError

T = TypeVar("T", bound=Hashable)


class Vertex(Generic[T]):
    """A node in the graph.

    Vertices are identified by their wrapped value: two ``Vertex`` objects
    holding equal values are equal and hash alike, so a graph stores one
    canonical vertex per value.

    Attributes:
        value: The wrapped caller value.
    """

    __slots__ = ("_value", "_hash")

    def __init__(self, value: T) -> None:
        try:
            value_hash = hash(value)
        except TypeError as exc:
            raise InvalidArgumentError(
                f"Vertex value must be hashable, got {type(value).__name__}."
            ) from exc
        self._value = value
        self._hash = value_hash

    @property
    def value(self) -> T:
        return self._value

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return self._hash

    def __repr__(self) -> str:
        return f"Vertex({self._value!r})"

    def __str__(self) -> str:
        return str(self._value)
