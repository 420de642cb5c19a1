"""Configuration classes for spgraph components."""

from dataclasses import dataclass

from spgraph.errors import DistanceOverflowError, InvalidArgumentError


@dataclass
class PathConfig:
    """Numeric settings for shortest-path distances."""

    # Width of the unsigned distance type; the largest value stands for infinity
    distance_bits: int = 64

    # Clamp overflowing sums to max_distance instead of raising
    saturate_on_overflow: bool = False

    def validate(self) -> None:
        """Check that the configuration is usable.

        Raises:
            InvalidArgumentError: If ``distance_bits`` is not an int of at least 8.
        """
        if isinstance(self.distance_bits, bool) or not isinstance(
            self.distance_bits, int
        ):
            raise InvalidArgumentError("distance_bits must be an integer.")
        if self.distance_bits < 8:
            raise InvalidArgumentError(
                f"distance_bits must be at least 8, got {self.distance_bits}."
            )

    @property
    def max_distance(self) -> int:
        """Largest representable distance, used as infinity."""
        return (1 << self.distance_bits) - 1

    def add_distance(self, distance: int, weight: int) -> int:
        """Add an edge weight to a finite distance under the overflow policy.

        Sums that reach ``max_distance`` would be indistinguishable from
        infinity, so they count as overflow.
        """
        total = distance + weight
        if total < self.max_distance:
            return total
        if self.saturate_on_overflow:
            return self.max_distance
        raise DistanceOverflowError(
            f"Distance {distance} + {weight} exceeds the {self.distance_bits}-bit "
            f"distance range."
        )


# Global configuration instance
PATH_CONFIG = PathConfig()
