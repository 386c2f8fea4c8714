from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator

from vivaldi.errors import (
    DimensionMismatchError,
    InvalidConfigurationError,
    InvalidCoordinateError,
)


class Coordinate:
    """
    A point in n-dimensional Euclidean space.

    Coordinates are immutable and their dimension is fixed when they are
    created. Arithmetic between coordinates of different dimension raises
    DimensionMismatchError rather than truncating or padding either side.
    """

    __slots__ = ("_components",)

    def __init__(self, components: Iterable[float]) -> None:
        values = tuple(float(component) for component in components)

        for value in values:
            if not math.isfinite(value):
                raise InvalidCoordinateError(
                    f"Err. - coordinate component {value} is not finite"
                )

        self._components = values

    @classmethod
    def origin(cls, dimensions: int) -> Coordinate:
        return cls([0.0] * dimensions)

    @property
    def dimensions(self) -> int:
        return len(self._components)

    @property
    def components(self) -> tuple[float, ...]:
        return self._components

    def magnitude(self) -> float:
        return math.hypot(*self._components)

    def scale(self, factor: float) -> Coordinate:
        return Coordinate(component * factor for component in self._components)

    def check_dimensions(self, other: Coordinate) -> None:
        if other.dimensions != self.dimensions:
            raise DimensionMismatchError(self.dimensions, other.dimensions)

    def __add__(self, other: Coordinate) -> Coordinate:
        if not isinstance(other, Coordinate):
            return NotImplemented

        self.check_dimensions(other)
        return Coordinate(
            left + right for left, right in zip(self._components, other._components)
        )

    def __sub__(self, other: Coordinate) -> Coordinate:
        if not isinstance(other, Coordinate):
            return NotImplemented

        self.check_dimensions(other)
        return Coordinate(
            left - right for left, right in zip(self._components, other._components)
        )

    def __mul__(self, factor: float) -> Coordinate:
        if not isinstance(factor, (int, float)):
            return NotImplemented

        return self.scale(factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Coordinate:
        if not isinstance(divisor, (int, float)):
            return NotImplemented

        return Coordinate(component / divisor for component in self._components)

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[float]:
        return iter(self._components)

    def __getitem__(self, index: int) -> float:
        return self._components[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented

        return self._components == other._components

    def __hash__(self) -> int:
        return hash(self._components)

    def __repr__(self) -> str:
        return f"Coordinate({list(self._components)!r})"


@dataclass(slots=True)
class VivaldiConfig:
    """
    Configuration for a Vivaldi coordinate model.

    ce and cc default to the values recommended by Dabek et al. Both must
    lie in (0, 1].
    """
    dimensions: int = 8

    # Update algorithm parameters
    ce: float = 0.25  # Error smoothing weight
    cc: float = 0.25  # Movement timestep
    initial_error: float = 1.0

    # Magnitudes at or below this are treated as zero when picking a direction
    zero_threshold: float = 1.0e-8

    # Convergence thresholds
    convergence_error_threshold: float = 0.05
    convergence_min_samples: int = 10

    seed: int | None = None

    def validate(self) -> None:
        if self.dimensions < 1:
            raise InvalidConfigurationError(
                f"Err. - dimensions must be at least 1, got {self.dimensions}"
            )

        for name in ("ce", "cc"):
            value = getattr(self, name)
            if not (0.0 < value <= 1.0):
                raise InvalidConfigurationError(
                    f"Err. - {name} must be in (0, 1], got {value}"
                )

        if not (0.0 <= self.initial_error <= 1.0):
            raise InvalidConfigurationError(
                f"Err. - initial_error must be in [0, 1], got {self.initial_error}"
            )

        if self.zero_threshold <= 0.0:
            raise InvalidConfigurationError(
                f"Err. - zero_threshold must be positive, got {self.zero_threshold}"
            )


@dataclass(slots=True)
class NetworkCoordinate:
    """
    Snapshot of a node's position and confidence.

    This is what a node piggybacks on its requests and responses so that
    peers can feed it to VivaldiModel.observe().
    """

    vec: Coordinate
    error: float = 1.0
    sample_count: int = 0
