import random

from vivaldi.errors import InvalidConfigurationError
from vivaldi.models import Coordinate


ZERO_THRESHOLD = 1.0e-8


def add(left: Coordinate, right: Coordinate) -> Coordinate:
    return left + right


def subtract(left: Coordinate, right: Coordinate) -> Coordinate:
    return left - right


def scale(coordinate: Coordinate, factor: float) -> Coordinate:
    return coordinate.scale(factor)


def magnitude(coordinate: Coordinate) -> float:
    return coordinate.magnitude()


def unit_direction(
    coordinate: Coordinate,
    zero_threshold: float = ZERO_THRESHOLD,
) -> Coordinate | None:
    """
    Return the coordinate scaled to length one, or None when its magnitude
    is too small for the direction to mean anything.
    """
    length = coordinate.magnitude()
    if length <= zero_threshold:
        return None

    return coordinate / length


def random_unit_vector(
    dimensions: int,
    rng: random.Random,
    zero_threshold: float = ZERO_THRESHOLD,
) -> Coordinate:
    """
    Draw a direction uniformly per axis from [-1, 1] and normalize it.

    Used to separate two coincident coordinates. Resamples in the
    (vanishingly unlikely) event the draw lands on the origin.
    """
    if dimensions < 1:
        raise InvalidConfigurationError(
            f"Err. - dimensions must be at least 1, got {dimensions}"
        )

    while True:
        candidate = Coordinate(rng.uniform(-1.0, 1.0) for _ in range(dimensions))

        if (direction := unit_direction(candidate, zero_threshold)) is not None:
            return direction
