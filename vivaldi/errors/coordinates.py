"""
Exceptions raised by the Vivaldi coordinate model.

DimensionMismatchError is structural: two coordinates of different
dimension met in one operation, which is a programming error on the
caller's side. InvalidSampleError and InvalidErrorEstimateError describe
bad input data; the caller should drop the sample and keep going.
"""


class VivaldiError(Exception):
    """Base class for all Vivaldi errors."""
    pass


class DimensionMismatchError(VivaldiError, ValueError):
    """
    Raised when two coordinates of different dimension are combined.

    Coordinates are never truncated or padded to make them fit.
    """

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Err. - expected coordinate with {expected} dimensions, got {actual}"
        )


class InvalidCoordinateError(VivaldiError, ValueError):
    """Raised when a coordinate component is NaN or infinite."""
    pass


class InvalidSampleError(VivaldiError, ValueError):
    """Raised when a measured RTT is not finite and strictly positive."""
    pass


class InvalidErrorEstimateError(VivaldiError, ValueError):
    """Raised when a remote error estimate is not finite and non-negative."""
    pass


class InvalidConfigurationError(VivaldiError, ValueError):
    pass
