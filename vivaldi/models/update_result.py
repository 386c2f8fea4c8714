from dataclasses import dataclass
from enum import Enum

from vivaldi.errors import (
    DimensionMismatchError,
    InvalidErrorEstimateError,
    InvalidSampleError,
)

from .coordinates import Coordinate


class UpdateResult(Enum):
    """Outcome of folding one RTT sample into a model."""

    SUCCESS = "success"
    DIMENSION_MISMATCH = "dimension_mismatch"
    INVALID_SAMPLE = "invalid_sample"
    INVALID_ERROR_ESTIMATE = "invalid_error_estimate"


@dataclass(slots=True)
class UpdateResponse:
    """
    Response from VivaldiModel.update().

    coordinate and error always describe the model after the call. For a
    rejected sample they are the unchanged prior state, and the
    sample-specific fields stay None.
    """

    result: UpdateResult
    coordinate: Coordinate
    error: float
    message: str = ""
    estimated_rtt: float | None = None
    relative_error: float | None = None
    weight: float | None = None
    remote_dimensions: int | None = None

    @property
    def ok(self) -> bool:
        return self.result == UpdateResult.SUCCESS

    def raise_for_result(self) -> None:
        match self.result:
            case UpdateResult.DIMENSION_MISMATCH:
                raise DimensionMismatchError(
                    self.coordinate.dimensions,
                    self.remote_dimensions,
                )

            case UpdateResult.INVALID_SAMPLE:
                raise InvalidSampleError(self.message)

            case UpdateResult.INVALID_ERROR_ESTIMATE:
                raise InvalidErrorEstimateError(self.message)

            case _:
                pass
