from .coordinates import (
    VivaldiModel as VivaldiModel,
    estimate_rtt as estimate_rtt,
    random_unit_vector as random_unit_vector,
    unit_direction as unit_direction,
)
from .errors import (
    DimensionMismatchError as DimensionMismatchError,
    InvalidConfigurationError as InvalidConfigurationError,
    InvalidCoordinateError as InvalidCoordinateError,
    InvalidErrorEstimateError as InvalidErrorEstimateError,
    InvalidSampleError as InvalidSampleError,
    VivaldiError as VivaldiError,
)
from .models import (
    Coordinate as Coordinate,
    NetworkCoordinate as NetworkCoordinate,
    UpdateResponse as UpdateResponse,
    UpdateResult as UpdateResult,
    VivaldiConfig as VivaldiConfig,
)
