from .coordinates import (
    DimensionMismatchError as DimensionMismatchError,
    InvalidConfigurationError as InvalidConfigurationError,
    InvalidCoordinateError as InvalidCoordinateError,
    InvalidErrorEstimateError as InvalidErrorEstimateError,
    InvalidSampleError as InvalidSampleError,
    VivaldiError as VivaldiError,
)
