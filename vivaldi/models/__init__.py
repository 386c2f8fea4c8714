from .coordinates import (
    Coordinate as Coordinate,
    NetworkCoordinate as NetworkCoordinate,
    VivaldiConfig as VivaldiConfig,
)
from .update_result import (
    UpdateResponse as UpdateResponse,
    UpdateResult as UpdateResult,
)
