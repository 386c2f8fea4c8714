from .coordinate_engine import (
    VivaldiModel as VivaldiModel,
    estimate_rtt as estimate_rtt,
)
from .vectors import (
    add as add,
    magnitude as magnitude,
    random_unit_vector as random_unit_vector,
    scale as scale,
    subtract as subtract,
    unit_direction as unit_direction,
)
