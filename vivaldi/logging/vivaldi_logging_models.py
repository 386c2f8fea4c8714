from .models import Entry, LogLevel


class CoordinateUpdateDebug(Entry, kw_only=True):
    dimensions: int
    estimated_rtt: float
    measured_rtt: float
    relative_error: float
    weight: float
    local_error: float
    level: LogLevel = LogLevel.DEBUG


class DegenerateDirectionDebug(Entry, kw_only=True):
    dimensions: int
    separation: float
    level: LogLevel = LogLevel.DEBUG


class SampleRejectedWarn(Entry, kw_only=True):
    reason: str
    measured_rtt: float
    remote_error: float
    remote_dimensions: int
    level: LogLevel = LogLevel.WARN
