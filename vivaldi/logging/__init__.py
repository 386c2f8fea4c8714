from .models import (
    Entry as Entry,
    Log as Log,
    LogLevel as LogLevel,
    LogLevelName as LogLevelName,
)
from .config import (
    LoggingConfig as LoggingConfig,
    StreamType as StreamType,
)
from .streams import LoggerStream as LoggerStream
from .vivaldi_logging_models import (
    CoordinateUpdateDebug as CoordinateUpdateDebug,
    DegenerateDirectionDebug as DegenerateDirectionDebug,
    SampleRejectedWarn as SampleRejectedWarn,
)
