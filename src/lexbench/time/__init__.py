"""Time utilities used by the logger and the benchmark engine."""

from .time import (
    perf_ns as perf_ns,
)
from .time import (
    time_iso8601 as time_iso8601,
)
from .time import (
    time_ns as time_ns,
)
from .time import (
    time_s as time_s,
)
