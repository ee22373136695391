from datetime import datetime, timezone
from time import (
    perf_counter_ns,
    time as time_sec,
    time_ns as time_nano,
)


def time_s() -> float:
    """
    Get the current time in seconds since the epoch.

    Returns
    -------
    float
        The current time in seconds.
    """
    return time_sec()


def time_ns() -> int:
    """
    Get the current wall-clock time in nanoseconds since the epoch.

    Returns
    -------
    int
        The current time in nanoseconds.
    """
    return time_nano()


def perf_ns() -> int:
    """
    Read the monotonic high-resolution performance counter.

    Only differences between two readings are meaningful; this is the
    clock every benchmarked operation is timed against.

    Returns
    -------
    int
        Counter value in nanoseconds.
    """
    return perf_counter_ns()


def time_iso8601() -> str:
    """
    Get the current UTC time as an ISO 8601 string with millisecond precision.

    Returns
    -------
    str
        Timestamp such as "2024-04-04T00:28:50.516Z".
    """
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"
