"""Latency statistics over duration samples.

Mean, sample standard deviation and a normal-approximation confidence
interval, plus the percentile summary used in reports. All functions are
pure and independent of sample order.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np
from msgspec import Struct

Z_95 = 1.96

DEFAULT_PERCENTILES: tuple[float, ...] = (50.0, 95.0, 99.0)


class ConfidenceInterval(Struct, frozen=True):
    """A two-sided confidence interval around a sample mean.

    Attributes:
        mean: Sample mean.
        lower: mean - half_width.
        upper: mean + half_width.
        half_width: z * stddev / sqrt(n), 0 when n < 2.
    """

    mean: float
    lower: float
    upper: float
    half_width: float


def _as_array(durations: Sequence[int] | Sequence[float] | np.ndarray) -> np.ndarray:
    return np.asarray(durations, dtype=np.float64)


def _check_z(z: float) -> None:
    if not z > 0.0:
        raise ValueError(f"Invalid z; expected >0 but got {z}")


def mean(durations: Sequence[int] | Sequence[float] | np.ndarray) -> float:
    """Arithmetic mean of the samples, 0.0 when there are none."""
    arr = _as_array(durations)
    if arr.size == 0:
        return 0.0
    return float(np.mean(arr))


def sample_stddev(durations: Sequence[int] | Sequence[float] | np.ndarray) -> float:
    """Sample (n - 1) standard deviation, 0.0 when fewer than two samples."""
    arr = _as_array(durations)
    if arr.size < 2:
        return 0.0
    return float(np.std(arr, ddof=1))


def confidence_interval(
    durations: Sequence[int] | Sequence[float] | np.ndarray,
    z: float = Z_95,
) -> float:
    """Half width of the confidence interval around the mean.

    Computed as z * sample_stddev / sqrt(n). The variance is undefined for
    fewer than two samples, in which case 0.0 is returned.

    Args:
        durations: Duration samples.
        z: Critical value, 1.96 for a two-sided 95% interval.

    Raises:
        ValueError: If z is not positive.
    """
    _check_z(z)
    arr = _as_array(durations)
    if arr.size < 2:
        return 0.0
    return z * float(np.std(arr, ddof=1)) / math.sqrt(arr.size)


def interval(
    durations: Sequence[int] | Sequence[float] | np.ndarray,
    z: float = Z_95,
) -> ConfidenceInterval:
    """Confidence interval [mean - ci, mean + ci] for the samples."""
    centre = mean(durations)
    half_width = confidence_interval(durations, z)
    return ConfidenceInterval(
        mean=centre,
        lower=centre - half_width,
        upper=centre + half_width,
        half_width=half_width,
    )


def percentiles(
    durations: Sequence[int] | Sequence[float] | np.ndarray,
    qs: Sequence[float] = DEFAULT_PERCENTILES,
) -> dict[str, float]:
    """Percentiles of the samples keyed "p50", "p95", "p99_9" and so on.

    Returns zeros when there are no samples.
    """
    keys = ["p" + f"{q:g}".replace(".", "_") for q in qs]
    arr = _as_array(durations)
    if arr.size == 0:
        return {key: 0.0 for key in keys}
    values = np.percentile(arr, list(qs))
    return {key: float(value) for key, value in zip(keys, values)}
