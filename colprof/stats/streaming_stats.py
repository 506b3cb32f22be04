"""
Streaming descriptive statistics over a single numeric column.

Every observation is retained in a growable numpy buffer so that the
median, percentiles and higher moments are exact rather than approximated.
Nothing is derived while values arrive; :meth:`StreamingStats.snapshot`
computes the full vector on demand without touching the buffer.

Conventions
-----------
* ``stdev``, ``skewness`` and ``kurtosis`` are the bias-corrected sample
  estimators.  ``population_variance`` divides by ``n``.
* Percentiles interpolate linearly between order statistics at rank
  ``k/100 * (n - 1)``.
* Undefined statistics (empty stream, too few samples, ``ln`` of a
  non-positive value) are ``NaN``, never an exception.
* Sums are compensated (``math.fsum``) and central moments are taken in a
  second pass around the mean, so large offsets do not cancel away the
  spread.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass

import numpy as np

__all__ = ["StatsSnapshot", "StreamingStats"]

NAN = float("nan")

# Below this sample variance the data is treated as constant and the shape
# statistics collapse to zero.
_MIN_SHAPE_VARIANCE = 1e-19


# ---------------------------------------------------------------------------
# StatsSnapshot
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class StatsSnapshot:
    """Derived statistics at one point in the stream."""

    count: int
    minimum: float = NAN
    maximum: float = NAN
    mean: float = NAN
    total: float = NAN
    stdev: float = NAN
    median: float = NAN
    skewness: float = NAN
    kurtosis: float = NAN
    population_variance: float = NAN
    percentile_80: float = NAN
    percentile_95: float = NAN
    percentile_99: float = NAN
    geometric_mean: float = NAN
    quadratic_mean: float = NAN

    @classmethod
    def empty(cls) -> "StatsSnapshot":
        return cls(count=0)

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


# ---------------------------------------------------------------------------
# StreamingStats
# ---------------------------------------------------------------------------

class StreamingStats:
    """Exact statistics accumulator backed by a doubling float64 buffer.

    Usage::

        stats = StreamingStats()
        for x in column:
            stats.update(x)
        snap = stats.snapshot()
    """

    def __init__(self, initial_capacity: int = 64) -> None:
        self._initial_capacity = max(1, int(initial_capacity))
        self._buffer = np.empty(self._initial_capacity, dtype=np.float64)
        self._n = 0

    # ------------------------------------------------------------------
    # Accumulation
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Forget every observation."""
        self._buffer = np.empty(self._initial_capacity, dtype=np.float64)
        self._n = 0

    def update(self, x: float) -> None:
        """Append one observation (amortised O(1))."""
        if self._n == self._buffer.shape[0]:
            grown = np.empty(self._buffer.shape[0] * 2, dtype=np.float64)
            grown[: self._n] = self._buffer[: self._n]
            self._buffer = grown
        self._buffer[self._n] = x
        self._n += 1

    @property
    def count(self) -> int:
        return self._n

    @property
    def capacity(self) -> int:
        return int(self._buffer.shape[0])

    def values(self) -> np.ndarray:
        """Copy of the observations in arrival order."""
        return self._buffer[: self._n].copy()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def percentile(self, k: float) -> float:
        """Linearly interpolated *k*-th percentile, ``0 <= k <= 100``."""
        if not 0.0 <= k <= 100.0:
            raise ValueError(f"percentile rank must be in [0, 100], got {k!r}")
        if self._n == 0:
            return NAN
        ordered = np.sort(self._buffer[: self._n])
        return _interpolate(ordered, k)

    def snapshot(self) -> StatsSnapshot:
        """Compute every statistic from the observations seen so far."""
        n = self._n
        if n == 0:
            return StatsSnapshot.empty()

        data = self._buffer[:n]
        ordered = np.sort(data)
        lo = float(ordered[0])
        hi = float(ordered[-1])

        total = _fsum(data)
        mean = _mean(total, n, lo, hi)

        deviations = data - mean
        m2 = _fsum(deviations * deviations)

        return StatsSnapshot(
            count=n,
            minimum=lo,
            maximum=hi,
            mean=mean,
            total=total,
            stdev=math.sqrt(m2 / (n - 1)) if n > 1 else NAN,
            median=_interpolate(ordered, 50),
            skewness=_skewness(deviations, m2, n),
            kurtosis=_kurtosis(deviations, m2, n),
            population_variance=m2 / n,
            percentile_80=_interpolate(ordered, 80),
            percentile_95=_interpolate(ordered, 95),
            percentile_99=_interpolate(ordered, 99),
            geometric_mean=_geometric_mean(data, lo, n),
            quadratic_mean=_quadratic_mean(data, lo, hi, n),
        )


# ---------------------------------------------------------------------------
# Formulas
# ---------------------------------------------------------------------------

def _fsum(values: np.ndarray) -> float:
    try:
        return math.fsum(values)
    except (OverflowError, ValueError):
        # fsum refuses intermediate overflow and inf - inf; numpy yields inf/nan.
        return float(np.sum(values))


def _interpolate(ordered: np.ndarray, k: float) -> float:
    # numpy's "linear" method is rank k/100 * (n - 1) between order statistics.
    return float(np.percentile(ordered, k, method="linear"))


def _mean(total: float, n: int, lo: float, hi: float) -> float:
    mean = total / n
    if not math.isfinite(mean):
        return mean
    # Rounding can nudge near-constant data a ulp outside its range.
    return min(max(mean, lo), hi)


def _skewness(deviations: np.ndarray, m2: float, n: int) -> float:
    if n < 3:
        return NAN
    variance = m2 / (n - 1)
    if variance < _MIN_SHAPE_VARIANCE:
        return 0.0
    z = deviations / math.sqrt(variance)
    return n / ((n - 1) * (n - 2)) * _fsum(z * z * z)


def _kurtosis(deviations: np.ndarray, m2: float, n: int) -> float:
    if n < 4:
        return NAN
    variance = m2 / (n - 1)
    if variance < _MIN_SHAPE_VARIANCE:
        return 0.0
    z = deviations / math.sqrt(variance)
    z2 = z * z
    scale = n * (n + 1) / ((n - 1) * (n - 2) * (n - 3))
    correction = 3.0 * (n - 1) ** 2 / ((n - 2) * (n - 3))
    return scale * _fsum(z2 * z2) - correction


def _geometric_mean(data: np.ndarray, lo: float, n: int) -> float:
    if not lo > 0.0:
        return NAN
    return math.exp(_fsum(np.log(data)) / n)


def _quadratic_mean(data: np.ndarray, lo: float, hi: float, n: int) -> float:
    scale = max(abs(lo), abs(hi))
    if scale == 0.0:
        return 0.0
    if not math.isfinite(scale):
        return math.sqrt(_fsum(data * data) / n)
    # Squaring |x| above ~1.3e154 overflows; square x / max|x| instead.
    scaled = data / scale
    return scale * math.sqrt(_fsum(scaled * scaled) / n)
