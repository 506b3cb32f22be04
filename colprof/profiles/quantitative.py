"""
Quantitative profile — descriptive statistics over numeric columns.

Emits minimum, maximum, mean, total, standard deviation, median, skewness,
kurtosis, population variance, the 80th/95th/99th percentiles, and the
geometric and quadratic means.  Empty or too-short streams yield ``NaN``
for the affected fields rather than failing the session.
"""

from __future__ import annotations

import logging

from colprof.config import ProfilerConfig
from colprof.models.value import Scalar, Value, ValueKind, coerce_float
from colprof.profiles.base import FieldKind, OutputField, ProfileResults
from colprof.stats.streaming_stats import StreamingStats

__all__ = ["QuantitativeProfile"]

logger = logging.getLogger(__name__)

_FIELDS: tuple[str, ...] = (
    "minimum",
    "maximum",
    "mean",
    "total",
    "stdev",
    "median",
    "skewness",
    "kurtosis",
    "population_variance",
    "percentile_80",
    "percentile_95",
    "percentile_99",
    "geometric_mean",
    "quadratic_mean",
)

_SCHEMA: tuple[OutputField, ...] = tuple(OutputField(f, FieldKind.DOUBLE) for f in _FIELDS)

_KINDS = frozenset({ValueKind.INT64, ValueKind.FLOAT64})


class QuantitativeProfile:
    """Profiles integer and floating-point columns."""

    name = "quantitative"

    def __init__(self, config: ProfilerConfig | None = None) -> None:
        self._config = config or ProfilerConfig()
        self._stats = StreamingStats(initial_capacity=self._config.initial_capacity)
        # Present values dropped as non-finite or of the wrong kind.
        self.skipped = 0

    def applicable_kinds(self) -> frozenset[ValueKind]:
        return _KINDS

    def output_schema(self) -> list[OutputField]:
        return list(_SCHEMA)

    def reset(self) -> None:
        self._stats.reset()
        self.skipped = 0

    def update(self, value: Value | Scalar) -> None:
        try:
            value = Value.of(value)
        except TypeError as exc:
            logger.debug("quantitative: ignoring %s", exc)
            self.skipped += 1
            return
        if value.is_absent:
            return
        x = coerce_float(value, skip_non_finite=self._config.skip_non_finite)
        if x is None:
            logger.debug("quantitative: ignoring %s value %r", value.kind.value, value.payload)
            self.skipped += 1
            return
        self._stats.update(x)

    @property
    def count(self) -> int:
        return self._stats.count

    def results(self) -> ProfileResults:
        snap = self._stats.snapshot()
        return {f: getattr(snap, f) for f in _FIELDS}
