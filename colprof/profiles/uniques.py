"""Uniques profile — approximate distinct count of string columns."""

from __future__ import annotations

import logging

from colprof.config import ProfilerConfig
from colprof.models.value import Scalar, Value, ValueKind
from colprof.profiles.base import FieldKind, OutputField, ProfileResults
from colprof.sketch.hyperloglog import CardinalitySketch

__all__ = ["UniquesProfile"]

logger = logging.getLogger(__name__)

_SCHEMA: tuple[OutputField, ...] = (OutputField("value", FieldKind.LONG),)

_KINDS = frozenset({ValueKind.UTF8})


class UniquesProfile:
    """Estimates how many distinct strings a column holds (HyperLogLog)."""

    name = "uniques"

    def __init__(self, config: ProfilerConfig | None = None) -> None:
        self._config = config or ProfilerConfig()
        self._sketch = CardinalitySketch(self._config.relative_error)
        # Present values that are not strings.
        self.skipped = 0

    def applicable_kinds(self) -> frozenset[ValueKind]:
        return _KINDS

    def output_schema(self) -> list[OutputField]:
        return list(_SCHEMA)

    @property
    def sketch(self) -> CardinalitySketch:
        return self._sketch

    def reset(self) -> None:
        self._sketch.reset()
        self.skipped = 0

    def update(self, value: Value | Scalar) -> None:
        try:
            value = Value.of(value)
        except TypeError as exc:
            logger.debug("uniques: ignoring %s", exc)
            self.skipped += 1
            return
        if value.kind is not ValueKind.UTF8:
            if not value.is_absent:
                logger.debug("uniques: ignoring %s value %r", value.kind.value, value.payload)
                self.skipped += 1
            return
        self._sketch.update(value.payload)

    def results(self) -> ProfileResults:
        return {"value": self._sketch.count()}
