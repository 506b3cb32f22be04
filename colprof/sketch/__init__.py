"""Bounded-memory sketches."""

from colprof.sketch.hyperloglog import CardinalitySketch, precision_for_error

__all__ = ["CardinalitySketch", "precision_for_error"]
