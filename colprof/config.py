"""
colprof configuration — every tunable knob in one place.

The uniques sketch defaults to a 10% relative error.  Override via
``ProfilerConfig(relative_error=0.02)`` or through ``COLPROF_*`` environment
variables (see :meth:`ProfilerConfig.from_env`).
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

__all__ = ["ProfilerConfig"]

_TRUE = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ProfilerConfig:
    """Immutable configuration for every profile in a session."""

    # ── Uniques (HyperLogLog) ────────────────────────────────────────
    relative_error: float = 0.1
    """Target relative standard error of the cardinality sketch.  The
    register count is the smallest power of two with ``1.04/sqrt(m) <= ε``."""

    # ── Quantitative ─────────────────────────────────────────────────
    skip_non_finite: bool = True
    """Drop NaN / ±Inf before they reach the statistics buffer."""

    initial_capacity: int = 64
    """Starting size of the observation buffer; it doubles when full."""

    # ── Frame sampling ───────────────────────────────────────────────
    sample_rows: int | None = None
    """Max rows profiled per table.  ``None`` profiles every row."""

    sample_seed: int = 42

    def __post_init__(self) -> None:
        if not 0.0 < self.relative_error < 1.0:
            raise ValueError(
                f"relative_error must be in (0, 1), got {self.relative_error!r}"
            )
        if self.initial_capacity < 1:
            raise ValueError(
                f"initial_capacity must be positive, got {self.initial_capacity!r}"
            )
        if self.sample_rows is not None and self.sample_rows < 1:
            raise ValueError(
                f"sample_rows must be positive, got {self.sample_rows!r}"
            )

    @classmethod
    def from_env(cls, prefix: str = "COLPROF_", **overrides) -> "ProfilerConfig":
        """Build a config from ``<prefix>*`` environment variables.

        A ``.env`` file in the working directory is loaded first.  Keyword
        *overrides* win over the environment.
        """
        load_dotenv()
        values: dict = {}
        raw = os.environ.get(f"{prefix}RELATIVE_ERROR")
        if raw:
            values["relative_error"] = float(raw)
        raw = os.environ.get(f"{prefix}SKIP_NON_FINITE")
        if raw:
            values["skip_non_finite"] = raw.strip().lower() in _TRUE
        raw = os.environ.get(f"{prefix}INITIAL_CAPACITY")
        if raw:
            values["initial_capacity"] = int(raw)
        raw = os.environ.get(f"{prefix}SAMPLE_ROWS")
        if raw:
            values["sample_rows"] = int(raw)
        raw = os.environ.get(f"{prefix}SAMPLE_SEED")
        if raw:
            values["sample_seed"] = int(raw)
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
