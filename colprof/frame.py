"""
Polars adapter — profile every column of a DataFrame.

Maps each column's dtype to a :class:`ValueKind`, streams its cells through
the :class:`Dispatcher`, and returns one :class:`ColumnReport` per profiled
column.  Columns whose dtype has no kind (booleans, dates, nested types, …)
are skipped.
"""

from __future__ import annotations

import logging
from pathlib import Path

import polars as pl

from colprof.config import ProfilerConfig
from colprof.models.value import ValueKind
from colprof.profiles.registry import ColumnReport, Dispatcher, ProfileRegistry, default_registry

__all__ = ["kind_for_dtype", "profile_frame", "profile_series", "read_table"]

logger = logging.getLogger(__name__)


def _is_categorical(dtype: pl.DataType) -> bool:
    return dtype == pl.Categorical or dtype == pl.Enum


def kind_for_dtype(dtype: pl.DataType) -> ValueKind | None:
    """Return the value kind a Polars dtype maps to, or ``None``.

    ``UInt64`` maps to FLOAT64: its upper half does not fit in a signed
    64-bit integer.
    """
    if dtype == pl.UInt64:
        return ValueKind.FLOAT64
    if dtype.is_integer():
        return ValueKind.INT64
    if dtype.is_float():
        return ValueKind.FLOAT64
    if dtype == pl.Utf8 or _is_categorical(dtype):
        return ValueKind.UTF8
    return None


def profile_series(
    series: pl.Series,
    *,
    dispatcher: Dispatcher,
) -> ColumnReport | None:
    """Profile one Series; ``None`` when its dtype is not profiled."""
    kind = kind_for_dtype(series.dtype)
    if kind is None:
        logger.info("Skipping column %r with unprofiled dtype %s", series.name, series.dtype)
        return None
    if series.dtype == pl.UInt64:
        series = series.cast(pl.Float64)
    elif _is_categorical(series.dtype):
        series = series.cast(pl.Utf8)
    return dispatcher.profile_column(series.name, kind, series.to_list())


def profile_frame(
    df: pl.DataFrame,
    *,
    config: ProfilerConfig | None = None,
    registry: ProfileRegistry | None = None,
) -> list[ColumnReport]:
    """Profile every column in a Polars DataFrame."""
    cfg = config or ProfilerConfig()
    dispatcher = Dispatcher(registry or default_registry(cfg))

    if cfg.sample_rows is not None and len(df) > cfg.sample_rows:
        logger.info("Sampling %d of %d rows", cfg.sample_rows, len(df))
        df = df.sample(n=cfg.sample_rows, seed=cfg.sample_seed)

    reports: list[ColumnReport] = []
    for col_name in df.columns:
        report = profile_series(df[col_name], dispatcher=dispatcher)
        if report is not None:
            reports.append(report)
    logger.info("Profiled %d of %d columns", len(reports), len(df.columns))
    return reports


def read_table(path: Path) -> pl.DataFrame:
    """Load a CSV or Parquet file."""
    path = Path(path)
    if path.suffix == ".parquet":
        return pl.read_parquet(path)
    return pl.read_csv(path, infer_schema_length=5000)
