"""
colprof — streaming column profiles.

Feeds the values of one table column through pluggable profiles and emits a
fixed-shape summary per profile: exact descriptive statistics for numeric
columns, HyperLogLog distinct counts for string columns.

Quick start::

    from colprof import Dispatcher, ValueKind
    report = Dispatcher().profile_column("price", ValueKind.FLOAT64, [9.5, 12.0, None])
    report.results["quantitative"]["median"]
"""

from colprof.config import ProfilerConfig
from colprof.models.value import Value, ValueKind
from colprof.profiles.registry import ColumnReport, Dispatcher, ProfileRegistry, default_registry

__all__ = [
    "ColumnReport",
    "Dispatcher",
    "ProfileRegistry",
    "ProfilerConfig",
    "Value",
    "ValueKind",
    "default_registry",
]
__version__ = "0.1.0"
