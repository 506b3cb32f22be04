"""
Profiles — pluggable per-column summaries.

Modules
-------
base
    The :class:`Profile` protocol and output-schema types.
quantitative
    Descriptive statistics for numeric columns.
uniques
    HyperLogLog distinct counts for string columns.
registry
    Name → factory registry and the column dispatcher.
"""

from colprof.profiles.base import FieldKind, OutputField, Profile, ProfileResults
from colprof.profiles.quantitative import QuantitativeProfile
from colprof.profiles.registry import ColumnReport, Dispatcher, ProfileRegistry, default_registry
from colprof.profiles.uniques import UniquesProfile

__all__ = [
    "ColumnReport",
    "Dispatcher",
    "FieldKind",
    "OutputField",
    "Profile",
    "ProfileRegistry",
    "ProfileResults",
    "QuantitativeProfile",
    "UniquesProfile",
    "default_registry",
]
