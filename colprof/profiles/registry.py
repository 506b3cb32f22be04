"""
Profile registry and column dispatcher.

The registry maps profile names to factories.  The dispatcher asks it for
every profile whose ``applicable_kinds()`` covers a column's declared kind,
builds fresh instances for that column, drives one ``reset`` / ``update`` /
``results`` session over the column's values, and assembles a
:class:`ColumnReport`.

Usage::

    dispatcher = Dispatcher(default_registry(ProfilerConfig()))
    report = dispatcher.profile_column("age", ValueKind.INT64, [31, None, 47])
    report.results["quantitative"]["mean"]   # 39.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator

from colprof.config import ProfilerConfig
from colprof.models.value import Scalar, Value, ValueKind
from colprof.profiles.base import OutputField, Profile, ProfileResults
from colprof.profiles.quantitative import QuantitativeProfile
from colprof.profiles.uniques import UniquesProfile

__all__ = [
    "ColumnReport",
    "Dispatcher",
    "ProfileFactory",
    "ProfileRegistry",
    "default_registry",
]

logger = logging.getLogger(__name__)

ProfileFactory = Callable[[ProfilerConfig], Profile]


# ---------------------------------------------------------------------------
# ColumnReport
# ---------------------------------------------------------------------------

@dataclass
class ColumnReport:
    """Output record for one profiled column."""

    column: str
    kind: ValueKind
    rows: int = 0
    absent: int = 0
    mismatched: int = 0
    """Present values no applicable profile could accept."""

    results: dict[str, ProfileResults] = field(default_factory=dict)
    """``{profile_name: {field: value}}`` in registration order."""

    def triples(self) -> Iterator[tuple[str, str, Any]]:
        """Yield ``(profile, field, value)`` for every emitted field."""
        for profile_name, fields in self.results.items():
            for field_name, value in fields.items():
                yield profile_name, field_name, value

    def to_dict(self) -> dict[str, Any]:
        return {
            "column": self.column,
            "kind": self.kind.value,
            "rows": self.rows,
            "absent": self.absent,
            "mismatched": self.mismatched,
            "profiles": {name: dict(fields) for name, fields in self.results.items()},
        }


# ---------------------------------------------------------------------------
# ProfileRegistry
# ---------------------------------------------------------------------------

class ProfileRegistry:
    """Ordered collection of named profile factories."""

    def __init__(self, config: ProfilerConfig | None = None) -> None:
        self.config = config or ProfilerConfig()
        self._factories: dict[str, ProfileFactory] = {}

    def register(self, name: str, factory: ProfileFactory) -> None:
        if name in self._factories:
            raise ValueError(f"profile {name!r} is already registered")
        self._factories[name] = factory

    def names(self) -> list[str]:
        return list(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __len__(self) -> int:
        return len(self._factories)

    def create(self, name: str) -> Profile:
        """Build a new, ready-to-use instance of profile *name*."""
        try:
            factory = self._factories[name]
        except KeyError:
            raise KeyError(f"unknown profile {name!r}") from None
        return factory(self.config)

    def create_all(self) -> list[Profile]:
        return [self.create(name) for name in self._factories]

    def applicable(self, kind: ValueKind) -> list[Profile]:
        """Fresh instances of every profile that accepts *kind*."""
        return [p for p in self.create_all() if kind in p.applicable_kinds()]

    def output_schema(self, kind: ValueKind) -> list[tuple[str, list[OutputField]]]:
        """``[(profile_name, fields)]`` a column of *kind* will produce."""
        return [(p.name, p.output_schema()) for p in self.applicable(kind)]


def default_registry(config: ProfilerConfig | None = None) -> ProfileRegistry:
    """Registry holding the built-in quantitative and uniques profiles."""
    registry = ProfileRegistry(config)
    registry.register(QuantitativeProfile.name, QuantitativeProfile)
    registry.register(UniquesProfile.name, UniquesProfile)
    return registry


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------

class Dispatcher:
    """Routes a column's values to the profiles applicable to its kind."""

    def __init__(self, registry: ProfileRegistry | None = None) -> None:
        self.registry = registry or default_registry()

    def profile_column(
        self,
        column: str,
        kind: ValueKind,
        values: Iterable[Value | Scalar],
    ) -> ColumnReport:
        """Run one profiling session over *values*.

        Absent values are counted and skipped.  Present values whose kind no
        applicable profile accepts (including unsupported Python types) are
        counted as mismatched; they never abort the session.
        """
        profiles = self.registry.applicable(kind)
        report = ColumnReport(column=column, kind=kind)
        if not profiles:
            logger.info("No profile accepts %s column %r; skipping", kind.value, column)

        for p in profiles:
            p.reset()

        for raw in values:
            report.rows += 1
            try:
                value = Value.of(raw)
            except TypeError as exc:
                logger.debug("Column %r: %s", column, exc)
                report.mismatched += 1
                continue
            if value.is_absent:
                report.absent += 1
                continue
            accepted = False
            for p in profiles:
                if value.kind in p.applicable_kinds():
                    p.update(value)
                    accepted = True
            if not accepted:
                report.mismatched += 1

        for p in profiles:
            report.results[p.name] = p.results()

        logger.debug(
            "Profiled column %r (%s): %d rows, %d absent, %d mismatched",
            column, kind.value, report.rows, report.absent, report.mismatched,
        )
        return report
