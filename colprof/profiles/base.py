"""
The profile contract.

A profile binds a set of accepted value kinds, a fixed output schema and one
piece of streaming state behind a uniform ``reset`` / ``update`` /
``results`` cycle::

    Created ─▶ Ready ─▶ Accumulating ─▶ Resultable ─▶ (reset) Ready

Profiles are independent classes that satisfy :class:`Profile`
structurally; there is no shared base class.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Protocol, Union, runtime_checkable

from colprof.models.value import Scalar, Value, ValueKind

__all__ = ["FieldKind", "OutputField", "Profile", "ProfileResults"]


class FieldKind(Enum):
    """Type of one output field."""

    DOUBLE = "double"
    LONG = "long"


class OutputField(NamedTuple):
    name: str
    kind: FieldKind


ProfileResults = dict[str, Union[float, int]]


@runtime_checkable
class Profile(Protocol):
    """Structural interface every profile implements."""

    name: str
    """Stable identifier; names the output sub-record."""

    def applicable_kinds(self) -> frozenset[ValueKind]:
        """Value kinds this profile accepts."""
        ...

    def output_schema(self) -> list[OutputField]:
        """Ordered output fields; identical for every session."""
        ...

    def reset(self) -> None:
        """Return to the empty state.  Idempotent."""
        ...

    def update(self, value: Value | Scalar) -> None:
        """Observe one value.  Absent and non-applicable values are ignored."""
        ...

    def results(self) -> ProfileResults:
        """Every field of :meth:`output_schema`, in order.  Read-only."""
        ...
