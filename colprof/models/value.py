"""
Value — the tagged scalar handed to every profile.

A column value is one of four kinds: a signed 64-bit integer, a 64-bit
float, a UTF-8 string, or absent (SQL ``NULL`` / Python ``None``).  Profiles
declare which kinds they accept; the dispatcher never offers them any other.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Union

__all__ = ["ABSENT", "ValueKind", "Value", "Scalar", "coerce_float"]

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

Scalar = Union[int, float, str, None]


class ValueKind(Enum):
    """The closed set of value kinds a column can hold."""

    INT64 = "int64"
    FLOAT64 = "float64"
    UTF8 = "utf8"
    ABSENT = "absent"

    @property
    def is_numeric(self) -> bool:
        return self in (ValueKind.INT64, ValueKind.FLOAT64)


@dataclass(frozen=True, slots=True)
class Value:
    """One observed cell: a kind tag plus its payload."""

    kind: ValueKind
    payload: Scalar = None

    @classmethod
    def of(cls, raw: "Value | Scalar") -> "Value":
        """Wrap a Python scalar, inferring its kind.

        ``bool`` is rejected even though it subclasses ``int``: a boolean
        column is not a quantity.
        """
        if isinstance(raw, Value):
            return raw
        if raw is None:
            return ABSENT
        if isinstance(raw, bool):
            raise TypeError("bool values are not a supported column kind")
        if isinstance(raw, int):
            if not _INT64_MIN <= raw <= _INT64_MAX:
                raise TypeError(f"integer {raw} does not fit in 64 bits")
            return cls(ValueKind.INT64, raw)
        if isinstance(raw, float):
            return cls(ValueKind.FLOAT64, raw)
        if isinstance(raw, str):
            return cls(ValueKind.UTF8, raw)
        raise TypeError(f"unsupported value type: {type(raw).__name__}")

    @property
    def is_absent(self) -> bool:
        return self.kind is ValueKind.ABSENT


ABSENT = Value(ValueKind.ABSENT)


def coerce_float(value: Value, *, skip_non_finite: bool = True) -> float | None:
    """Normalise a numeric value to a 64-bit float.

    Returns ``None`` for anything the quantitative path should not record:
    absent values, non-numeric kinds, and (when *skip_non_finite*) NaN or
    infinite floats.
    """
    if not value.kind.is_numeric:
        return None
    result = float(value.payload)
    if skip_non_finite and not math.isfinite(result):
        return None
    return result
