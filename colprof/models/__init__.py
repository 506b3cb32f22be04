"""Core value types shared by every profile."""

from colprof.models.value import ABSENT, Scalar, Value, ValueKind, coerce_float

__all__ = [
    "ABSENT",
    "Scalar",
    "Value",
    "ValueKind",
    "coerce_float",
]
