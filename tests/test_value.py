"""Tests for colprof.models.value."""

import math

import pytest

from colprof.models.value import ABSENT, Value, ValueKind, coerce_float


class TestValueOf:
    @pytest.mark.parametrize(
        "raw, kind",
        [
            (None, ValueKind.ABSENT),
            (3, ValueKind.INT64),
            (-(2**63), ValueKind.INT64),
            (2.5, ValueKind.FLOAT64),
            ("abc", ValueKind.UTF8),
            ("", ValueKind.UTF8),
        ],
    )
    def test_kind_inference(self, raw, kind):
        assert Value.of(raw).kind is kind

    def test_none_is_absent_singleton(self):
        assert Value.of(None) is ABSENT
        assert ABSENT.is_absent

    def test_passes_values_through(self):
        v = Value(ValueKind.UTF8, "x")
        assert Value.of(v) is v

    @pytest.mark.parametrize("raw", [True, 2**63, [1], b"bytes", object()])
    def test_rejects_unsupported(self, raw):
        with pytest.raises(TypeError):
            Value.of(raw)

    def test_numeric_flag(self):
        assert ValueKind.INT64.is_numeric
        assert ValueKind.FLOAT64.is_numeric
        assert not ValueKind.UTF8.is_numeric
        assert not ValueKind.ABSENT.is_numeric


class TestCoerceFloat:
    def test_int_to_float(self):
        result = coerce_float(Value.of(7))
        assert result == 7.0
        assert isinstance(result, float)

    def test_float_passthrough(self):
        assert coerce_float(Value.of(1.25)) == 1.25

    def test_absent_and_strings_rejected(self):
        assert coerce_float(ABSENT) is None
        assert coerce_float(Value.of("12")) is None

    @pytest.mark.parametrize("x", [math.nan, math.inf, -math.inf])
    def test_non_finite(self, x):
        assert coerce_float(Value.of(x)) is None
        kept = coerce_float(Value.of(x), skip_non_finite=False)
        assert kept is not None
        assert not math.isfinite(kept)
