"""Tests for colprof.frame."""

import polars as pl
import pytest

from colprof.config import ProfilerConfig
from colprof.frame import kind_for_dtype, profile_frame, read_table
from colprof.models.value import ValueKind


@pytest.fixture
def people() -> pl.DataFrame:
    return pl.DataFrame({
        "id": [1, 2, 3, 4, 5],
        "name": ["Alice", "Bob", None, "Alice", "Diana"],
        "score": [1.0, 2.0, 3.0, None, 4.0],
        "active": [True, False, True, True, False],
    })


class TestKindForDtype:
    @pytest.mark.parametrize(
        "dtype, kind",
        [
            (pl.Int8, ValueKind.INT64),
            (pl.Int64, ValueKind.INT64),
            (pl.UInt32, ValueKind.INT64),
            (pl.UInt64, ValueKind.FLOAT64),
            (pl.Float32, ValueKind.FLOAT64),
            (pl.Float64, ValueKind.FLOAT64),
            (pl.Utf8, ValueKind.UTF8),
        ],
    )
    def test_mapped(self, dtype, kind):
        assert kind_for_dtype(pl.Series("c", [], dtype=dtype).dtype) is kind

    @pytest.mark.parametrize("dtype", [pl.Boolean, pl.Date])
    def test_unprofiled(self, dtype):
        assert kind_for_dtype(pl.Series("c", [], dtype=dtype).dtype) is None


class TestProfileFrame:
    def test_profiles_supported_columns(self, people):
        reports = profile_frame(people)
        assert [r.column for r in reports] == ["id", "name", "score"]

    def test_numeric_results(self, people):
        by_name = {r.column: r for r in profile_frame(people)}
        score = by_name["score"]
        assert score.kind is ValueKind.FLOAT64
        assert score.absent == 1
        assert score.results["quantitative"]["total"] == 10.0
        assert by_name["id"].results["quantitative"]["median"] == 3.0

    def test_text_results(self, people):
        name = {r.column: r for r in profile_frame(people)}["name"]
        assert name.absent == 1
        assert 2 <= name.results["uniques"]["value"] <= 4

    def test_categorical(self):
        df = pl.DataFrame({"colour": ["red", "blue", "red"]}).with_columns(
            pl.col("colour").cast(pl.Categorical)
        )
        (report,) = profile_frame(df)
        assert report.kind is ValueKind.UTF8
        assert report.mismatched == 0
        assert report.results["uniques"]["value"] in (1, 2, 3)

    def test_enum(self):
        s = pl.Series("colour", ["red", "blue", "red"], dtype=pl.Enum(["red", "blue"]))
        assert kind_for_dtype(s.dtype) is ValueKind.UTF8
        (report,) = profile_frame(s.to_frame())
        assert report.kind is ValueKind.UTF8
        assert report.mismatched == 0
        assert report.results["uniques"]["value"] in (1, 2, 3)

    def test_uint64_above_int64_range(self):
        big = 2**63 + 5
        df = pl.DataFrame({"n": pl.Series([1, big], dtype=pl.UInt64)})
        (report,) = profile_frame(df)
        assert report.kind is ValueKind.FLOAT64
        assert report.mismatched == 0
        quant = report.results["quantitative"]
        assert quant["maximum"] == pytest.approx(float(big))
        assert quant["minimum"] == 1.0

    def test_sampling(self):
        df = pl.DataFrame({"n": list(range(100))})
        (report,) = profile_frame(df, config=ProfilerConfig(sample_rows=10))
        assert report.rows == 10

    def test_no_sampling_when_small(self, people):
        reports = profile_frame(people, config=ProfilerConfig(sample_rows=50))
        assert all(r.rows == 5 for r in reports)


class TestReadTable:
    def test_csv(self, tmp_path, people):
        path = tmp_path / "people.csv"
        people.drop("active").write_csv(path)
        df = read_table(path)
        assert df.columns == ["id", "name", "score"]
        assert df.height == 5

    def test_parquet(self, tmp_path, people):
        path = tmp_path / "people.parquet"
        people.write_parquet(path)
        assert read_table(path).equals(people)
