"""
colprof CLI — profile a table from the command line.

Commands
--------
- ``profile`` — run every applicable profile over each column of a CSV or
  Parquet file and print the results.
- ``schema`` — list the output fields each profile emits.

Usage::

    colprof profile ./tables/orders.csv
    colprof profile ./tables/orders.parquet --relative-error 0.02 --json
    colprof schema
"""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path

import click
import polars as pl
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from colprof.config import ProfilerConfig
from colprof.frame import profile_frame, read_table
from colprof.profiles.registry import ColumnReport, default_registry

console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _fmt(value: float | int) -> str:
    if isinstance(value, float):
        return "NaN" if math.isnan(value) else f"{value:.6g}"
    return str(value)


def _json_safe(obj):
    """Replace non-finite floats with ``None`` so the output is strict JSON."""
    if isinstance(obj, float) and not math.isfinite(obj):
        return None
    if isinstance(obj, dict):
        return {k: _json_safe(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_json_safe(v) for v in obj]
    return obj


def _render(report: ColumnReport) -> Table:
    table = Table(title=f"{report.column} ({report.kind.value})")
    table.add_column("Profile", style="dim")
    table.add_column("Field")
    table.add_column("Value", justify="right")
    for profile_name, field_name, value in report.triples():
        table.add_row(profile_name, field_name, _fmt(value))
    table.caption = f"{report.rows} rows · {report.absent} absent · {report.mismatched} mismatched"
    return table


# ── Shared options ───────────────────────────────────────────────────

@click.group()
@click.version_option(package_name="colprof")
def main() -> None:
    """colprof — streaming column profiles for tabular data."""


# ── profile ──────────────────────────────────────────────────────────

@main.command("profile")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--relative-error", type=float, default=None, help="Uniques sketch relative error  [default: 0.1]")
@click.option("--sample-rows", type=int, default=None, help="Profile at most this many rows.")
@click.option("--json", "as_json", is_flag=True, help="Emit JSON instead of tables.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging.")
def profile(
    path: Path,
    relative_error: float | None,
    sample_rows: int | None,
    as_json: bool,
    verbose: bool,
) -> None:
    """Profile every column of a CSV or Parquet file."""
    _configure_logging(verbose)
    try:
        cfg = ProfilerConfig.from_env(relative_error=relative_error, sample_rows=sample_rows)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc

    try:
        df = read_table(path)
    except (pl.exceptions.PolarsError, OSError) as exc:
        raise click.ClickException(f"cannot read {path}: {exc}") from exc

    reports = profile_frame(df, config=cfg)

    if as_json:
        payload = _json_safe([r.to_dict() for r in reports])
        click.echo(json.dumps(payload, indent=2, allow_nan=False))
        return

    for report in reports:
        console.print(_render(report))
    console.print(f"[bold green]✓[/] {len(reports)} column(s) profiled")


# ── schema ───────────────────────────────────────────────────────────

@main.command("schema")
def schema() -> None:
    """Show the output fields of every profile."""
    registry = default_registry()
    table = Table(title="Profile output schema")
    table.add_column("Profile")
    table.add_column("Accepts")
    table.add_column("Field")
    table.add_column("Type")
    for p in registry.create_all():
        kinds = ", ".join(sorted(k.value for k in p.applicable_kinds()))
        for i, out in enumerate(p.output_schema()):
            table.add_row(
                p.name if i == 0 else "",
                kinds if i == 0 else "",
                out.name,
                out.kind.value,
            )
    console.print(table)


if __name__ == "__main__":
    main()
