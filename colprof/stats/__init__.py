"""Exact streaming statistics for numeric columns."""

from colprof.stats.streaming_stats import StatsSnapshot, StreamingStats

__all__ = ["StatsSnapshot", "StreamingStats"]
