"""Aggregation of per-frame candidates into a stabilized card record."""

from .accumulator import SampleAccumulator, most_frequent, observe, stabilize

__all__ = [
    "SampleAccumulator",
    "observe",
    "stabilize",
    "most_frequent",
]
