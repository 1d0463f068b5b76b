"""Descriptive statistics for grouped chart data."""

from .errors import InvalidInputError
from .rollup import GroupSummary, quantile, rollup, summarize

__all__ = [
    "GroupSummary",
    "InvalidInputError",
    "quantile",
    "rollup",
    "summarize",
]
