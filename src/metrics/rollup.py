"""Group records by a categorical key and reduce each group to box statistics."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from numbers import Real
from typing import Callable, Dict, Hashable, Iterable, List, Sequence, TypeVar

import numpy as np

from .errors import InvalidInputError

RecordT = TypeVar("RecordT")
KeyT = TypeVar("KeyT", bound=Hashable)

BOX_QUANTILES = (0.25, 0.5, 0.75)


@dataclass(frozen=True)
class GroupSummary:
    """Five-number summary plus inter-quartile range for one group."""

    min: float
    q1: float
    median: float
    q3: float
    max: float
    iqr: float
    count: int = 1

    def as_dict(self) -> Dict[str, float]:
        return {
            "min": self.min,
            "q1": self.q1,
            "median": self.median,
            "q3": self.q3,
            "max": self.max,
            "iqr": self.iqr,
        }


def quantile(sorted_values: Sequence[float], p: float) -> float:
    """Linearly interpolated quantile (R-7) of already sorted values.

    Args:
        sorted_values: Values in ascending order.
        p: Probability in ``[0, 1]``.

    Returns:
        The value at rank ``p * (n - 1)``, interpolated between neighbours.
    """
    if not 0.0 <= p <= 1.0:
        raise ValueError("Quantile probability must fall within [0, 1].")
    if len(sorted_values) == 0:
        raise InvalidInputError("Cannot compute a quantile of an empty sequence.")
    return float(np.quantile(np.asarray(sorted_values, dtype=float), p, method="linear"))


def summarize(values: Iterable[float]) -> GroupSummary:
    """Compute the box statistics of a single non-empty bucket."""
    ordered = np.sort(_finite_array(list(values)))
    if ordered.size == 0:
        raise InvalidInputError("Cannot summarise an empty group.")

    q1, median, q3 = (float(value) for value in np.quantile(ordered, BOX_QUANTILES, method="linear"))
    return GroupSummary(
        min=float(ordered[0]),
        q1=q1,
        median=median,
        q3=q3,
        max=float(ordered[-1]),
        iqr=q3 - q1,
        count=int(ordered.size),
    )


def rollup(
    records: Iterable[RecordT],
    key_fn: Callable[[RecordT], KeyT],
    value_fn: Callable[[RecordT], float],
) -> Dict[KeyT, GroupSummary]:
    """Partition `records` by `key_fn` and summarise `value_fn` per partition.

    Keys appear in the order they are first seen. Either every group is
    summarised or InvalidInputError is raised; no partial mapping is returned.
    """
    buckets: Dict[KeyT, List[float]] = defaultdict(list)
    for record in records:
        buckets[key_fn(record)].append(value_fn(record))

    if not buckets:
        raise InvalidInputError("No records supplied for rollup.")

    summaries: Dict[KeyT, GroupSummary] = {}
    for key, values in buckets.items():
        try:
            summaries[key] = summarize(values)
        except InvalidInputError as exc:
            raise InvalidInputError(f"Group {key!r}: {exc}") from exc
    return summaries


def _finite_array(values: Sequence[object]) -> np.ndarray:
    for idx, value in enumerate(values):
        if isinstance(value, bool) or not isinstance(value, Real):
            raise InvalidInputError(f"Measurement at position {idx} is not a number: {value!r}")
    array = np.asarray(values, dtype=float)
    if not np.all(np.isfinite(array)):
        raise InvalidInputError("Measurements contain non-finite entries.")
    return array


__all__ = ["BOX_QUANTILES", "GroupSummary", "quantile", "rollup", "summarize"]
