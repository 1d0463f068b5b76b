from __future__ import annotations

import math
from dataclasses import asdict
from datetime import datetime
from typing import Any, Dict, Iterable

import pandas as pd

from .config import DATE_FORMAT
from .errors import DataError


def record_to_row(record: Any) -> Dict[str, Any]:
    """Convert a dataclass record to a plain dict keyed by field name."""
    return asdict(record)


def ensure_columns(frame: pd.DataFrame, expected: Iterable[str], source: str) -> None:
    """Reject CSV frames that lack any of the expected columns."""
    missing = [column for column in expected if column not in frame.columns]
    if missing:
        raise DataError(f"{source} is missing column(s): {', '.join(missing)}")


def to_float(value: Any, field: str, row: int) -> float:
    """Coerce a CSV cell to a finite float."""
    if value is None or isinstance(value, bool):
        raise DataError(f"Row {row}: {field} is missing")
    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise DataError(f"Row {row}: {field} is missing")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise DataError(f"Row {row}: cannot convert {field}={value!r} to a number") from exc
    if not math.isfinite(number):
        raise DataError(f"Row {row}: {field}={value!r} is not a finite number")
    return number


def to_label(value: Any, field: str, row: int) -> str:
    """Return a non-empty category label."""
    if value is None or (isinstance(value, float) and math.isnan(value)):
        raise DataError(f"Row {row}: {field} is missing")
    text = str(value).strip()
    if not text:
        raise DataError(f"Row {row}: {field} is missing")
    return text


def parse_date(text: str, fmt: str = DATE_FORMAT) -> datetime:
    try:
        return datetime.strptime(text.strip(), fmt)
    except ValueError as exc:
        raise DataError(f"Cannot parse date {text!r} with format {fmt!r}") from exc


def format_day(date: datetime) -> str:
    """Render a date as a tick label such as "March 1"."""
    return f"{date:%B} {date.day}"
