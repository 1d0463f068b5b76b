from __future__ import annotations

from pathlib import Path
from typing import List

import pandas as pd

from .config import DEFAULT_DATA_ROOT, SOCIAL_MEDIA, SOCIAL_MEDIA_AVG, SOCIAL_MEDIA_TIME, CsvFileConfig
from .errors import DataError
from .helpers import ensure_columns, format_day, parse_date, to_float, to_label
from .records import DailyAverage, LikeRecord, PostTypeAverage


def read_csv(root: Path, config: CsvFileConfig) -> pd.DataFrame:
    """Read one of the configured CSV files as text and check its header."""
    path = root / config["file_name"]
    if not path.exists():
        raise DataError(f"Missing data file at {path}")
    try:
        frame = pd.read_csv(path, dtype=str, keep_default_na=False, skipinitialspace=True)
    except pd.errors.EmptyDataError as exc:
        raise DataError(f"{path} is empty") from exc
    frame.columns = [str(column).strip() for column in frame.columns]
    ensure_columns(frame, config["columns"], str(path))
    return frame


def load_like_records(root: Path = DEFAULT_DATA_ROOT) -> List[LikeRecord]:
    """Load every post from socialMedia.csv with its like count as a float."""
    frame = read_csv(root, SOCIAL_MEDIA)
    records: List[LikeRecord] = []
    for row, data in enumerate(frame.to_dict("records"), start=1):
        records.append(
            LikeRecord(
                platform=to_label(data["Platform"], "Platform", row),
                post_type=to_label(data["PostType"], "PostType", row),
                date=str(data["Date"]).strip(),
                age_group=to_label(data["AgeGroup"], "AgeGroup", row),
                likes=to_float(data["Likes"], "Likes", row),
            )
        )
    return records


def load_post_type_averages(root: Path = DEFAULT_DATA_ROOT) -> List[PostTypeAverage]:
    """Load SocialMediaAvg.csv in file order."""
    frame = read_csv(root, SOCIAL_MEDIA_AVG)
    return [
        PostTypeAverage(
            platform=to_label(data["Platform"], "Platform", row),
            post_type=to_label(data["PostType"], "PostType", row),
            avg_likes=to_float(data["AvgLikes"], "AvgLikes", row),
        )
        for row, data in enumerate(frame.to_dict("records"), start=1)
    ]


def load_daily_averages(root: Path = DEFAULT_DATA_ROOT) -> List[DailyAverage]:
    """Load SocialMediaTime.csv sorted by date."""
    frame = read_csv(root, SOCIAL_MEDIA_TIME)
    days: List[DailyAverage] = []
    for row, data in enumerate(frame.to_dict("records"), start=1):
        date = parse_date(to_label(data["Date"], "Date", row))
        days.append(
            DailyAverage(
                date=date,
                label=format_day(date),
                avg_likes=to_float(data["AvgLikes"], "AvgLikes", row),
            )
        )
    return sorted(days, key=lambda day: day.date)
