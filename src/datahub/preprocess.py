"""Derive the averaged CSV files used by the bar and line charts."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Sequence

import pandas as pd

from .config import DEFAULT_DATA_ROOT, SOCIAL_MEDIA_AVG, SOCIAL_MEDIA_TIME
from .helpers import parse_date, record_to_row
from .loader import load_like_records
from .records import LikeRecord


def average_by_post_type(records: Sequence[LikeRecord]) -> pd.DataFrame:
    """Mean likes per (Platform, PostType), keeping first-seen order."""
    frame = _records_frame(records)
    grouped = frame.groupby(["Platform", "PostType"], sort=False)["Likes"].mean().reset_index()
    return grouped.rename(columns={"Likes": "AvgLikes"})


def average_by_date(records: Sequence[LikeRecord]) -> pd.DataFrame:
    """Mean likes per Date, ordered chronologically."""
    frame = _records_frame(records)
    grouped = frame.groupby("Date", sort=False)["Likes"].mean().reset_index()
    grouped["_parsed"] = [parse_date(text) for text in grouped["Date"]]
    grouped = grouped.sort_values("_parsed", kind="stable").drop(columns="_parsed")
    return grouped.rename(columns={"Likes": "AvgLikes"}).reset_index(drop=True)


def prepare_derived(root: Path = DEFAULT_DATA_ROOT, force: bool = False) -> Dict[str, Path]:
    """Write SocialMediaAvg.csv and SocialMediaTime.csv next to socialMedia.csv.

    Existing files are left untouched unless `force` is set. Returns the paths
    that were written, keyed by file name.
    """
    records = load_like_records(root)
    print(f"[datahub] Loaded {len(records)} posts from {root}")

    builders = (
        (SOCIAL_MEDIA_AVG["file_name"], average_by_post_type),
        (SOCIAL_MEDIA_TIME["file_name"], average_by_date),
    )
    written: Dict[str, Path] = {}
    for file_name, builder in builders:
        target = root / file_name
        if target.exists() and not force:
            print(f"[datahub] {file_name} present; skipping (use --force to rebuild).")
            continue
        frame = builder(records)
        frame.to_csv(target, index=False)
        written[file_name] = target
        print(f"[datahub] Saved {file_name} ({len(frame)} rows) → {target}")
    return written


def _records_frame(records: Sequence[LikeRecord]) -> pd.DataFrame:
    rows = [record_to_row(record) for record in records]
    frame = pd.DataFrame(rows, columns=["platform", "post_type", "date", "age_group", "likes"])
    return frame.rename(
        columns={
            "platform": "Platform",
            "post_type": "PostType",
            "date": "Date",
            "age_group": "AgeGroup",
            "likes": "Likes",
        }
    )


__all__ = ["average_by_date", "average_by_post_type", "prepare_derived"]
