"""Tests for the CSV loaders, helpers, and derived-file preparation."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
import sys

import pandas as pd
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.datahub.errors import DataError
from src.datahub.helpers import format_day, parse_date, record_to_row, to_float, to_label
from src.datahub.loader import load_daily_averages, load_like_records, load_post_type_averages
from src.datahub.preprocess import average_by_date, average_by_post_type, prepare_derived
from src.datahub.records import LikeRecord


# ---------------------------------------------------------------------------
# Helper fixtures and utilities

RAW_CSV = """Platform,PostType,Date,AgeGroup,Likes
Instagram,Image,3/2/2024 (Saturday),18-24,100
Instagram,Video,3/1/2024 (Friday),25-34,200
Facebook,Image,3/1/2024 (Friday),18-24,50
Instagram,Image,3/2/2024 (Saturday),25-34,300
Facebook,Link,3/2/2024 (Saturday),35-44,10
"""


def _write_raw(tmp_path: Path, payload: str = RAW_CSV) -> Path:
    (tmp_path / "socialMedia.csv").write_text(payload, encoding="utf-8")
    return tmp_path


# ---------------------------------------------------------------------------
# Helper utility tests


def test_to_float_accepts_numeric_text() -> None:
    assert to_float("42", "Likes", 1) == 42.0
    assert to_float(" 3.5 ", "Likes", 1) == 3.5
    assert to_float(7, "Likes", 1) == 7.0


@pytest.mark.parametrize("value", ["", "abc", "nan", "inf", None, True])
def test_to_float_rejects_bad_values(value: object) -> None:
    with pytest.raises(DataError):
        to_float(value, "Likes", 3)


def test_to_label_rejects_blank() -> None:
    assert to_label(" Instagram ", "Platform", 1) == "Instagram"
    with pytest.raises(DataError):
        to_label("  ", "Platform", 1)


def test_parse_and_format_day() -> None:
    date = parse_date("3/7/2024 (Thursday)")
    assert date == datetime(2024, 3, 7)
    assert format_day(date) == "March 7"
    with pytest.raises(DataError):
        parse_date("2024-03-07")


def test_record_to_row() -> None:
    record = LikeRecord(platform="X", post_type="Link", date="d", age_group="18-24", likes=1.0)
    assert record_to_row(record) == {
        "platform": "X",
        "post_type": "Link",
        "date": "d",
        "age_group": "18-24",
        "likes": 1.0,
    }


# ---------------------------------------------------------------------------
# Loader tests


def test_load_like_records(tmp_path: Path) -> None:
    records = load_like_records(_write_raw(tmp_path))
    assert len(records) == 5
    assert records[0] == LikeRecord(
        platform="Instagram",
        post_type="Image",
        date="3/2/2024 (Saturday)",
        age_group="18-24",
        likes=100.0,
    )


def test_load_like_records_missing_file(tmp_path: Path) -> None:
    with pytest.raises(DataError, match="Missing data file"):
        load_like_records(tmp_path)


def test_load_like_records_missing_column(tmp_path: Path) -> None:
    _write_raw(tmp_path, "Platform,PostType,Date,Likes\nX,Image,3/1/2024 (Friday),3\n")
    with pytest.raises(DataError, match="AgeGroup"):
        load_like_records(tmp_path)


def test_load_like_records_non_numeric_likes(tmp_path: Path) -> None:
    _write_raw(tmp_path, RAW_CSV + "Twitter,Image,3/1/2024 (Friday),18-24,lots\n")
    with pytest.raises(DataError, match="Row 6"):
        load_like_records(tmp_path)


def test_load_post_type_averages(tmp_path: Path) -> None:
    (tmp_path / "SocialMediaAvg.csv").write_text(
        "Platform,PostType,AvgLikes\nInstagram,Image,120.5\nInstagram,Video,80\n", encoding="utf-8"
    )
    averages = load_post_type_averages(tmp_path)
    assert [(a.platform, a.post_type, a.avg_likes) for a in averages] == [
        ("Instagram", "Image", 120.5),
        ("Instagram", "Video", 80.0),
    ]


def test_load_daily_averages_sorted(tmp_path: Path) -> None:
    (tmp_path / "SocialMediaTime.csv").write_text(
        "Date,AvgLikes\n3/3/2024 (Sunday),10\n3/1/2024 (Friday),30\n", encoding="utf-8"
    )
    days = load_daily_averages(tmp_path)
    assert [day.label for day in days] == ["March 1", "March 3"]
    assert days[0].avg_likes == 30.0


# ---------------------------------------------------------------------------
# Preprocess tests


def test_average_by_post_type_keeps_first_seen_order(tmp_path: Path) -> None:
    frame = average_by_post_type(load_like_records(_write_raw(tmp_path)))
    assert list(frame.columns) == ["Platform", "PostType", "AvgLikes"]
    assert frame.values.tolist() == [
        ["Instagram", "Image", 200.0],
        ["Instagram", "Video", 200.0],
        ["Facebook", "Image", 50.0],
        ["Facebook", "Link", 10.0],
    ]


def test_average_by_date_is_chronological(tmp_path: Path) -> None:
    frame = average_by_date(load_like_records(_write_raw(tmp_path)))
    assert frame["Date"].tolist() == ["3/1/2024 (Friday)", "3/2/2024 (Saturday)"]
    assert frame["AvgLikes"].tolist() == pytest.approx([125.0, 410.0 / 3])


def test_prepare_derived_writes_and_skips(tmp_path: Path) -> None:
    root = _write_raw(tmp_path)

    written = prepare_derived(root)
    assert set(written) == {"SocialMediaAvg.csv", "SocialMediaTime.csv"}
    saved = pd.read_csv(root / "SocialMediaAvg.csv")
    assert len(saved) == 4

    assert prepare_derived(root) == {}
    assert set(prepare_derived(root, force=True)) == {"SocialMediaAvg.csv", "SocialMediaTime.csv"}


def test_prepared_files_load_back(tmp_path: Path) -> None:
    root = _write_raw(tmp_path)
    prepare_derived(root)

    averages = load_post_type_averages(root)
    days = load_daily_averages(root)
    assert averages[0].avg_likes == pytest.approx(200.0)
    assert [day.date.day for day in days] == [1, 2]
