"""Static configuration for the CSV files behind each chart."""

from __future__ import annotations

from pathlib import Path
from typing import Tuple, TypedDict


class CsvFileConfig(TypedDict):
    file_name: str
    columns: Tuple[str, ...]


# Default directories used by the Typer CLI; callers may override these.
DEFAULT_DATA_ROOT = Path("data")
DEFAULT_PLOTS_ROOT = Path("plots")

# Dates look like "3/1/2024 (Friday)".
DATE_FORMAT = "%m/%d/%Y (%A)"

# ---------------------------------------------------------------------------
# File-specific configuration payloads.

SOCIAL_MEDIA: CsvFileConfig = {
    "file_name": "socialMedia.csv",
    "columns": ("Platform", "PostType", "Date", "AgeGroup", "Likes"),
}

SOCIAL_MEDIA_AVG: CsvFileConfig = {
    "file_name": "SocialMediaAvg.csv",
    "columns": ("Platform", "PostType", "AvgLikes"),
}

SOCIAL_MEDIA_TIME: CsvFileConfig = {
    "file_name": "SocialMediaTime.csv",
    "columns": ("Date", "AvgLikes"),
}


__all__ = [
    "DATE_FORMAT",
    "DEFAULT_DATA_ROOT",
    "DEFAULT_PLOTS_ROOT",
    "SOCIAL_MEDIA",
    "SOCIAL_MEDIA_AVG",
    "SOCIAL_MEDIA_TIME",
    "CsvFileConfig",
]
