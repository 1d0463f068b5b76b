"""Smoke tests for the Typer command line."""

from __future__ import annotations

from pathlib import Path
import sys

import pandas as pd
from typer.testing import CliRunner

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from main import app

runner = CliRunner()

RAW_CSV = """Platform,PostType,Date,AgeGroup,Likes
Instagram,Image,3/1/2024 (Friday),18-24,10
Instagram,Video,3/1/2024 (Friday),18-24,20
Facebook,Image,3/2/2024 (Saturday),25-34,30
Facebook,Video,3/2/2024 (Saturday),25-34,40
"""


def _write_raw(root: Path, payload: str = RAW_CSV) -> Path:
    (root / "socialMedia.csv").write_text(payload, encoding="utf-8")
    return root


def test_prepare_command_writes_derived_files(tmp_path: Path) -> None:
    root = _write_raw(tmp_path)
    result = runner.invoke(app, ["prepare", "--data-root", str(root)])

    assert result.exit_code == 0, result.output
    assert (root / "SocialMediaAvg.csv").exists()
    assert (root / "SocialMediaTime.csv").exists()
    assert "[datahub]" in result.output


def test_summary_command_prints_and_exports(tmp_path: Path) -> None:
    root = _write_raw(tmp_path)
    output = tmp_path / "out" / "summary.csv"
    result = runner.invoke(app, ["summary", "--data-root", str(root), "--output", str(output)])

    assert result.exit_code == 0, result.output
    assert "18-24" in result.output
    table = pd.read_csv(output, index_col="AgeGroup")
    assert table.loc["18-24", "median"] == 15.0
    assert table.loc["25-34", "iqr"] == 5.0
    assert table.loc["25-34", "count"] == 2


def test_render_command_saves_html(tmp_path: Path) -> None:
    root = _write_raw(tmp_path)
    plots = tmp_path / "plots"
    result = runner.invoke(
        app,
        [
            "render",
            "--data-root",
            str(root),
            "--plots-root",
            str(plots),
            "--plots-tag",
            "test",
            "--no-save-static",
            "--prepare",
        ],
    )

    assert result.exit_code == 0, result.output
    for slug in ("boxplot", "barplot", "lineplot"):
        assert (plots / "test" / f"{slug}.html").exists()


def test_bad_measurement_is_reported_as_parameter_error(tmp_path: Path) -> None:
    root = _write_raw(tmp_path, RAW_CSV + "Twitter,Link,3/3/2024 (Sunday),35-44,n/a\n")
    result = runner.invoke(app, ["summary", "--data-root", str(root)])

    assert result.exit_code == 2
    assert "Row 5" in result.output


def test_missing_data_file_is_reported(tmp_path: Path) -> None:
    result = runner.invoke(app, ["boxplot", "--data-root", str(tmp_path)])
    assert result.exit_code == 2
