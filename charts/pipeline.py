"""Load, reduce and render the data behind each chart."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Sequence

import plotly.graph_objects as go

from src.datahub import LikeRecord, load_daily_averages, load_like_records, load_post_type_averages
from src.datahub.config import DEFAULT_DATA_ROOT
from src.layout.frame import BARPLOT_FRAME, BOXPLOT_FRAME, LINEPLOT_FRAME
from src.metrics import GroupSummary, rollup

from charts.plots.renderer import PlotlyRenderer, Renderer


def summarize_age_groups(records: Sequence[LikeRecord]) -> Dict[str, GroupSummary]:
    """Box statistics of likes per age group."""
    return rollup(records, key_fn=lambda record: record.age_group, value_fn=lambda record: record.likes)


def load_age_group_summaries(root: Path = DEFAULT_DATA_ROOT) -> Dict[str, GroupSummary]:
    summaries = summarize_age_groups(load_like_records(root))
    for age_group, summary in summaries.items():
        print(
            f"[stats] {age_group}: n={summary.count} median={summary.median:g} "
            f"q1={summary.q1:g} q3={summary.q3:g}"
        )
    return summaries


def run_boxplot(root: Path = DEFAULT_DATA_ROOT, renderer: Optional[Renderer] = None) -> go.Figure:
    """Boxplot of likes per age group from socialMedia.csv."""
    summaries = load_age_group_summaries(root)
    return (renderer or PlotlyRenderer()).render_boxplot(summaries, BOXPLOT_FRAME)


def run_barplot(root: Path = DEFAULT_DATA_ROOT, renderer: Optional[Renderer] = None) -> go.Figure:
    """Grouped bar chart of average likes from SocialMediaAvg.csv."""
    averages = load_post_type_averages(root)
    print(f"[stats] {len(averages)} platform/post type averages")
    return (renderer or PlotlyRenderer()).render_barplot(averages, BARPLOT_FRAME)


def run_lineplot(root: Path = DEFAULT_DATA_ROOT, renderer: Optional[Renderer] = None) -> go.Figure:
    """Line chart of average likes per day from SocialMediaTime.csv."""
    days = load_daily_averages(root)
    if days:
        print(f"[stats] {len(days)} days from {days[0].label} to {days[-1].label}")
    return (renderer or PlotlyRenderer()).render_lineplot(days, LINEPLOT_FRAME)


__all__ = [
    "load_age_group_summaries",
    "run_barplot",
    "run_boxplot",
    "run_lineplot",
    "summarize_age_groups",
]
