"""Draw the three charts with Plotly traces and axes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Protocol, Sequence

import plotly.graph_objects as go

from src.datahub.records import DailyAverage, PostTypeAverage
from src.layout.frame import BARPLOT_FRAME, BOXPLOT_FRAME, LINEPLOT_FRAME, ChartFrame
from src.metrics.errors import InvalidInputError
from src.metrics.rollup import GroupSummary

ONE_DAY_MS = 24 * 60 * 60 * 1000


class Renderer(Protocol):
    """Turns chart data and a figure frame into a drawable figure."""

    def render_boxplot(self, summaries: Mapping[str, GroupSummary], frame: ChartFrame) -> go.Figure:
        ...

    def render_barplot(self, averages: Sequence[PostTypeAverage], frame: ChartFrame) -> go.Figure:
        ...

    def render_lineplot(self, days: Sequence[DailyAverage], frame: ChartFrame) -> go.Figure:
        ...


@dataclass(frozen=True)
class ChartStyle:
    box_fill: str = "#aad8d3"
    outline: str = "black"
    post_type_palette: tuple[str, ...] = ("#1f77b4", "#ff7f0e", "#2ca02c")
    line_color: str = "steelblue"
    line_width: float = 2.0
    # Space above the tallest bar, as a fraction of its height.
    bar_headroom: float = 0.2


class PlotlyRenderer:
    """Renders each chart as Plotly traces on data-valued axes."""

    def __init__(self, style: ChartStyle | None = None) -> None:
        self.style = style or ChartStyle()

    def render_boxplot(
        self,
        summaries: Mapping[str, GroupSummary],
        frame: ChartFrame = BOXPLOT_FRAME,
    ) -> go.Figure:
        if not summaries:
            raise InvalidInputError("No group summaries supplied for the boxplot.")

        keys = list(summaries)
        stats = list(summaries.values())
        fig = go.Figure(
            go.Box(
                x=keys,
                q1=[summary.q1 for summary in stats],
                median=[summary.median for summary in stats],
                q3=[summary.q3 for summary in stats],
                lowerfence=[summary.min for summary in stats],
                upperfence=[summary.max for summary in stats],
                boxpoints=False,
                fillcolor=self.style.box_fill,
                line=dict(color=self.style.outline, width=1),
                name="Likes",
                showlegend=False,
            )
        )
        self._apply_frame(fig, frame, x_title="Age Group", y_title="Number of Likes")
        fig.update_xaxes(type="category", categoryorder="array", categoryarray=keys)
        fig.update_yaxes(rangemode="tozero")
        return fig

    def render_barplot(
        self,
        averages: Sequence[PostTypeAverage],
        frame: ChartFrame = BARPLOT_FRAME,
    ) -> go.Figure:
        if not averages:
            raise InvalidInputError("No platform averages supplied for the bar chart.")

        platforms = list(dict.fromkeys(average.platform for average in averages))
        by_post_type: Dict[str, List[PostTypeAverage]] = {}
        for average in averages:
            by_post_type.setdefault(average.post_type, []).append(average)

        fig = go.Figure()
        palette = self.style.post_type_palette
        for idx, (post_type, rows) in enumerate(by_post_type.items()):
            fig.add_trace(
                go.Bar(
                    name=post_type,
                    x=[row.platform for row in rows],
                    y=[row.avg_likes for row in rows],
                    marker_color=palette[idx % len(palette)],
                    hovertext=[f"{row.platform} - {row.post_type}: {row.avg_likes:.2f} Likes" for row in rows],
                    hoverinfo="text",
                )
            )

        self._apply_frame(fig, frame, x_title="Platform", y_title="Average Likes")
        tallest = max(average.avg_likes for average in averages)
        fig.update_layout(
            barmode="group",
            bargap=0.2,
            bargroupgap=0.1,
            showlegend=True,
            legend=dict(x=1.02, y=1.0, xanchor="left", yanchor="top", title_text="Post Type"),
        )
        fig.update_xaxes(type="category", categoryorder="array", categoryarray=platforms)
        if tallest > 0:
            fig.update_yaxes(range=[0, tallest * (1 + self.style.bar_headroom)])
        else:
            fig.update_yaxes(rangemode="tozero")
        return fig

    def render_lineplot(
        self,
        days: Sequence[DailyAverage],
        frame: ChartFrame = LINEPLOT_FRAME,
    ) -> go.Figure:
        if not days:
            raise InvalidInputError("No daily averages supplied for the line chart.")

        ordered = sorted(days, key=lambda day: day.date)
        fig = go.Figure(
            go.Scatter(
                x=[day.date for day in ordered],
                y=[day.avg_likes for day in ordered],
                mode="lines",
                line=dict(color=self.style.line_color, width=self.style.line_width, shape="spline"),
                hovertext=[f"{day.label}: {day.avg_likes:.2f} Likes" for day in ordered],
                hoverinfo="text",
                name="Average Likes",
                showlegend=False,
            )
        )
        self._apply_frame(fig, frame, x_title="Date", y_title="Average Likes")
        fig.update_xaxes(
            type="date",
            tick0=ordered[0].date,
            dtick=ONE_DAY_MS,
            tickformat="%B %-d",
            tickangle=-25,
        )
        fig.update_yaxes(rangemode="tozero", nticks=6)
        return fig

    def _apply_frame(self, fig: go.Figure, frame: ChartFrame, x_title: str, y_title: str) -> None:
        margin = frame.margin
        fig.update_layout(
            width=frame.width,
            height=frame.height,
            margin=dict(t=margin.top, r=margin.right, b=margin.bottom, l=margin.left),
            plot_bgcolor="white",
            paper_bgcolor="white",
        )
        axis_style = dict(showgrid=False, zeroline=False, showline=True, linecolor=self.style.outline, ticks="outside")
        fig.update_xaxes(title_text=x_title, **axis_style)
        fig.update_yaxes(title_text=y_title, **axis_style)


__all__ = ["ChartStyle", "PlotlyRenderer", "Renderer"]
