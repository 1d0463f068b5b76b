"""Outer size and margins of a single chart figure."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Margin:
    top: int
    right: int
    bottom: int
    left: int


@dataclass(frozen=True)
class ChartFrame:
    """Outer figure size and the margins reserved for axes and labels."""

    width: int
    height: int
    margin: Margin

    def __post_init__(self) -> None:
        if self.inner_width <= 0 or self.inner_height <= 0:
            raise ValueError("Chart margins leave no room for the plotting area.")

    @property
    def inner_width(self) -> int:
        return self.width - self.margin.left - self.margin.right

    @property
    def inner_height(self) -> int:
        return self.height - self.margin.top - self.margin.bottom


BOXPLOT_FRAME = ChartFrame(width=600, height=400, margin=Margin(top=20, right=30, bottom=40, left=60))
BARPLOT_FRAME = ChartFrame(width=700, height=420, margin=Margin(top=20, right=150, bottom=50, left=60))
LINEPLOT_FRAME = ChartFrame(width=800, height=420, margin=Margin(top=40, right=30, bottom=70, left=70))


__all__ = ["BARPLOT_FRAME", "BOXPLOT_FRAME", "LINEPLOT_FRAME", "ChartFrame", "Margin"]
