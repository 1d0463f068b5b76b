"""Figure sizes and margins for the charts."""

from .frame import BARPLOT_FRAME, BOXPLOT_FRAME, LINEPLOT_FRAME, ChartFrame, Margin

__all__ = ["BARPLOT_FRAME", "BOXPLOT_FRAME", "LINEPLOT_FRAME", "ChartFrame", "Margin"]
