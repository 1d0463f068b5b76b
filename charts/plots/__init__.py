"""Plotting utilities for the social media charts."""

from .renderer import ChartStyle, PlotlyRenderer, Renderer
from .save_config import PlotSaveConfig, PlotSaveDestinations, emit

__all__ = [
    "ChartStyle",
    "PlotlyRenderer",
    "Renderer",
    "PlotSaveConfig",
    "PlotSaveDestinations",
    "emit",
]
