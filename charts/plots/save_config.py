"""Where rendered charts are written: one folder per run, one slug per chart."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import plotly.graph_objects as go


@dataclass(frozen=True)
class PlotSaveDestinations:
    """PNG and HTML targets for one chart, e.g. plots/<run>/boxplot.{png,html}."""

    directory: Path
    slug: str
    save_static: bool
    save_html: bool

    @property
    def png_path(self) -> Path:
        return self.directory / f"{self.slug}.png"

    @property
    def html_path(self) -> Path:
        return self.directory / f"{self.slug}.html"

    def write(self, fig: go.Figure) -> None:
        """Export the chart; PNG goes through kaleido, HTML loads plotly.js from the CDN."""
        self.directory.mkdir(parents=True, exist_ok=True)
        if self.save_static:
            fig.write_image(str(self.png_path), engine="kaleido")
        if self.save_html:
            fig.write_html(str(self.html_path), include_plotlyjs="cdn", full_html=True)


@dataclass(frozen=True)
class PlotSaveConfig:
    """Run-level settings shared by every chart rendered in one CLI invocation."""

    base_dir: Path
    run_tag: str
    save_static: bool = True
    save_html: bool = True

    def for_plot(self, slug: str) -> PlotSaveDestinations:
        return PlotSaveDestinations(
            directory=self.base_dir / self.run_tag,
            slug=slug,
            save_static=self.save_static,
            save_html=self.save_html,
        )


def emit(fig: go.Figure, save_to: PlotSaveDestinations | None) -> None:
    """Write the chart to `save_to`, or open it in the browser when no destination is set."""
    if save_to:
        save_to.write(fig)
    else:
        fig.show()


__all__ = ["PlotSaveConfig", "PlotSaveDestinations", "emit"]
