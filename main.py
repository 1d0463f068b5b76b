from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, TypeVar

import pandas as pd
import typer

from charts.pipeline import load_age_group_summaries, run_barplot, run_boxplot, run_lineplot
from charts.plots import PlotSaveConfig, PlotSaveDestinations, emit
from src.datahub import DataError, prepare_derived
from src.datahub.config import DEFAULT_DATA_ROOT, DEFAULT_PLOTS_ROOT
from src.metrics import InvalidInputError

app = typer.Typer()

T = TypeVar("T")

DataRootOption = typer.Option(
    DEFAULT_DATA_ROOT,
    "--data-root",
    file_okay=False,
    dir_okay=True,
    help="Directory holding socialMedia.csv and the derived CSV files.",
)


def _checked(step: Callable[[], T]) -> T:
    """Run a pipeline step, reporting bad input data as a CLI parameter error."""
    try:
        return step()
    except (DataError, InvalidInputError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--data-root") from exc


def _save_config(
    plots_root: Optional[Path],
    plots_tag: Optional[str],
    save_static: bool,
    save_html: bool,
) -> Optional[PlotSaveConfig]:
    if not plots_root:
        return None
    tag = plots_tag or datetime.utcnow().strftime("%Y%m%d-%H%M%S")
    config = PlotSaveConfig(base_dir=plots_root, run_tag=tag, save_static=save_static, save_html=save_html)
    print(f"[plots] Saving figures under {plots_root / tag}")
    return config


PlotsRootOption = typer.Option(
    None,
    "--plots-root",
    help=f"Directory where charts should be saved (e.g. {DEFAULT_PLOTS_ROOT}); shows them when omitted.",
)
PlotsTagOption = typer.Option(None, "--plots-tag", help="Folder suffix for this run (defaults to timestamp).")
SaveStaticOption = typer.Option(True, help="Write static PNG snapshots when saving plots.")
SaveHtmlOption = typer.Option(True, help="Write interactive HTML plots when saving.")


@app.command()
def prepare(
    data_root: Path = DataRootOption,
    force: bool = typer.Option(False, "--force", help="Rebuild derived files even if they exist."),
) -> None:
    """
    Derive SocialMediaAvg.csv and SocialMediaTime.csv from socialMedia.csv.
    """
    _checked(lambda: prepare_derived(data_root, force=force))


@app.command()
def summary(
    data_root: Path = DataRootOption,
    output: Optional[Path] = typer.Option(None, "--output", help="Also write the summary table as CSV."),
) -> None:
    """Print the per-age-group box statistics behind the boxplot."""
    summaries = _checked(lambda: load_age_group_summaries(data_root))
    table = pd.DataFrame.from_dict(
        {key: {**value.as_dict(), "count": value.count} for key, value in summaries.items()},
        orient="index",
    )
    table.index.name = "AgeGroup"
    print(table.to_string())
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(output)
        print(f"[stats] Wrote summary table → {output}")


def _destination(save_config: Optional[PlotSaveConfig], slug: str) -> Optional[PlotSaveDestinations]:
    return save_config.for_plot(slug) if save_config else None


@app.command()
def boxplot(
    data_root: Path = DataRootOption,
    plots_root: Optional[Path] = PlotsRootOption,
    plots_tag: Optional[str] = PlotsTagOption,
    save_static: bool = SaveStaticOption,
    save_html: bool = SaveHtmlOption,
) -> None:
    """Boxplot of likes per age group."""
    fig = _checked(lambda: run_boxplot(data_root))
    save_config = _save_config(plots_root, plots_tag, save_static, save_html)
    emit(fig, _destination(save_config, "boxplot"))


@app.command()
def barplot(
    data_root: Path = DataRootOption,
    plots_root: Optional[Path] = PlotsRootOption,
    plots_tag: Optional[str] = PlotsTagOption,
    save_static: bool = SaveStaticOption,
    save_html: bool = SaveHtmlOption,
) -> None:
    """Grouped bar chart of average likes per platform and post type."""
    fig = _checked(lambda: run_barplot(data_root))
    save_config = _save_config(plots_root, plots_tag, save_static, save_html)
    emit(fig, _destination(save_config, "barplot"))


@app.command()
def lineplot(
    data_root: Path = DataRootOption,
    plots_root: Optional[Path] = PlotsRootOption,
    plots_tag: Optional[str] = PlotsTagOption,
    save_static: bool = SaveStaticOption,
    save_html: bool = SaveHtmlOption,
) -> None:
    """Line chart of average likes per day."""
    fig = _checked(lambda: run_lineplot(data_root))
    save_config = _save_config(plots_root, plots_tag, save_static, save_html)
    emit(fig, _destination(save_config, "lineplot"))


@app.command()
def render(
    data_root: Path = DataRootOption,
    plots_root: Optional[Path] = PlotsRootOption,
    plots_tag: Optional[str] = PlotsTagOption,
    save_static: bool = SaveStaticOption,
    save_html: bool = SaveHtmlOption,
    prepare_first: bool = typer.Option(False, "--prepare", help="Rebuild the derived CSV files first."),
) -> None:
    """
    Render all three charts: boxplot, grouped bar chart and line chart.
    """
    if prepare_first:
        _checked(lambda: prepare_derived(data_root, force=True))

    figures = {
        "boxplot": _checked(lambda: run_boxplot(data_root)),
        "barplot": _checked(lambda: run_barplot(data_root)),
        "lineplot": _checked(lambda: run_lineplot(data_root)),
    }

    save_config = _save_config(plots_root, plots_tag, save_static, save_html)
    for slug, fig in figures.items():
        emit(fig, _destination(save_config, slug))


if __name__ == "__main__":
    app()
