"""Chart rendering and PNG export (matplotlib)."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence, Tuple

from matplotlib.figure import Figure
from matplotlib.ticker import MaxNLocator

from ram_clock_visualizer.analysis.chart_data import X_LABEL, Y_LABEL, ChartSeries


EXPORT_SIZE_PX: Tuple[int, int] = (1200, 800)
EXPORT_DPI = 100
DEFAULT_EXPORT_NAME = "ram_clocking_chart.png"


def draw_chart(ax, series: Sequence[ChartSeries], title: str) -> None:
    """Draw the series on a matplotlib Axes (white background, light grey grid)."""
    for s in series:
        ax.plot(s.x, s.y, label=s.name, color=s.color, marker="o", markersize=3, linewidth=1.2)
    ax.set_title(title)
    ax.set_xlabel(X_LABEL)
    ax.set_ylabel(Y_LABEL)
    ax.set_facecolor("white")
    ax.grid(True, color="lightgrey")
    ax.xaxis.set_major_locator(MaxNLocator(integer=True))
    if series:
        ax.legend(loc="best")


def ensure_png_suffix(path: str | Path) -> Path:
    p = Path(path)
    if p.name.lower().endswith(".png"):
        return p
    return p.with_name(p.name + ".png")


def render_figure(series: Sequence[ChartSeries], title: str, size_px: Tuple[int, int] = EXPORT_SIZE_PX) -> Figure:
    """Detached Figure (no pyplot state), safe for headless export."""
    fig = Figure(figsize=(size_px[0] / EXPORT_DPI, size_px[1] / EXPORT_DPI), dpi=EXPORT_DPI)
    ax = fig.add_subplot(1, 1, 1)
    draw_chart(ax, series, title)
    fig.tight_layout()
    return fig


def export_chart_png(series: Sequence[ChartSeries], title: str, path: str | Path) -> Path:
    """Save the chart as a 1200x800 PNG. Returns the written path (.png appended if missing)."""
    out = ensure_png_suffix(path)
    fig = render_figure(series, title)
    fig.savefig(out, format="png", dpi=EXPORT_DPI)
    return out
