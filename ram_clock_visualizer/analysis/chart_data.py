"""Chart data binding: selected blocks -> plottable series.

Series come out in block-list order and keep each block's sample order
(samples are assumed time-ordered already; nothing is sorted here).  The
colour of a series depends only on its position among the selected series,
so re-selecting the same blocks gives the same colours.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Collection, List, Sequence, Tuple

import numpy as np

from ram_clock_visualizer.models.records import LabeledBlock


CHART_TITLE = "RAM Block Clock Rates"
X_LABEL = "Time (Cycles)"
Y_LABEL = "Clock Rate (MHz)"

# red, blue, green, magenta, orange, cyan, pink, yellow, purple, teal, olive
PALETTE: Tuple[str, ...] = (
    "#ff0000",
    "#0000ff",
    "#00ff00",
    "#ff00ff",
    "#ffc800",
    "#00ffff",
    "#ffafaf",
    "#ffff00",
    "#800080",
    "#008080",
    "#808000",
)


@dataclass(frozen=True)
class ChartSeries:
    name: str
    source_file_name: str
    x: np.ndarray
    y: np.ndarray
    color: str

    @property
    def n_points(self) -> int:
        return int(self.x.shape[0])


def series_color(position: int, palette: Sequence[str] = PALETTE) -> str:
    return palette[int(position) % len(palette)]


def build_chart_series(
    blocks: Sequence[LabeledBlock],
    selected: Collection[str],
    palette: Sequence[str] = PALETTE,
) -> List[ChartSeries]:
    """One series per block whose name is selected, in block-list order."""
    wanted = set(selected)
    out: List[ChartSeries] = []
    for b in blocks:
        if b.block_name not in wanted:
            continue
        out.append(
            ChartSeries(
                name=b.block_name,
                source_file_name=b.source_file_name,
                x=b.timestamps(),
                y=b.clock_rates(),
                color=series_color(len(out), palette),
            )
        )
    return out


def chart_title(n_selected: int) -> str:
    if n_selected <= 0:
        return f"{CHART_TITLE} - No Data Selected"
    return f"{CHART_TITLE} - Selected Blocks: {n_selected}"
