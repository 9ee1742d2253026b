"""Tests for chart data binding (selected blocks -> series)."""

from __future__ import annotations

import numpy as np

from ram_clock_visualizer.analysis.chart_data import PALETTE, build_chart_series, chart_title
from ram_clock_visualizer.analysis.labels import rank_label
from ram_clock_visualizer.models.records import LabeledBlock, Sample


def _block(label: str, pairs) -> LabeledBlock:
    return LabeledBlock(
        block_name=label,
        source_file_name=f"{label.lower()}.csv",
        samples=tuple(Sample(t, r) for t, r in pairs),
    )


def test_only_selected_blocks_in_block_order() -> None:
    blocks = [_block("C", [(0, 1.0)]), _block("A", [(0, 3.0)]), _block("B", [(0, 2.0)])]
    series = build_chart_series(blocks, {"A", "C"})
    assert [s.name for s in series] == ["C", "A"]
    assert [s.color for s in series] == [PALETTE[0], PALETTE[1]]
    assert series[1].source_file_name == "a.csv"


def test_sample_order_is_preserved() -> None:
    blk = _block("A", [(5, 50.0), (1, 10.0), (3, 30.0)])
    (s,) = build_chart_series([blk], ["A"])
    assert s.x.dtype == np.int64
    assert s.x.tolist() == [5, 1, 3]
    assert s.y.tolist() == [50.0, 10.0, 30.0]
    assert s.n_points == 3


def test_colors_cycle_and_are_repeatable() -> None:
    blocks = [_block(rank_label(i), [(0, float(i))]) for i in range(len(PALETTE) + 2)]
    names = [b.block_name for b in blocks]
    first = build_chart_series(blocks, names)
    again = build_chart_series(blocks, names)
    assert [s.color for s in first] == [s.color for s in again]
    assert first[len(PALETTE)].color == PALETTE[0]
    assert first[len(PALETTE) + 1].color == PALETTE[1]


def test_empty_selection_and_unknown_names() -> None:
    blocks = [_block("A", [(0, 1.0)])]
    assert build_chart_series(blocks, []) == []
    assert build_chart_series(blocks, ["Q"]) == []
    assert build_chart_series([], ["A"]) == []


def test_chart_title() -> None:
    assert chart_title(0) == "RAM Block Clock Rates - No Data Selected"
    assert chart_title(3) == "RAM Block Clock Rates - Selected Blocks: 3"
