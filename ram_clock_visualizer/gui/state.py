from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Set

from ram_clock_visualizer.analysis.chart_data import ChartSeries, build_chart_series, chart_title
from ram_clock_visualizer.analysis.pipeline import parse_directory
from ram_clock_visualizer.models.config import LoaderConfig
from ram_clock_visualizer.models.records import ParsedResult


@dataclass
class AppState:
    """
    Session state of the GUI, owned by the GUI builder and shared with its callbacks.

    result is replaced wholesale on every load; selected holds the visible block names.
    """
    config: LoaderConfig = field(default_factory=LoaderConfig)
    result: Optional[ParsedResult] = None
    selected: Set[str] = field(default_factory=set)
    figure: object | None = None

    @property
    def block_names(self) -> List[str]:
        return self.result.block_names if self.result is not None else []

    def load(self, directory: str | Path) -> ParsedResult:
        """Parse directory, replace the current result and select every block.

        On error the previous result is kept.
        """
        result = parse_directory(directory, self.config)
        self.result = result
        self.selected = set(result.block_names)
        return result

    def set_all(self, visible: bool) -> None:
        self.selected = set(self.block_names) if visible else set()

    def toggle(self, block_name: str, visible: bool) -> None:
        if visible:
            self.selected.add(block_name)
        else:
            self.selected.discard(block_name)

    def series(self) -> List[ChartSeries]:
        if self.result is None:
            return []
        return build_chart_series(self.result.blocks, self.selected)

    def title(self) -> str:
        return chart_title(len(self.selected))
