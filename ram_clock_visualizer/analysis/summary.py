from __future__ import annotations

from typing import List, Optional, Tuple

import pandas as pd

from ram_clock_visualizer.analysis.labels import label_sort_key
from ram_clock_visualizer.models.records import ParsedResult


NO_DATA_MESSAGE = "No files loaded; please select a directory."


def _ranked_entries(result: ParsedResult) -> List[Tuple[str, str]]:
    """(file name, label) pairs ordered by label rank, then file name."""
    return sorted(result.file_label_map.items(), key=lambda kv: (label_sort_key(kv[1]), kv[0]))


def format_mapping_report(result: Optional[ParsedResult]) -> str:
    """File -> block table with average and range, one line per file."""
    if result is None or not result.file_label_map:
        return NO_DATA_MESSAGE

    lines = ["File -> Block Assignment (sorted by average clock rate):", "=" * 80]
    for file_name, label in _ranked_entries(result):
        info = ""
        block = result.block_for_file(file_name)
        if block is not None:
            info = f" (Avg: {block.stats.average:.2f} MHz, Range: {block.stats.range:.2f} MHz)"
        lines.append(f"  {file_name} → RAM Block {label}{info}")
    return "\n".join(lines)


def format_load_summary(result: ParsedResult) -> str:
    lines = [f"Loaded {result.n_blocks} RAM blocks from {len(result.file_label_map)} files:"]
    for file_name, label in _ranked_entries(result):
        lines.append(f"  • {file_name} → {label}")
    return "\n".join(lines)


def statistics_frame(result: ParsedResult) -> pd.DataFrame:
    """Per-block statistics in rank order."""
    rows = []
    for file_name, label in _ranked_entries(result):
        block = result.block_for_file(file_name)
        if block is None:
            continue
        st = block.stats
        rows.append(
            {
                "label": label,
                "file": file_name,
                "count": st.count,
                "min_mhz": st.min if st.count else float("nan"),
                "max_mhz": st.max if st.count else float("nan"),
                "average_mhz": st.average,
                "range_mhz": st.range,
            }
        )
    cols = ["label", "file", "count", "min_mhz", "max_mhz", "average_mhz", "range_mhz"]
    return pd.DataFrame(rows, columns=cols)
