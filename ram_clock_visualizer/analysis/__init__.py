"""Analysis package.

Design principle:
  - Ingest produces IngestedFile objects (samples + running statistics).
  - Analysis ranks them, assigns block labels and derives chart series / summaries.

Labels are ranks by descending average clock rate; see :mod:`.labels` for the
two labelling schemes past "Z".
"""

from .chart_data import ChartSeries, build_chart_series, chart_title
from .labels import assign_labels, find_duplicate_labels, label_sort_key, rank_label
from .pipeline import build_result, parse_directory

__all__ = [
    "ChartSeries",
    "build_chart_series",
    "chart_title",
    "assign_labels",
    "find_duplicate_labels",
    "label_sort_key",
    "rank_label",
    "build_result",
    "parse_directory",
]
