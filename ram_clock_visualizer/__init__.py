"""RAM Clock Visualizer -- Python tooling for RAM-block clock-rate measurements.

This package provides tools for:
- Ingesting directories of CSV files with (timestamp, clock rate) samples
- Tolerant column matching (timestamp/time/cycle/..., clock_rate/rate/mhz/...)
- Per-file statistics (count, min, max, average, range)
- Ranking files by average clock rate and assigning block labels (A, B, ..., AA, ...)
- Building plottable series for selected blocks and exporting PNG charts

Key principles:
- One load = one immutable ParsedResult, replaced wholesale on reload
- A bad file never aborts a directory: it is excluded and reported
- A bad cell never aborts a file: it defaults to zero and is counted

Main subpackages:
- models: Data models (Sample, FileStatistics, IngestedFile, LabeledBlock, ParsedResult)
- ingest: CSV reader, column synonyms, directory discovery
- analysis: Label assignment, directory pipeline, chart binding, summaries
- gui: Interactive ipywidgets GUI and chart rendering
- scripts: Demo data generator
"""

__all__ = []
