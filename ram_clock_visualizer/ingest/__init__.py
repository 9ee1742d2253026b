"""Ingest package - CSV readers and directory discovery.

This package handles:
- Listing the CSV files of a measurement directory (non-recursive)
- Tolerant header matching (timestamp/time/cycle/..., clock_rate/rate/mhz/...)
- Reading one CSV file into an IngestedFile with running statistics

Key classes:
- ClockCsvReader: Reads one clock-rate CSV file

Design principle:
- One bad cell defaults to zero; one bad file is reported and skipped
- Samples keep file row order (no sorting, no resampling)
"""
from .discovery import InvalidDirectoryError, NoCsvFilesError, discover_csv_files
from .reader_csv import ClockCsvReader

__all__ = [
    "ClockCsvReader",
    "InvalidDirectoryError",
    "NoCsvFilesError",
    "discover_csv_files",
]
