from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import Optional, Sequence

from ram_clock_visualizer.analysis.chart_data import build_chart_series, chart_title
from ram_clock_visualizer.analysis.pipeline import parse_directory
from ram_clock_visualizer.analysis.summary import format_mapping_report
from ram_clock_visualizer.gui.chart_view import export_chart_png
from ram_clock_visualizer.ingest.discovery import InvalidDirectoryError
from ram_clock_visualizer.models.config import LABEL_SCHEMES, TIE_BREAKS, LoaderConfig
from ram_clock_visualizer.scripts.sample_data import ensure_sample_data


EXIT_OK = 0
EXIT_EXPORT_FAILED = 1
EXIT_INVALID_INPUT = 2


def main(argv: Optional[Sequence[str]] = None) -> int:
    import argparse
    import textwrap

    p = argparse.ArgumentParser(
        prog="python -m ram_clock_visualizer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=textwrap.dedent(
            """\
            Load a directory of RAM-block clock-rate CSV files, rank the files by
            average clock rate and print the file -> block label mapping.

            Each CSV needs a header row; the timestamp column may be called
            timestamp/time/cycle/index/time_index and the clock-rate column
            clock_rate/rate/mhz/frequency/clock/clock_rate_mhz.
            """
        ),
    )
    p.add_argument("folder", help="Directory containing the *.csv files")
    p.add_argument("--export", default=None, help="Write a PNG chart of all blocks to this path ('.png' is appended if missing)")
    p.add_argument("--sample", action="store_true", help="Generate demo CSV files into the folder if it does not exist")
    p.add_argument("--label-scheme", choices=LABEL_SCHEMES, default="spreadsheet", help="Labelling past 'Z' (default: spreadsheet)")
    p.add_argument("--tie-break", choices=TIE_BREAKS, default="name", help="Order of files with equal averages (default: name)")
    args = p.parse_args(argv)

    config = dataclasses.replace(LoaderConfig(), label_scheme=args.label_scheme, tie_break=args.tie_break)

    folder = Path(args.folder).expanduser()
    if args.sample:
        ensure_sample_data(folder)

    try:
        result = parse_directory(folder, config)
    except InvalidDirectoryError as exc:
        print(f"ERROR: {exc}")
        return EXIT_INVALID_INPUT

    for msg in result.warnings:
        print(msg)
    print(format_mapping_report(result))

    if args.export:
        series = build_chart_series(result.blocks, result.block_names)
        try:
            written = export_chart_png(series, chart_title(len(result.block_names)), args.export)
        except (OSError, ValueError) as exc:
            print(f"ERROR: Error saving chart: {exc}")
            return EXIT_EXPORT_FAILED
        print(f"Chart saved to: {written}")

    return EXIT_OK
