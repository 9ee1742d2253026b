from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import pandas as pd

from ram_clock_visualizer.ingest.columns import (
    normalize_header,
    parse_float_field,
    parse_int_field,
    resolve_columns,
)
from ram_clock_visualizer.models.config import LoaderConfig
from ram_clock_visualizer.models.records import IngestedFile, IngestOutcome, Sample
from ram_clock_visualizer.models.stats import FileStatistics


class ClockCsvReader:
    """
    Reads one clock-rate CSV file into an IngestedFile.

    File layout:
      - first row is the header (matched case-insensitively against the configured synonyms)
      - one data row per sample; cells are whitespace-trimmed; empty lines are ignored
      - a row with more cells than the header keeps its leading cells

    Every data row yields exactly one Sample, in row order.  Cells that cannot be parsed
    default to 0 / 0.0 and the row is kept; the statistics are updated for every row.
    """

    def __init__(self, config: Optional[LoaderConfig] = None):
        self.config = config or LoaderConfig()

    def _read_table(self, path: Path) -> pd.DataFrame:
        """Raw text cells with the header as row 0 (empty frame for a zero-byte file)."""
        # Text cells only: numeric conversion is done per cell with fallback
        opts = dict(header=None, dtype=str, keep_default_na=False, na_filter=False, skip_blank_lines=True, engine="python")
        with open(path, "r", encoding=self.config.encoding, newline="") as fh:
            try:
                width = pd.read_csv(fh, nrows=1, **opts).shape[1]
            except pd.errors.EmptyDataError:
                # zero-byte file: no header, no rows
                return pd.DataFrame()
            fh.seek(0)
            # Rows wider than the header keep their leading cells
            return pd.read_csv(fh, on_bad_lines=lambda fields: fields[:width], **opts)

    def read(self, path: str | Path) -> IngestedFile:
        p = Path(path)
        cfg = self.config
        df = self._read_table(p)

        header = normalize_header(list(df.iloc[0]) if len(df) else [])
        warnings: List[str] = []

        ts_cols = resolve_columns(header, cfg.timestamp_columns)
        rate_cols = resolve_columns(header, cfg.clock_rate_columns)
        if not ts_cols:
            warnings.append(f"no timestamp column found (tried {', '.join(cfg.timestamp_columns)}); timestamps default to 0")
        if not rate_cols:
            warnings.append(f"no clock-rate column found (tried {', '.join(cfg.clock_rate_columns)}); rates default to 0.0")

        samples: List[Sample] = []
        stats = FileStatistics()
        n_bad_ts = 0
        n_bad_rate = 0

        for row in df.iloc[1:].itertuples(index=False, name=None):
            timestamp, ts_default = parse_int_field(row, header, cfg.timestamp_columns)
            clock_rate, rate_default = parse_float_field(row, header, cfg.clock_rate_columns)
            samples.append(Sample(timestamp=timestamp, clock_rate_mhz=clock_rate))
            stats.update(clock_rate)
            if ts_default and ts_cols:
                n_bad_ts += 1
            if rate_default and rate_cols:
                n_bad_rate += 1

        if n_bad_ts:
            warnings.append(f"{n_bad_ts} timestamp cell(s) could not be parsed; set to 0")
        if n_bad_rate:
            warnings.append(f"{n_bad_rate} clock-rate cell(s) could not be parsed; set to 0.0")

        return IngestedFile(
            file_name=p.name,
            samples=tuple(samples),
            stats=stats.snapshot(),
            warnings=tuple(warnings),
        )

    def try_read(self, path: str | Path) -> IngestOutcome:
        """Like :meth:`read`, but a per-file failure is returned instead of raised."""
        p = Path(path)
        try:
            return IngestOutcome(path=p, file=self.read(p))
        except (OSError, ValueError) as exc:  # includes UnicodeDecodeError and pandas ParserError
            return IngestOutcome(path=p, error=f"{type(exc).__name__}: {exc}")
