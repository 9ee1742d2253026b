from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Tuple

import numpy as np
import pandas as pd

from ram_clock_visualizer.models.stats import FileStatistics


@dataclass(frozen=True)
class Sample:
    """One (timestamp, clock rate) measurement."""
    timestamp: int
    clock_rate_mhz: float


def label_sort_key(label: str) -> Tuple[int, str]:
    """Order labels by rank: A < B < ... < Z < AA < AB (plain string order puts AA before B)."""
    return (len(label), label)


def _samples_timestamps(samples: Tuple[Sample, ...]) -> np.ndarray:
    return np.fromiter((s.timestamp for s in samples), dtype=np.int64, count=len(samples))


def _samples_rates(samples: Tuple[Sample, ...]) -> np.ndarray:
    return np.fromiter((s.clock_rate_mhz for s in samples), dtype=np.float64, count=len(samples))


@dataclass(frozen=True)
class IngestedFile:
    """
    In-memory representation of one successfully parsed CSV file.

    Notes
    - samples are in file row order (no sorting by timestamp).
    - warnings carry non-fatal diagnostics (missing columns, defaulted cells).
    """
    file_name: str
    samples: Tuple[Sample, ...]
    stats: FileStatistics
    warnings: Tuple[str, ...] = ()

    @property
    def n_samples(self) -> int:
        return len(self.samples)


@dataclass(frozen=True)
class IngestOutcome:
    """Per-file result of the ingestion step: either a file or an error message."""
    path: Path
    file: Optional[IngestedFile] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.file is not None and self.error is None


@dataclass(frozen=True)
class LabeledBlock:
    """
    One RAM block: an ingested file plus the label assigned to it.
    """
    block_name: str
    source_file_name: str
    samples: Tuple[Sample, ...]
    stats: FileStatistics = field(default_factory=FileStatistics, compare=False)

    @property
    def n_samples(self) -> int:
        return len(self.samples)

    def timestamps(self) -> np.ndarray:
        return _samples_timestamps(self.samples)

    def clock_rates(self) -> np.ndarray:
        return _samples_rates(self.samples)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({"timestamp": self.timestamps(), "clock_rate_mhz": self.clock_rates()})


@dataclass(frozen=True)
class ParsedResult:
    """
    Terminal artifact of one ingestion pass over a directory.

    Notes
    - blocks are in ingestion order, not re-sorted by label.
    - file_label_map maps source file name -> label.
    - warnings hold per-file diagnostics (failed files are listed here and nowhere else).
    """
    blocks: Tuple[LabeledBlock, ...]
    file_label_map: Dict[str, str] = field(hash=False)
    directory: Optional[Path] = None
    warnings: Tuple[str, ...] = ()

    @property
    def n_blocks(self) -> int:
        return len(self.blocks)

    @property
    def block_names(self) -> list:
        """Distinct block names ordered by rank (A, B, ..., Z, AA, ...)."""
        return sorted({b.block_name for b in self.blocks}, key=label_sort_key)

    def get_block(self, block_name: str) -> LabeledBlock:
        for b in self.blocks:
            if b.block_name == block_name:
                return b
        raise KeyError(f"No block labelled '{block_name}'.")

    def block_for_file(self, file_name: str) -> Optional[LabeledBlock]:
        for b in self.blocks:
            if b.source_file_name == file_name:
                return b
        return None
