"""
Demo data generator.

Writes a handful of synthetic clock-rate CSV files (``block_A.csv``, ``block_B.csv``, ...)
so the GUI can be tried without real measurements.  Block k has a base rate of
``base_rate - k * step`` MHz plus Gaussian noise; every file uses its own seed derived
from its letter, so the data is identical from one run to the next.

Examples
--------
>>> from ram_clock_visualizer.scripts.sample_data import create_sample_data
>>> # create_sample_data("sample_data")
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import numpy as np

from ram_clock_visualizer.analysis.labels import rank_label


SAMPLE_HEADER = "timestamp,clock_rate_mhz"


def create_sample_data(
    directory: str | Path,
    n_blocks: int = 4,
    n_samples: int = 100,
    base_rate: float = 1600.0,
    step: float = 50.0,
    noise: float = 10.0,
) -> List[Path]:
    """Create directory (if needed) and write one CSV per block. Returns the written paths."""
    if n_blocks < 1:
        raise ValueError(f"n_blocks must be >= 1, got {n_blocks}")
    root = Path(directory).expanduser()
    root.mkdir(parents=True, exist_ok=True)

    written: List[Path] = []
    for k in range(int(n_blocks)):
        label = rank_label(k)
        rng = np.random.default_rng(sum(ord(c) for c in label) + 1000 * len(label))
        rates = (base_rate - k * step) + rng.normal(0.0, noise, size=int(n_samples))

        lines = [SAMPLE_HEADER]
        lines.extend(f"{i},{r:.2f}" for i, r in enumerate(rates))

        path = root / f"block_{label}.csv"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        written.append(path)
    return written


def ensure_sample_data(directory: str | Path, **kwargs) -> Path:
    """Generate sample data only when directory does not exist yet."""
    root = Path(directory).expanduser()
    if not root.is_dir():
        create_sample_data(root, **kwargs)
    return root
