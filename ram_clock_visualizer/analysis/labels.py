"""Rank labels for RAM blocks.

Files are ranked by descending average clock rate; rank 0 gets "A", rank 1 "B", ...

Two labelling schemes exist past rank 25:

- ``"spreadsheet"``: bijective base-26 (Z, AA, AB, ..., AZ, BA, ..., ZZ, AAA, ...).
  Labels are always unique.
- ``"legacy"``: ``"A" + letter`` with the letter cycling every 26 ranks, so ranks 26
  and 52 both map to "AA".  Kept so label sets produced by older tooling can be reproduced.
"""

from __future__ import annotations

import math
from collections import Counter
from typing import Dict, List, Mapping, Sequence

from ram_clock_visualizer.models.records import IngestedFile, label_sort_key


_A = ord("A")


def rank_label(rank: int, scheme: str = "spreadsheet") -> str:
    rank = int(rank)
    if rank < 0:
        raise ValueError(f"rank must be >= 0, got {rank}")
    if rank < 26:
        return chr(_A + rank)
    if scheme == "legacy":
        return "A" + chr(_A + (rank - 26) % 26)
    if scheme != "spreadsheet":
        raise ValueError(f"Unknown label scheme '{scheme}'.")
    letters: List[str] = []
    n = rank + 1
    while n > 0:
        n, rem = divmod(n - 1, 26)
        letters.append(chr(_A + rem))
    return "".join(reversed(letters))


def _descending_average(f: IngestedFile) -> float:
    # NaN averages rank last
    avg = f.stats.average
    return math.inf if math.isnan(avg) else -avg


def rank_files(files: Sequence[IngestedFile], tie_break: str = "name") -> List[IngestedFile]:
    """Files sorted by descending average clock rate (stable)."""
    if tie_break == "name":
        return sorted(files, key=lambda f: (_descending_average(f), f.file_name))
    if tie_break == "input":
        return sorted(files, key=_descending_average)
    raise ValueError(f"Unknown tie_break '{tie_break}'.")


def assign_labels(
    files: Sequence[IngestedFile],
    scheme: str = "spreadsheet",
    tie_break: str = "name",
) -> Dict[str, str]:
    """
    Map every file name to its rank label.

    The mapping is total over files.  Under the legacy scheme labels may repeat
    (see find_duplicate_labels).
    """
    ranked = rank_files(files, tie_break=tie_break)
    return {f.file_name: rank_label(i, scheme) for i, f in enumerate(ranked)}


def find_duplicate_labels(mapping: Mapping[str, str]) -> Dict[str, List[str]]:
    """label -> file names, for every label assigned to more than one file."""
    counts = Counter(mapping.values())
    dups: Dict[str, List[str]] = {}
    for name, label in mapping.items():
        if counts[label] > 1:
            dups.setdefault(label, []).append(name)
    return dups
