"""Tolerant column matching for clock-rate CSV files.

Header names are matched case-insensitively against ordered candidate lists
(see :class:`~ram_clock_visualizer.models.config.LoaderConfig`).  For every
row, candidates are tried in priority order and the first one whose cell
parses wins.  When no candidate yields a number the field defaults to zero;
this is a leniency policy, not an error.
"""

from __future__ import annotations

import math
from typing import Dict, List, Mapping, Optional, Sequence, Tuple


_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1


def normalize_header(names: Sequence[object]) -> Dict[str, int]:
    """Map trimmed, lower-cased header names to their column index (first occurrence wins)."""
    index: Dict[str, int] = {}
    for i, name in enumerate(names):
        key = str(name).strip().lower()
        if key and key not in index:
            index[key] = i
    return index


def resolve_columns(header: Mapping[str, int], candidates: Sequence[str]) -> List[str]:
    """Return the candidates present in the header, in priority order."""
    return [c for c in candidates if c in header]


def _cell(row: Sequence[object], header: Mapping[str, int], name: str) -> Optional[str]:
    """Trimmed cell text, or None when the column is absent or not set in this row."""
    idx = header.get(name)
    if idx is None or idx >= len(row):
        return None
    v = row[idx]
    if not isinstance(v, str):
        # pandas fills missing trailing fields with NaN
        return None
    return v.strip()


def _to_int(text: str) -> Optional[int]:
    if not text or "_" in text:
        return None
    try:
        v = int(text)
    except ValueError:
        return None
    if v < _INT64_MIN or v > _INT64_MAX:
        return None
    return v


def _to_float(text: str) -> Optional[float]:
    if not text or "_" in text:
        return None
    try:
        v = float(text)
    except ValueError:
        return None
    # nan / inf spellings are not clock rates
    if not math.isfinite(v):
        return None
    return v


def parse_int_field(row: Sequence[object], header: Mapping[str, int], candidates: Sequence[str]) -> Tuple[int, bool]:
    """
    Integer value of the first candidate column that parses.

    Returns (value, defaulted); value is 0 when nothing parsed.
    """
    for name in candidates:
        text = _cell(row, header, name)
        if text is None:
            continue
        v = _to_int(text)
        if v is not None:
            return v, False
    return 0, True


def parse_float_field(row: Sequence[object], header: Mapping[str, int], candidates: Sequence[str]) -> Tuple[float, bool]:
    """
    Float value of the first candidate column that parses.

    Returns (value, defaulted); value is 0.0 when nothing parsed.
    """
    for name in candidates:
        text = _cell(row, header, name)
        if text is None:
            continue
        v = _to_float(text)
        if v is not None:
            return v, False
    return 0.0, True
