"""Loader configuration -- bundles everything that affects a directory load.

A LoaderConfig groups every parameter that changes the ParsedResult of an
ingestion pass into one frozen dataclass.  It can be:

- Used as-is (defaults accept the usual timestamp/clock-rate headers)
- Overridden field-by-field via ``dataclasses.replace()``
- Serialized to a dict for provenance / display
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple


TIMESTAMP_SYNONYMS: Tuple[str, ...] = ("timestamp", "time", "cycle", "index", "time_index")
CLOCK_RATE_SYNONYMS: Tuple[str, ...] = ("clock_rate", "rate", "mhz", "frequency", "clock", "clock_rate_mhz")

LABEL_SCHEMES: Tuple[str, ...] = ("spreadsheet", "legacy")
TIE_BREAKS: Tuple[str, ...] = ("name", "input")


@dataclass(frozen=True)
class LoaderConfig:
    """Frozen configuration for the CSV ingestion pipeline.

    Fields
    ------
    timestamp_columns : tuple of str
        Candidate header names for the timestamp, in priority order.
    clock_rate_columns : tuple of str
        Candidate header names for the clock rate (MHz), in priority order.
    encoding : str
        Text encoding of the CSV files. ``utf-8-sig`` accepts UTF-8 with or without BOM.
    extension : str
        File suffix selected in the directory (matched case-insensitively).
    label_scheme : str
        ``"spreadsheet"``: A..Z, AA..AZ, BA..ZZ, AAA.. (labels always unique).
        ``"legacy"``: A..Z then ``"A" + letter`` forever (labels repeat from rank 52).
    tie_break : str
        ``"name"``: equal averages are ranked by file name.
        ``"input"``: equal averages keep ingestion order.
    """

    timestamp_columns: Tuple[str, ...] = TIMESTAMP_SYNONYMS
    clock_rate_columns: Tuple[str, ...] = CLOCK_RATE_SYNONYMS
    encoding: str = "utf-8-sig"
    extension: str = ".csv"
    label_scheme: str = "spreadsheet"
    tie_break: str = "name"

    def __post_init__(self) -> None:
        if self.label_scheme not in LABEL_SCHEMES:
            raise ValueError(f"Unknown label_scheme '{self.label_scheme}' (expected one of {LABEL_SCHEMES}).")
        if self.tie_break not in TIE_BREAKS:
            raise ValueError(f"Unknown tie_break '{self.tie_break}' (expected one of {TIE_BREAKS}).")
        # Callers may pass lists; keep the dataclass hashable
        object.__setattr__(self, "timestamp_columns", tuple(c.strip().lower() for c in self.timestamp_columns))
        object.__setattr__(self, "clock_rate_columns", tuple(c.strip().lower() for c in self.clock_rate_columns))

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly dict (tuples become lists)."""
        d = asdict(self)
        d["timestamp_columns"] = list(d["timestamp_columns"])
        d["clock_rate_columns"] = list(d["clock_rate_columns"])
        return d
