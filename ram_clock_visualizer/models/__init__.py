from .config import LoaderConfig
from .records import IngestedFile, IngestOutcome, LabeledBlock, ParsedResult, Sample, label_sort_key
from .stats import FileStatistics

__all__ = [
    "LoaderConfig",
    "Sample",
    "FileStatistics",
    "IngestedFile",
    "IngestOutcome",
    "LabeledBlock",
    "ParsedResult",
    "label_sort_key",
]
