from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

from ram_clock_visualizer.analysis.labels import assign_labels, find_duplicate_labels, label_sort_key
from ram_clock_visualizer.ingest.discovery import discover_csv_files
from ram_clock_visualizer.ingest.reader_csv import ClockCsvReader
from ram_clock_visualizer.models.config import LoaderConfig
from ram_clock_visualizer.models.records import IngestedFile, IngestOutcome, LabeledBlock, ParsedResult


def ingest_files(paths: Sequence[Path], config: Optional[LoaderConfig] = None) -> List[IngestOutcome]:
    """One IngestOutcome per path, in the given order."""
    reader = ClockCsvReader(config)
    return [reader.try_read(p) for p in paths]


def build_result(
    files: Sequence[IngestedFile],
    config: Optional[LoaderConfig] = None,
    directory: Optional[Path] = None,
    warnings: Sequence[str] = (),
) -> ParsedResult:
    """
    Label the ingested files and attach each label to its file.

    Blocks keep the order of files (ingestion order), they are not re-sorted by label.
    """
    cfg = config or LoaderConfig()
    file_label_map = assign_labels(files, scheme=cfg.label_scheme, tie_break=cfg.tie_break)

    msgs = list(warnings)
    for label, names in sorted(find_duplicate_labels(file_label_map).items(), key=lambda kv: label_sort_key(kv[0])):
        msgs.append(f"WARNING: label '{label}' assigned to {len(names)} files ({', '.join(names)}) by the '{cfg.label_scheme}' scheme")

    blocks = tuple(
        LabeledBlock(
            block_name=file_label_map[f.file_name],
            source_file_name=f.file_name,
            samples=f.samples,
            stats=f.stats.snapshot(),
        )
        for f in files
    )
    return ParsedResult(
        blocks=blocks,
        file_label_map=file_label_map,
        directory=directory,
        warnings=tuple(msgs),
    )


def parse_directory(directory: str | Path, config: Optional[LoaderConfig] = None) -> ParsedResult:
    """
    One ingestion pass over a directory of clock-rate CSV files.

    1. Validate the directory and list its CSV files (InvalidDirectoryError / NoCsvFilesError).
    2. Read every file; a file that fails is excluded and reported in ParsedResult.warnings.
    3. Rank the successful files by average clock rate and assign labels.
    4. Return the labelled blocks and the file -> label map.
    """
    cfg = config or LoaderConfig()
    paths = discover_csv_files(directory, extension=cfg.extension)
    root = paths[0].parent

    files: List[IngestedFile] = []
    warnings: List[str] = []
    for outcome in ingest_files(paths, cfg):
        if not outcome.ok:
            warnings.append(f"ERROR: {outcome.path.name}: {outcome.error}")
            continue
        files.append(outcome.file)
        for msg in outcome.file.warnings:
            warnings.append(f"WARNING: {outcome.file.file_name}: {msg}")

    return build_result(files, cfg, directory=root, warnings=warnings)
