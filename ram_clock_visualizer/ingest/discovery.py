from __future__ import annotations

from pathlib import Path
from typing import List


class InvalidDirectoryError(ValueError):
    """The selected path does not exist or is not a directory."""


class NoCsvFilesError(InvalidDirectoryError):
    """The selected directory holds no CSV file."""


def resolve_directory(directory: str | Path) -> Path:
    p = Path(directory).expanduser()
    if not p.exists() or not p.is_dir():
        raise InvalidDirectoryError(f"Not a valid directory: {p.resolve() if p.exists() else p}")
    return p.resolve()


def discover_csv_files(directory: str | Path, extension: str = ".csv") -> List[Path]:
    """
    List the data files directly inside directory (non-recursive), sorted by name.

    Only regular files whose suffix matches extension (case-insensitive) are returned.
    Raises InvalidDirectoryError / NoCsvFilesError.
    """
    root = resolve_directory(directory)
    ext = extension.lower()
    files = sorted(
        (p for p in root.iterdir() if p.is_file() and p.suffix.lower() == ext),
        key=lambda p: p.name,
    )
    if not files:
        raise NoCsvFilesError(f"No CSV files found in directory: {root}")
    return files
