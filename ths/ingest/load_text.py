"""Read text inputs from disk."""

from __future__ import annotations

from pathlib import Path
from typing import List


def load_text(path: Path) -> str:
    """
    Read a UTF-8 text file.

    Raises:
        FileNotFoundError: if the file does not exist.
        ValueError: if the file is not valid UTF-8.
    """
    if not path.is_file():
        raise FileNotFoundError(f"Text file not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError(f"File is not valid UTF-8 text: {path}") from exc


def collect_text_files(path: Path) -> List[Path]:
    """Return [path] for a file, or the sorted *.txt files inside a directory."""
    if path.is_file():
        return [path]
    if path.is_dir():
        return sorted(p for p in path.glob("*.txt") if p.is_file())
    raise FileNotFoundError(f"Input path not found: {path}")
