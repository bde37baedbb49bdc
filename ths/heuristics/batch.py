"""Analyze many files and persist the results as JSON."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, List

from ths.heuristics.analyze import analyze
from ths.ingest.load_text import load_text
from ths.schemas.report import FileAnalysis
from ths.utils.logging import get_logger

log = get_logger(__name__)


def analyze_files(paths: Iterable[Path]) -> List[FileAnalysis]:
    """Analyze each file in order; load errors propagate to the caller."""
    results: List[FileAnalysis] = []
    for path in paths:
        text = load_text(path)
        analysis = analyze(text)
        if analysis is None:
            log.info("blank_file", path=str(path))
        results.append(
            FileAnalysis(path=path, char_count=len(text), analysis=analysis)
        )
    log.info("batch_analyzed", files=len(results))
    return results


def write_results(results: Iterable[FileAnalysis], output_path: Path) -> None:
    """Write analysis results to JSON."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    data = [r.model_dump(mode="json") for r in results]
    output_path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
