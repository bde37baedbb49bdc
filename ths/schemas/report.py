from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from ths.heuristics.feature_schema import FeatureSet
from ths.heuristics.score_schema import ScoreResult


class Analysis(BaseModel):
    """Features and score for one non-blank text."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    features: FeatureSet
    score: ScoreResult


class FileAnalysis(BaseModel):
    """Result of analyzing one file; analysis is None for blank files."""

    model_config = ConfigDict(extra="forbid")

    path: Path = Field(..., description="Source file that was analyzed.")
    char_count: int = Field(..., ge=0, description="Characters read from the file.")
    analysis: Analysis | None = Field(
        None, description="Missing when the file holds only whitespace."
    )
