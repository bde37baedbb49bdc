from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class FeatureSet(BaseModel):
    """Numeric style signals extracted from a single piece of text."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    sentence_length_variance: float = Field(
        0.0, ge=0, description="Population variance of words per sentence."
    )
    avg_sentence_length: float = Field(
        0.0, ge=0, description="Words per sentence."
    )
    vocabulary_diversity: float = Field(
        0.0, ge=0, le=1, description="Distinct lower-cased words over total words."
    )
    repetition_rate: float = Field(
        0.0, ge=0, le=1, description="Repeated distinct words over total words."
    )
    conjunction_rate: float = Field(
        0.0, ge=0, description="Conjunction hits per whitespace-delimited token."
    )
    punctuation_density: float = Field(
        0.0, ge=0, le=1, description="Punctuation characters over all characters."
    )
    structural_complexity: float = Field(
        0.0, ge=0, le=1, description="Sentence character-length variance / 1000, capped at 1."
    )
