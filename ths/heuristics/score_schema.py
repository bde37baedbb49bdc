from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

ConfidenceLevel = Literal["high", "medium", "low"]


def confidence_level(percentage: int) -> ConfidenceLevel:
    """Bucket the winning percentage into a coarse confidence label."""
    if percentage >= 70:
        return "high"
    if percentage >= 55:
        return "medium"
    return "low"


class ScoreResult(BaseModel):
    """Normalized AI/human split plus the raw points behind it."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    ai_percentage: int = Field(..., ge=0, le=100)
    human_percentage: int = Field(..., ge=0, le=100)
    ai_points: int = Field(0, ge=0, description="Points awarded by AI-leaning rules.")
    human_points: int = Field(
        0, ge=0, description="Points awarded by human-leaning rules."
    )
    signals: tuple[str, ...] = Field(
        default_factory=tuple, description="Rule outcomes in evaluation order."
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_confidence(cls, data: Any) -> Any:
        # confidence is derived; dumped results carry it back in
        if isinstance(data, dict) and "confidence" in data:
            return {k: v for k, v in data.items() if k != "confidence"}
        return data

    @model_validator(mode="after")
    def _check_split(self) -> "ScoreResult":
        if self.ai_percentage + self.human_percentage != 100:
            raise ValueError("ai_percentage and human_percentage must sum to 100.")
        return self

    @computed_field  # type: ignore[prop-decorator]
    @property
    def confidence(self) -> ConfidenceLevel:
        return confidence_level(max(self.ai_percentage, self.human_percentage))
