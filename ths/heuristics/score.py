"""Threshold rules turning features into an AI/human split."""

from __future__ import annotations

import math
from typing import List, Tuple

from ths.heuristics.feature_schema import FeatureSet
from ths.heuristics.score_schema import ScoreResult


def tally_points(features: FeatureSet) -> Tuple[int, int, List[str]]:
    """Apply the fixed rule set and return (ai_points, human_points, signals)."""
    ai_points = 0
    human_points = 0
    signals: List[str] = []

    variance = features.sentence_length_variance
    if variance < 50:
        ai_points += 20
        signals.append("ai: uniform sentence lengths")
    elif variance > 150:
        human_points += 20
        signals.append("human: highly varied sentence lengths")
    else:
        human_points += 10
        signals.append("human: moderately varied sentence lengths")

    diversity = features.vocabulary_diversity
    if diversity > 0.7:
        human_points += 25
        signals.append("human: rich vocabulary")
    elif diversity < 0.5:
        ai_points += 25
        signals.append("ai: narrow vocabulary")
    else:
        ai_points += 10
        signals.append("ai: middling vocabulary")

    repetition = features.repetition_rate
    if repetition > 0.15:
        ai_points += 15
        signals.append("ai: frequent word repetition")
    elif repetition < 0.08:
        human_points += 15
        signals.append("human: little word repetition")
    else:
        human_points += 8
        signals.append("human: some word repetition")

    # Moderate connective use reads as generated; sparse or heavy use does not.
    if 0.03 < features.conjunction_rate < 0.06:
        ai_points += 15
        signals.append("ai: evenly paced conjunctions")
    else:
        human_points += 10
        signals.append("human: irregular conjunction use")

    complexity = features.structural_complexity
    if complexity < 0.3:
        ai_points += 15
        signals.append("ai: regular sentence structure")
    elif complexity > 0.6:
        human_points += 15
        signals.append("human: irregular sentence structure")
    else:
        human_points += 8
        signals.append("human: mixed sentence structure")

    # 10 <= avg < 15 and 25 < avg <= 30 award nothing.
    avg_length = features.avg_sentence_length
    if 15 <= avg_length <= 25:
        ai_points += 10
        signals.append("ai: typical generated sentence length")
    elif avg_length < 10 or avg_length > 30:
        human_points += 10
        signals.append("human: atypical sentence length")

    return ai_points, human_points, signals


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def score_features(features: FeatureSet) -> ScoreResult | None:
    """Normalize rule points into percentages that always sum to 100.

    Returns None when no rule awarded points.
    """
    ai_points, human_points, signals = tally_points(features)
    total = ai_points + human_points
    if total == 0:
        return None

    ai_percentage = _round_half_up(ai_points / total * 100)
    return ScoreResult(
        ai_percentage=ai_percentage,
        human_percentage=100 - ai_percentage,
        ai_points=ai_points,
        human_points=human_points,
        signals=tuple(signals),
    )
