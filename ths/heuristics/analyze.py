"""Single entry point: text in, features and score out."""

from __future__ import annotations

from ths.heuristics.features import extract_features
from ths.heuristics.score import score_features
from ths.schemas.report import Analysis
from ths.utils.logging import get_logger

log = get_logger(__name__)


def analyze(text: str) -> Analysis | None:
    """Score text as AI-generated vs human-written.

    Returns None for blank or whitespace-only text; callers should clear
    any previous result rather than treat this as an error.
    """
    if not text.strip():
        log.debug("blank_text_skipped", chars=len(text))
        return None

    features = extract_features(text)
    score = score_features(features)
    if score is None:
        log.debug("no_rules_fired", chars=len(text))
        return None

    log.debug(
        "text_analyzed",
        chars=len(text),
        ai_percentage=score.ai_percentage,
        human_percentage=score.human_percentage,
    )
    return Analysis(features=features, score=score)
