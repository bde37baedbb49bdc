"""Feature extraction for AI/human text scoring."""

from __future__ import annotations

import re
from collections import Counter
from typing import List, Sequence

from ths.heuristics.feature_schema import FeatureSet

SENTENCE_BREAK_RE = re.compile(r"[.!?。！？]+")
WHITESPACE_RE = re.compile(r"\s+")
PUNCTUATION_RE = re.compile(r"[,.!?;:，。！？；：]")

CONJUNCTIONS = (
    "and",
    "but",
    "or",
    "so",
    "yet",
    "for",
    "nor",
    "however",
    "therefore",
    "moreover",
    "和",
    "但是",
    "或者",
    "所以",
    "然而",
    "因此",
)
CONJUNCTION_RES = tuple(
    re.compile(rf"\b{re.escape(conj)}\b", re.IGNORECASE | re.ASCII)
    for conj in CONJUNCTIONS
)


def split_sentences(text: str) -> List[str]:
    """Split on runs of sentence-ending marks, dropping blank fragments."""
    return [s for s in SENTENCE_BREAK_RE.split(text) if s.strip()]


def split_words(text: str) -> List[str]:
    return text.split()


def population_variance(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    mean = sum(values) / len(values)
    return sum((v - mean) ** 2 for v in values) / len(values)


def vocabulary_diversity(words: Sequence[str]) -> float:
    if not words:
        return 0.0
    return len({w.lower() for w in words}) / len(words)


def repetition_rate(words: Sequence[str]) -> float:
    """Share of the text taken up by distinct words that occur more than once."""
    if not words:
        return 0.0
    counts = Counter(w.lower() for w in words)
    repeated = sum(1 for count in counts.values() if count > 1)
    return repeated / len(words)


def conjunction_rate(text: str) -> float:
    """Conjunction hits per whitespace-split token of the raw text.

    Word boundaries are ASCII-only: CJK and accented letters count as
    separators, so "a和b" holds one match and a spaced "和" holds none.

    The denominator counts edge fragments too, so leading or trailing
    whitespace slightly lowers the rate.
    """
    tokens = len(WHITESPACE_RE.split(text))
    if tokens == 0:
        return 0.0
    hits = sum(len(pattern.findall(text)) for pattern in CONJUNCTION_RES)
    return hits / tokens


def punctuation_density(text: str) -> float:
    if not text:
        return 0.0
    return len(PUNCTUATION_RE.findall(text)) / len(text)


def structural_complexity(sentences: Sequence[str]) -> float:
    if not sentences:
        return 0.0
    variance = population_variance([len(s) for s in sentences])
    return min(variance / 1000, 1.0)


def extract_features(text: str) -> FeatureSet:
    """Compute the seven style features used by the scorer.

    Blank input yields a FeatureSet with every field at zero.
    """
    sentences = split_sentences(text)
    words = split_words(text)

    return FeatureSet(
        sentence_length_variance=population_variance(
            [len(split_words(s)) for s in sentences]
        ),
        avg_sentence_length=len(words) / max(len(sentences), 1),
        vocabulary_diversity=vocabulary_diversity(words),
        repetition_rate=repetition_rate(words),
        conjunction_rate=conjunction_rate(text),
        punctuation_density=punctuation_density(text),
        structural_complexity=structural_complexity(sentences),
    )
