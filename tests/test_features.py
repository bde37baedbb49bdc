"""Tests for feature extraction."""

from __future__ import annotations

import pytest

from ths.heuristics.feature_schema import FeatureSet
from ths.heuristics.features import (
    conjunction_rate,
    extract_features,
    population_variance,
    punctuation_density,
    repetition_rate,
    split_sentences,
    structural_complexity,
    vocabulary_diversity,
)


class TestSplitting:
    """Tests for sentence splitting."""

    def test_runs_of_marks_count_once(self) -> None:
        """Test that '?!' and '...' end a single sentence."""
        assert split_sentences("Really?! Yes... Fine.") == ["Really", " Yes", " Fine"]

    def test_full_width_marks(self) -> None:
        """Test splitting on CJK sentence-ending marks."""
        assert split_sentences("你好。世界！真的？") == ["你好", "世界", "真的"]

    def test_blank_fragments_dropped(self) -> None:
        """Test that whitespace between marks does not form a sentence."""
        assert split_sentences(". . !") == []


class TestExtractFeatures:
    """Tests for extract_features function."""

    @pytest.mark.parametrize("text", ["", "   ", "\n\t  \n"])
    def test_blank_text_yields_zero_features(self, text: str) -> None:
        """Test blank input gives every feature at zero."""
        assert extract_features(text) == FeatureSet()

    def test_single_short_sentence(self) -> None:
        """Test 'Hi.' gives one sentence of one word."""
        features = extract_features("Hi.")

        assert features.avg_sentence_length == 1
        assert features.vocabulary_diversity == 1
        assert features.repetition_rate == 0
        assert features.sentence_length_variance == 0
        assert features.structural_complexity == 0
        assert features.punctuation_density == pytest.approx(1 / 3)

    def test_uniform_sentences(self, uniform_text: str) -> None:
        """Test identical sentences have no length variance and low diversity."""
        features = extract_features(uniform_text)

        assert features.sentence_length_variance == 0
        assert features.avg_sentence_length == 10
        # "word" and "word." are the only distinct tokens
        assert features.vocabulary_diversity == pytest.approx(2 / 40)
        assert features.repetition_rate == pytest.approx(2 / 40)
        assert features.structural_complexity < 0.3

    def test_varied_sentences(self, varied_text: str) -> None:
        """Test varied sentence lengths with distinct words."""
        features = extract_features(varied_text)

        assert features.sentence_length_variance == pytest.approx(261.6875)
        assert features.avg_sentence_length == pytest.approx(77 / 4)
        assert features.vocabulary_diversity == 1
        assert features.repetition_rate == 0
        assert features.structural_complexity == 1.0

    def test_case_insensitive_vocabulary(self) -> None:
        """Test 'The The' and 'the the' score the same."""
        upper = extract_features("The The")
        lower = extract_features("the the")

        assert upper.vocabulary_diversity == lower.vocabulary_diversity == 0.5
        assert upper.repetition_rate == lower.repetition_rate == 0.5

    def test_idempotent(self, varied_text: str) -> None:
        """Test repeated extraction gives identical features."""
        assert extract_features(varied_text) == extract_features(varied_text)


class TestRatios:
    """Tests for the individual ratio helpers."""

    def test_population_variance(self) -> None:
        """Test population (not sample) variance."""
        assert population_variance([2, 4, 4, 4, 5, 5, 7, 9]) == 4
        assert population_variance([]) == 0

    def test_empty_word_lists(self) -> None:
        """Test zero denominators fall back to zero."""
        assert vocabulary_diversity([]) == 0
        assert repetition_rate([]) == 0
        assert punctuation_density("") == 0
        assert structural_complexity([]) == 0

    def test_repetition_is_monotonic(self) -> None:
        """Test more repetition at fixed word count never lowers the rate."""
        texts = ["a b c d", "a a c d", "a a a d", "a a c c"]
        rates = [repetition_rate(t.split()) for t in texts]

        assert rates == sorted(rates)
        assert rates[0] == 0
        assert rates[-1] == 0.5

    def test_conjunctions_match_whole_words(self) -> None:
        """Test conjunctions are matched case-insensitively as whole words."""
        assert conjunction_rate("cats and dogs but not birds") == pytest.approx(2 / 6)
        assert conjunction_rate("And AND and") == 1.0
        assert conjunction_rate("order sandwich fork") == 0

    def test_chinese_conjunctions_need_ascii_neighbours(self) -> None:
        """Test CJK connectives only match between ASCII word characters."""
        assert conjunction_rate("我们 和 他们") == 0
        assert conjunction_rate("然而 因此") == 0
        assert conjunction_rate("a和b") == 1.0

    def test_accented_letters_are_boundaries(self) -> None:
        """Test non-ASCII letters end a word like punctuation does."""
        assert conjunction_rate("caféand naïve or") == pytest.approx(2 / 3)

    def test_conjunction_denominator_counts_edge_fragments(self) -> None:
        """Test trailing whitespace adds an empty token to the denominator."""
        assert conjunction_rate("and ") == 0.5

    def test_punctuation_density(self) -> None:
        """Test ASCII and full-width punctuation both count."""
        assert punctuation_density("a,b.") == 0.5
        assert punctuation_density("你好，世界。") == pytest.approx(2 / 6)

    def test_density_counts_code_points(self) -> None:
        """Test astral characters such as emoji count as one character each."""
        assert punctuation_density("Hi 😀😀😀. Ok.") == pytest.approx(2 / 11)

    def test_structural_complexity_is_capped(self) -> None:
        """Test very uneven sentence lengths cap at 1."""
        assert structural_complexity(["a", " " + "b" * 199]) == 1.0
        assert structural_complexity(["abc", "abc"]) == 0
