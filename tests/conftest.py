"""Pytest fixtures and configuration for scorer tests."""

from __future__ import annotations

import os

# Settings are cached on first use, so the environment must be set before
# any ths module configures logging.
os.environ.setdefault("APP_MODE", "development")
os.environ.setdefault("LOG_LEVEL", "silent")

import pytest


def build_text(sentence_lengths: list[int]) -> str:
    """Build sentences of the given word counts from never-repeating tokens."""
    sentences = []
    counter = 0
    for length in sentence_lengths:
        words = [f"token{counter + i}" for i in range(length)]
        counter += length
        sentences.append(" ".join(words) + ".")
    return " ".join(sentences)


@pytest.fixture
def uniform_text() -> str:
    """Four sentences of ten identical words each."""
    sentence = " ".join(["word"] * 10) + "."
    return " ".join([sentence] * 4)


@pytest.fixture
def varied_text() -> str:
    """Sentences of 2, 30, 5 and 40 distinct words."""
    return build_text([2, 30, 5, 40])
