"""Shared fixtures for analyzer definition tests."""

import pytest

from esanalysis.analyzers import (
    CharFilter,
    CustomAnalyzerDefinition,
    PatternAnalyzerDefinition,
    SnowballAnalyzerDefinition,
    StandardAnalyzerDefinition,
    StopAnalyzerDefinition,
    TokenFilter,
    Tokenizer,
)


@pytest.fixture
def mixed_filters():
    """Token and char filters interleaved in one list."""
    return [
        TokenFilter("lowercase"),
        CharFilter("html_strip"),
        TokenFilter("asciifolding"),
        CharFilter("mapping_quotes"),
        TokenFilter("porter_stem"),
    ]


@pytest.fixture
def sample_definitions(mixed_filters):
    """One definition of each analyzer type."""
    return [
        StopAnalyzerDefinition("stop_words", ("the", "a")),
        StandardAnalyzerDefinition("titles", ("of",), 100),
        PatternAnalyzerDefinition("commas", r"\s*,\s*"),
        SnowballAnalyzerDefinition("stems", "German"),
        CustomAnalyzerDefinition("body", Tokenizer("standard"), tuple(mixed_filters)),
    ]
