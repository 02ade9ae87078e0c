"""Analyzer definitions and the components they reference."""

from .analysis import AnalysisDefinition
from .components import (
    AnalyzerFilter,
    CharFilter,
    TokenFilter,
    Tokenizer,
    char_filter,
    token_filter,
    tokenizer,
)
from .definitions import (
    AnalyzerDefinition,
    CustomAnalyzerDefinition,
    PatternAnalyzerDefinition,
    SnowballAnalyzerDefinition,
    StandardAnalyzerDefinition,
    StopAnalyzerDefinition,
)

__all__ = [
    "AnalysisDefinition",
    "AnalyzerDefinition",
    "StopAnalyzerDefinition",
    "StandardAnalyzerDefinition",
    "PatternAnalyzerDefinition",
    "SnowballAnalyzerDefinition",
    "CustomAnalyzerDefinition",
    "Tokenizer",
    "AnalyzerFilter",
    "TokenFilter",
    "CharFilter",
    "tokenizer",
    "token_filter",
    "char_filter",
]
