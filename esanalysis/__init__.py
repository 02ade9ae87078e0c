"""Analysis settings builders for search index configuration.

This package describes text-analysis components (analyzers, tokenizers,
filters) as immutable values and serializes them into the JSON fragments
expected under ``analysis.analyzer`` in index settings.

Main components:
- Analyzer definitions: stop, standard, pattern, snowball and custom
- Document builders: in-memory tree and streaming JSON writer
- Configuration loading from YAML settings files
"""

__version__ = "1.0.0"

from .analyzers import (
    AnalysisDefinition,
    AnalyzerDefinition,
    AnalyzerFilter,
    CharFilter,
    CustomAnalyzerDefinition,
    PatternAnalyzerDefinition,
    SnowballAnalyzerDefinition,
    StandardAnalyzerDefinition,
    StopAnalyzerDefinition,
    TokenFilter,
    Tokenizer,
)
from .builder import (
    DocumentBuilder,
    JsonDocumentBuilder,
    StreamingJsonWriter,
    json_builder,
)
from .config import analysis_from_config, analyzer_from_config, load_analysis
from .exceptions import AnalysisError, BuilderStateError, ConfigError

__all__ = [
    "__version__",
    # Definitions
    "AnalysisDefinition",
    "AnalyzerDefinition",
    "StopAnalyzerDefinition",
    "StandardAnalyzerDefinition",
    "PatternAnalyzerDefinition",
    "SnowballAnalyzerDefinition",
    "CustomAnalyzerDefinition",
    # Components
    "Tokenizer",
    "AnalyzerFilter",
    "TokenFilter",
    "CharFilter",
    # Builders
    "DocumentBuilder",
    "JsonDocumentBuilder",
    "StreamingJsonWriter",
    "json_builder",
    # Configuration
    "analyzer_from_config",
    "analysis_from_config",
    "load_analysis",
    # Errors
    "AnalysisError",
    "BuilderStateError",
    "ConfigError",
]
