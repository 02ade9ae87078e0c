"""Loading analyzer definitions from configuration files.

Configuration uses the same shape as the engine's index settings, so an
existing ``settings`` document can be loaded as is::

    analysis:
      analyzer:
        titles:
          type: standard
          stopwords: [the, a]
          max_token_length: 100
        html_text:
          type: custom
          tokenizer: standard
          char_filter: html_strip
          filter: [lowercase, asciifolding]
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .analyzers.analysis import AnalysisDefinition
from .analyzers.components import AnalyzerFilter, char_filter, token_filter, tokenizer
from .analyzers.definitions import (
    AnalyzerDefinition,
    CustomAnalyzerDefinition,
    PatternAnalyzerDefinition,
    SnowballAnalyzerDefinition,
    StandardAnalyzerDefinition,
    StopAnalyzerDefinition,
)
from .exceptions import ConfigError

logger = logging.getLogger(__name__)

ANALYZER_TYPES: dict[str, type[AnalyzerDefinition]] = {
    cls.kind: cls
    for cls in (
        StopAnalyzerDefinition,
        StandardAnalyzerDefinition,
        PatternAnalyzerDefinition,
        SnowballAnalyzerDefinition,
        CustomAnalyzerDefinition,
    )
}


def load_config(path: Path | str) -> dict[str, Any]:
    """Load configuration from a YAML file."""
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {e}") from e
    except OSError as e:
        raise ConfigError(f"Error reading config file: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}")

    logger.debug("Loaded config from %s", path)
    return data


def _string(
    name: str, settings: Mapping[str, Any], key: str, default: Any = None
) -> Any:
    value = settings.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise ConfigError(f"'{key}' must be a string", analyzer=name)
    return value


def _names(name: str, settings: Mapping[str, Any], key: str) -> tuple[str, ...]:
    """Read a list of names, accepting a bare string as one element."""
    value = settings.get(key)
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(
            f"'{key}' must be a string or a list of strings", analyzer=name
        )
    return tuple(value)


def _bool(name: str, settings: Mapping[str, Any], key: str, default: bool) -> bool:
    value = settings.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"'{key}' must be true or false", analyzer=name)
    return value


def _int(name: str, settings: Mapping[str, Any], key: str, default: int) -> int:
    value = settings.get(key, default)
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"'{key}' must be an integer", analyzer=name)
    return value


def analyzer_from_config(name: str, settings: Any) -> AnalyzerDefinition:
    """Create an analyzer definition from its settings mapping.

    Args:
        name: Analyzer name
        settings: Mapping as found under ``analysis.analyzer.<name>``

    Returns:
        The matching analyzer definition

    Raises:
        ConfigError: If the type is missing or unknown, or a field has the
            wrong shape
    """
    if not isinstance(settings, Mapping):
        raise ConfigError("settings must be a mapping", analyzer=name)

    kind = settings.get("type")
    if kind is None:
        raise ConfigError("missing 'type'", analyzer=name)
    if kind not in ANALYZER_TYPES:
        known = ", ".join(sorted(ANALYZER_TYPES))
        raise ConfigError(
            f"unknown type '{kind}' (expected one of: {known})", analyzer=name
        )

    if kind == "stop":
        return StopAnalyzerDefinition(name, _names(name, settings, "stopwords"))

    if kind == "standard":
        return StandardAnalyzerDefinition(
            name,
            _names(name, settings, "stopwords"),
            _int(name, settings, "max_token_length", 255),
        )

    if kind == "pattern":
        regex = _string(name, settings, "pattern")
        if regex is None:
            raise ConfigError("missing 'pattern'", analyzer=name)
        return PatternAnalyzerDefinition(
            name, regex, _bool(name, settings, "lowercase", True)
        )

    if kind == "snowball":
        return SnowballAnalyzerDefinition(
            name,
            _string(name, settings, "language", "English"),
            _names(name, settings, "stopwords"),
        )

    tokenizer_name = _string(name, settings, "tokenizer")
    if tokenizer_name is None:
        raise ConfigError("missing 'tokenizer'", analyzer=name)

    # Char filters run before tokenization, token filters after
    filters: list[AnalyzerFilter] = [
        char_filter(n) for n in _names(name, settings, "char_filter")
    ]
    filters.extend(token_filter(n) for n in _names(name, settings, "filter"))
    return CustomAnalyzerDefinition(name, tokenizer(tokenizer_name), tuple(filters))


def _analyzer_section(data: Mapping[str, Any]) -> Any:
    """Find the analyzer mapping in a full or partial settings document."""
    for prefix in ((), ("analysis",), ("settings", "analysis")):
        node: Any = data
        for key in prefix:
            node = node.get(key) if isinstance(node, Mapping) else None
        if isinstance(node, Mapping) and "analyzer" in node:
            return node["analyzer"]
    return None


def analysis_from_config(data: Mapping[str, Any]) -> AnalysisDefinition:
    """Create an analysis definition from a configuration mapping.

    The analyzers may sit at the top level under ``analyzer``, or be nested
    under ``analysis`` or ``settings.analysis``.
    """
    section = _analyzer_section(data)
    if section is None:
        raise ConfigError("No 'analyzer' section found in configuration")
    if not isinstance(section, Mapping):
        raise ConfigError("'analyzer' section must be a mapping")

    analyzers = []
    for name, settings in section.items():
        analyzer = analyzer_from_config(str(name), settings)
        logger.debug("Loaded %s analyzer '%s'", analyzer.kind, analyzer.name)
        analyzers.append(analyzer)

    return AnalysisDefinition(tuple(analyzers))


def load_analysis(path: Path | str) -> AnalysisDefinition:
    """Load an analysis definition from a YAML file."""
    return analysis_from_config(load_config(path))
