"""Analyzer definitions for index analysis settings.

Each definition is an immutable value describing one analyzer registered
under ``analysis.analyzer.<name>``. A definition writes its ``type`` and
type-specific fields into a DocumentBuilder; wrapping them in an object
keyed by the analyzer name is left to build_with_name().

The "setter" methods never mutate: they return a copy with one field
changed, so a definition can be shared and serialized freely.

Key components:
- AnalyzerDefinition: common base and build entry points
- StopAnalyzerDefinition, StandardAnalyzerDefinition,
  PatternAnalyzerDefinition, SnowballAnalyzerDefinition: built-in types
- CustomAnalyzerDefinition: tokenizer plus token/char filters
"""

from collections.abc import Iterable
from typing import ClassVar

import msgspec

from ..builder import DocumentBuilder, JsonDocumentBuilder, json_builder
from .components import AnalyzerFilter, CharFilter, TokenFilter, Tokenizer


def _word_list(
    stopwords: Iterable[str] | str, rest: tuple[str, ...]
) -> tuple[str, ...]:
    """Collect stopwords given either as an iterable or as separate strings."""
    if isinstance(stopwords, str):
        return (stopwords, *rest)
    return (*stopwords, *rest)


def _freeze_stopwords(definition: "AnalyzerDefinition") -> None:
    """Copy caller-supplied stopwords into a tuple owned by the definition."""
    if not isinstance(definition.stopwords, tuple):
        msgspec.structs.force_setattr(
            definition, "stopwords", _word_list(definition.stopwords, ())
        )


class AnalyzerDefinition(msgspec.Struct, frozen=True):
    """Base class for analyzers that have custom parameters set.

    Subclasses set ``kind`` to the analyzer type literal and implement
    build_fields().
    """

    name: str

    kind: ClassVar[str] = ""

    def build_fields(self, source: DocumentBuilder) -> None:
        """Write this analyzer's fields, without an enclosing object."""
        raise NotImplementedError(
            f"{type(self).__name__} must implement build_fields()"
        )

    def build(
        self, source: DocumentBuilder | None = None
    ) -> JsonDocumentBuilder | None:
        """Write this analyzer's fields.

        Args:
            source: Builder to write into. When omitted, a fresh document
                is created, filled, closed and returned.

        Returns:
            The completed document if no builder was given, otherwise None
        """
        if source is not None:
            self.build_fields(source)
            return None

        builder = json_builder()
        self.build_fields(builder)
        return builder.end_object()

    def build_with_name(
        self, source: DocumentBuilder | None = None
    ) -> JsonDocumentBuilder | None:
        """Write this analyzer as an object keyed by its name.

        Args:
            source: Builder to write into. When omitted, a fresh document
                is created, filled, closed and returned.

        Returns:
            The completed document if no builder was given, otherwise None
        """
        if source is None:
            builder = json_builder()
            self.build_with_name(builder)
            return builder.end_object()

        source.start_object(self.name)
        self.build_fields(source)
        source.end_object()
        return None

    @property
    def json(self) -> JsonDocumentBuilder:
        """This analyzer's fields as a completed document."""
        return self.build()


class StopAnalyzerDefinition(AnalyzerDefinition, frozen=True):
    """Analyzer removing stopwords after lowercase letter tokenization."""

    stopwords: tuple[str, ...] = ()

    kind: ClassVar[str] = "stop"

    def __post_init__(self):
        _freeze_stopwords(self)

    def build_fields(self, source: DocumentBuilder) -> None:
        source.field("type", self.kind)
        source.field("stopwords", self.stopwords)

    def with_stopwords(
        self, stopwords: Iterable[str] | str, *rest: str
    ) -> "StopAnalyzerDefinition":
        """Return a copy with the given stopwords."""
        return msgspec.structs.replace(self, stopwords=_word_list(stopwords, rest))


class StandardAnalyzerDefinition(AnalyzerDefinition, frozen=True):
    """Standard tokenizer analyzer with stopwords and a token length cap."""

    stopwords: tuple[str, ...] = ()
    max_token_length: int = 255

    kind: ClassVar[str] = "standard"

    def __post_init__(self):
        _freeze_stopwords(self)

    def build_fields(self, source: DocumentBuilder) -> None:
        source.field("type", self.kind)
        source.field("stopwords", self.stopwords)
        source.field("max_token_length", self.max_token_length)

    def with_stopwords(
        self, stopwords: Iterable[str] | str, *rest: str
    ) -> "StandardAnalyzerDefinition":
        """Return a copy with the given stopwords."""
        return msgspec.structs.replace(self, stopwords=_word_list(stopwords, rest))

    def with_max_token_length(
        self, max_token_length: int
    ) -> "StandardAnalyzerDefinition":
        """Return a copy with a different maximum token length."""
        return msgspec.structs.replace(self, max_token_length=max_token_length)


class PatternAnalyzerDefinition(AnalyzerDefinition, frozen=True):
    """Analyzer splitting text on a regular expression.

    The regex is emitted verbatim; only JSON string escaping is applied.
    """

    regex: str
    lowercase: bool = True

    kind: ClassVar[str] = "pattern"

    def build_fields(self, source: DocumentBuilder) -> None:
        source.field("type", self.kind)
        source.field("lowercase", self.lowercase)
        source.field("pattern", self.regex)

    def with_lowercase(self, lowercase: bool) -> "PatternAnalyzerDefinition":
        """Return a copy with lowercasing switched on or off."""
        return msgspec.structs.replace(self, lowercase=lowercase)


class SnowballAnalyzerDefinition(AnalyzerDefinition, frozen=True):
    """Snowball stemming analyzer for a given language.

    Unlike the stop and standard analyzers, stopwords are left out of the
    output entirely when none are set, so the engine applies its own
    language defaults.
    """

    language: str = "English"
    stopwords: tuple[str, ...] = ()

    kind: ClassVar[str] = "snowball"

    def __post_init__(self):
        _freeze_stopwords(self)

    def build_fields(self, source: DocumentBuilder) -> None:
        source.field("type", self.kind)
        source.field("language", self.language)
        if self.stopwords:
            source.field("stopwords", self.stopwords)

    def with_language(self, language: str) -> "SnowballAnalyzerDefinition":
        """Return a copy for a different language."""
        return msgspec.structs.replace(self, language=language)

    def with_stopwords(
        self, stopwords: Iterable[str] | str, *rest: str
    ) -> "SnowballAnalyzerDefinition":
        """Return a copy with the given stopwords."""
        return msgspec.structs.replace(self, stopwords=_word_list(stopwords, rest))


class CustomAnalyzerDefinition(AnalyzerDefinition, frozen=True):
    """Analyzer assembled from a tokenizer and a list of filters.

    Token filters and char filters share one ordered list; they are split
    into ``filter`` and ``char_filter`` on output, each keeping its
    relative order. Empty groups are omitted.
    """

    tokenizer: Tokenizer
    filters: tuple[AnalyzerFilter, ...] = ()

    kind: ClassVar[str] = "custom"

    def __post_init__(self):
        if not isinstance(self.filters, tuple):
            msgspec.structs.force_setattr(self, "filters", tuple(self.filters))

    @classmethod
    def of(
        cls,
        name: str,
        tokenizer: Tokenizer,
        first: AnalyzerFilter,
        *rest: AnalyzerFilter,
    ) -> "CustomAnalyzerDefinition":
        """Create a custom analyzer with at least one filter."""
        return cls(name, tokenizer, (first, *rest))

    @property
    def token_filters(self) -> list[TokenFilter]:
        """Token filters in their original order."""
        return [f for f in self.filters if isinstance(f, TokenFilter)]

    @property
    def char_filters(self) -> list[CharFilter]:
        """Char filters in their original order."""
        return [f for f in self.filters if isinstance(f, CharFilter)]

    def build_fields(self, source: DocumentBuilder) -> None:
        source.field("type", self.kind)
        source.field("tokenizer", self.tokenizer.name)

        token_filters = self.token_filters
        char_filters = self.char_filters
        if token_filters:
            source.field("filter", [f.name for f in token_filters])
        if char_filters:
            source.field("char_filter", [f.name for f in char_filters])

    def with_filters(
        self, filters: Iterable[AnalyzerFilter]
    ) -> "CustomAnalyzerDefinition":
        """Return a copy with the filter list replaced."""
        return msgspec.structs.replace(self, filters=tuple(filters))

    def add_filter(self, filter: AnalyzerFilter) -> "CustomAnalyzerDefinition":
        """Return a copy with one more filter appended."""
        return msgspec.structs.replace(self, filters=(*self.filters, filter))
