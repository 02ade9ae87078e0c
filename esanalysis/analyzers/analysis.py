"""The ``analysis`` block of index settings."""

import logging
from collections import Counter

import msgspec

from ..builder import DocumentBuilder, JsonDocumentBuilder, json_builder
from .definitions import AnalyzerDefinition

logger = logging.getLogger(__name__)


class AnalysisDefinition(msgspec.Struct, frozen=True):
    """Analyzer definitions registered together in one settings request.

    Analyzer names must be unique within an index. The engine rejects
    duplicates, so they are reported here but still written out.
    """

    analyzers: tuple[AnalyzerDefinition, ...] = ()

    def __post_init__(self):
        if not isinstance(self.analyzers, tuple):
            msgspec.structs.force_setattr(self, "analyzers", tuple(self.analyzers))

    def with_analyzers(self, *analyzers: AnalyzerDefinition) -> "AnalysisDefinition":
        """Return a copy with the given analyzers appended."""
        return msgspec.structs.replace(self, analyzers=(*self.analyzers, *analyzers))

    def duplicate_names(self) -> list[str]:
        """Names used by more than one analyzer, in order of first repeat."""
        seen: Counter[str] = Counter()
        duplicates = []
        for analyzer in self.analyzers:
            seen[analyzer.name] += 1
            if seen[analyzer.name] == 2:
                duplicates.append(analyzer.name)
        return duplicates

    def build(
        self, source: DocumentBuilder | None = None
    ) -> JsonDocumentBuilder | None:
        """Write ``analysis.analyzer`` with every analyzer keyed by name.

        Args:
            source: Builder to write into. When omitted, a fresh document
                is created, filled, closed and returned.

        Returns:
            The completed document if no builder was given, otherwise None
        """
        if source is None:
            builder = json_builder()
            self.build(builder)
            return builder.end_object()

        for name in self.duplicate_names():
            logger.warning("Analyzer name '%s' is defined more than once", name)

        source.start_object("analysis")
        source.start_object("analyzer")
        for analyzer in self.analyzers:
            analyzer.build_with_name(source)
        source.end_object()
        source.end_object()
        return None

    @property
    def json(self) -> JsonDocumentBuilder:
        """The analysis block as a completed document."""
        return self.build()

    def __len__(self) -> int:
        return len(self.analyzers)
