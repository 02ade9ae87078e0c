"""Exception classes for analysis settings construction."""


class AnalysisError(Exception):
    """Base exception for analysis-settings errors."""

    pass


class BuilderStateError(AnalysisError):
    """Raised when a document builder is used out of order."""

    def __init__(self, message: str):
        """Initialize with message."""
        super().__init__(message)


class ConfigError(AnalysisError, ValueError):
    """Raised when an analysis configuration cannot be loaded."""

    def __init__(self, message: str, analyzer: str | None = None):
        """Initialize with message and the offending analyzer name."""
        self.analyzer = analyzer
        if analyzer:
            message = f"Analyzer '{analyzer}': {message}"
        super().__init__(message)
