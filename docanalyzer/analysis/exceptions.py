class AnalysisError(Exception):
    """Base exception for failures while analysing a document."""


class TextExtractionError(AnalysisError):
    """Raised when source text cannot be produced for a document."""
