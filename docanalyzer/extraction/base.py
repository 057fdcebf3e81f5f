from abc import ABC, abstractmethod

from docanalyzer.database.models import DocumentRecord


class BaseTextExtractor(ABC):
    """Contract for all document text extraction adapters."""

    @abstractmethod
    def extract(self, document: DocumentRecord) -> str:
        """Produce the source text the classifier runs over.

        Raises:
            TextExtractionError: if no text can be produced for the document.
        """
