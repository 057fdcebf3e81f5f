from docanalyzer.analysis.exceptions import TextExtractionError
from docanalyzer.database.models import DocumentRecord
from docanalyzer.extraction.base import BaseTextExtractor


class PlaceholderTextExtractor(BaseTextExtractor):
    """Synthesizes stand-in text from the file name and declared type.

    The uploaded bytes are never read.
    """

    def extract(self, document: DocumentRecord) -> str:
        if not document.file_name:
            raise TextExtractionError(f"Document {document.id} has no file name")
        declared = "null" if document.document_type is None else document.document_type
        kind = (document.document_type or "").lower() or "document"
        return (
            f"Sample text for document {document.file_name} of type {declared}. \n"
            f"This document appears to be a legal {kind} \n"
            "under Indian law with some standard clauses and provisions."
        )
