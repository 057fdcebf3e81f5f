from dataclasses import dataclass

from docanalyzer.database.models import AnalysisRecord, DocumentRecord


@dataclass(frozen=True)
class UploadedFile:
    """A file as received from the caller, before anything is stored."""

    file_name: str
    mime_type: str
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class UploadOutcome:
    document: DocumentRecord
    analysis: AnalysisRecord


@dataclass(frozen=True)
class DocumentWithAnalysis:
    document: DocumentRecord
    analysis: AnalysisRecord | None
