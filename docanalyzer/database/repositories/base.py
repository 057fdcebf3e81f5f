from abc import ABC, abstractmethod

from docanalyzer.database.models import AnalysisRecord, DocumentRecord, UserRecord
from docanalyzer.database.schemas import NewAnalysis, NewDocument, NewUser


class BaseDocumentStore(ABC):
    """Contract for the storage collaborator used by uploads and analysis."""

    @abstractmethod
    async def get_user(self, user_id: int) -> UserRecord | None: ...

    @abstractmethod
    async def get_user_by_username(self, username: str) -> UserRecord | None: ...

    @abstractmethod
    async def create_user(self, new_user: NewUser) -> UserRecord: ...

    @abstractmethod
    async def create_document(self, new_document: NewDocument) -> DocumentRecord:
        """Insert a document with status ``pending`` and empty content."""

    @abstractmethod
    async def get_document(self, document_id: int) -> DocumentRecord | None: ...

    @abstractmethod
    async def get_documents_by_user_id(self, user_id: int) -> list[DocumentRecord]:
        """Return the user's documents, most recently uploaded first."""

    @abstractmethod
    async def update_document_status(
        self, document_id: int, status: str
    ) -> DocumentRecord | None:
        """Return the updated document, or None if the id is unknown."""

    @abstractmethod
    async def update_document_content(
        self, document_id: int, content: str
    ) -> DocumentRecord | None: ...

    @abstractmethod
    async def create_analysis(self, new_analysis: NewAnalysis) -> AnalysisRecord:
        """Always insert a new record; existing analyses are never modified."""

    @abstractmethod
    async def get_analysis(self, analysis_id: int) -> AnalysisRecord | None: ...

    @abstractmethod
    async def get_analysis_by_document_id(
        self, document_id: int
    ) -> AnalysisRecord | None:
        """Return the most recently created analysis for the document."""
