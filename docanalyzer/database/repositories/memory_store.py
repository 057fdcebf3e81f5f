from dataclasses import replace
from datetime import datetime, timezone

from docanalyzer.database.exceptions import DuplicateUsernameError
from docanalyzer.database.models import (
    AnalysisRecord,
    DocumentRecord,
    DocumentStatus,
    UserRecord,
)
from docanalyzer.database.repositories.base import BaseDocumentStore
from docanalyzer.database.schemas import NewAnalysis, NewDocument, NewUser


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _detached(analysis: AnalysisRecord) -> AnalysisRecord:
    """Copy the list fields so callers cannot edit the stored record."""
    return replace(
        analysis,
        warnings=list(analysis.warnings),
        recommendations=list(analysis.recommendations),
    )


class MemoryStore(BaseDocumentStore):
    """Process-local store for users, documents and analyses.

    Each instance owns its maps and id counters; nothing is shared between
    instances and nothing outlives the process.
    """

    def __init__(self) -> None:
        self._users: dict[int, UserRecord] = {}
        self._documents: dict[int, DocumentRecord] = {}
        self._analyses: dict[int, AnalysisRecord] = {}
        self._next_user_id = 1
        self._next_document_id = 1
        self._next_analysis_id = 1

    async def get_user(self, user_id: int) -> UserRecord | None:
        return self._users.get(user_id)

    async def get_user_by_username(self, username: str) -> UserRecord | None:
        return next(
            (user for user in self._users.values() if user.username == username),
            None,
        )

    async def create_user(self, new_user: NewUser) -> UserRecord:
        """Insert a user.

        Raises:
            DuplicateUsernameError: if the username is already taken.
        """
        if await self.get_user_by_username(new_user.username) is not None:
            raise DuplicateUsernameError(f"Username '{new_user.username}' already exists")
        user = UserRecord(id=self._next_user_id, **new_user.model_dump())
        self._next_user_id += 1
        self._users[user.id] = user
        return user

    async def create_document(self, new_document: NewDocument) -> DocumentRecord:
        document = DocumentRecord(
            id=self._next_document_id,
            uploaded_at=_utcnow(),
            status=DocumentStatus.PENDING.value,
            content="",
            **new_document.model_dump(),
        )
        self._next_document_id += 1
        self._documents[document.id] = document
        return document

    async def get_document(self, document_id: int) -> DocumentRecord | None:
        return self._documents.get(document_id)

    async def get_documents_by_user_id(self, user_id: int) -> list[DocumentRecord]:
        owned = [doc for doc in self._documents.values() if doc.user_id == user_id]
        return sorted(owned, key=lambda doc: (doc.uploaded_at, doc.id), reverse=True)

    async def update_document_status(
        self, document_id: int, status: str
    ) -> DocumentRecord | None:
        return self._replace_document(document_id, status=str(status))

    async def update_document_content(
        self, document_id: int, content: str
    ) -> DocumentRecord | None:
        return self._replace_document(document_id, content=content)

    async def create_analysis(self, new_analysis: NewAnalysis) -> AnalysisRecord:
        analysis = AnalysisRecord(
            id=self._next_analysis_id,
            created_at=_utcnow(),
            **new_analysis.model_dump(),
        )
        self._next_analysis_id += 1
        self._analyses[analysis.id] = analysis
        return _detached(analysis)

    async def get_analysis(self, analysis_id: int) -> AnalysisRecord | None:
        analysis = self._analyses.get(analysis_id)
        return None if analysis is None else _detached(analysis)

    async def get_analysis_by_document_id(
        self, document_id: int
    ) -> AnalysisRecord | None:
        matches = [a for a in self._analyses.values() if a.document_id == document_id]
        latest = max(matches, key=lambda a: a.id, default=None)
        return None if latest is None else _detached(latest)

    def _replace_document(self, document_id: int, **changes: object) -> DocumentRecord | None:
        document = self._documents.get(document_id)
        if document is None:
            return None
        updated = replace(document, **changes)
        self._documents[document_id] = updated
        return updated
