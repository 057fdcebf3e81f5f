import base64

from pydantic import ValidationError

from docanalyzer.analysis.analyzer import DocumentAnalyzer, build_document_analyzer
from docanalyzer.config.settings import Settings
from docanalyzer.database.exceptions import DocumentNotFoundError, UserNotFoundError
from docanalyzer.database.repositories.base import BaseDocumentStore
from docanalyzer.database.schemas import NewDocument
from docanalyzer.logging.logger import Log
from docanalyzer.uploads.exceptions import AccessDeniedError, InvalidDocumentError, UploadError
from docanalyzer.uploads.models import DocumentWithAnalysis, UploadedFile, UploadOutcome
from docanalyzer.uploads.validation import UploadValidator, infer_document_type


class UploadService:
    """Stores uploaded documents, analyses them and serves them back to owners."""

    def __init__(
        self,
        store: BaseDocumentStore,
        analyzer: DocumentAnalyzer,
        validator: UploadValidator,
    ) -> None:
        self._store = store
        self._analyzer = analyzer
        self._validator = validator

    async def upload(
        self,
        user_id: int,
        upload: UploadedFile | None,
        document_type: str | None = None,
    ) -> UploadOutcome:
        """Validate, store and analyse one uploaded file.

        ``document_type`` overrides the type guessed from the file name.

        Raises:
            UserNotFoundError: if the user does not exist.
            UploadError: if the file or its metadata is rejected.
        """
        if await self._store.get_user(user_id) is None:
            raise UserNotFoundError(f"User {user_id} not found")
        try:
            upload = self._validator.validate(upload)
        except UploadError as exc:
            Log.warning(f"Upload rejected for user {user_id}: {exc}")
            raise

        try:
            new_document = NewDocument(
                user_id=user_id,
                file_name=upload.file_name,
                file_type=upload.mime_type,
                file_size=upload.size,
                document_type=document_type or infer_document_type(upload.file_name),
            )
        except ValidationError as exc:
            raise InvalidDocumentError(str(exc)) from exc

        document = await self._store.create_document(new_document)
        Log.info(
            f"Stored document {document.id} '{document.file_name}' "
            f"({document.file_size} bytes) for user {user_id}"
        )
        await self._store.update_document_content(
            document.id, base64.b64encode(upload.content).decode("ascii")
        )

        analysis = await self._analyzer.analyze(document)
        return UploadOutcome(document=document, analysis=analysis)

    async def list_documents(self, user_id: int) -> list[DocumentWithAnalysis]:
        """Return the user's documents, newest first, each with its latest analysis."""
        documents = await self._store.get_documents_by_user_id(user_id)
        results = [
            DocumentWithAnalysis(
                document=doc,
                analysis=await self._store.get_analysis_by_document_id(doc.id),
            )
            for doc in documents
        ]
        Log.debug(f"Fetched {len(results)} documents with analysis for user {user_id}")
        return results

    async def get_document(self, user_id: int, document_id: int) -> DocumentWithAnalysis:
        """Fetch one document for its owner.

        Raises:
            DocumentNotFoundError: if no document with this ID exists.
            AccessDeniedError: if the document belongs to another user.
        """
        document = await self._store.get_document(document_id)
        if document is None:
            raise DocumentNotFoundError(f"Document {document_id} not found")
        if document.user_id != user_id:
            raise AccessDeniedError(f"Access denied to document {document_id}")
        analysis = await self._store.get_analysis_by_document_id(document.id)
        return DocumentWithAnalysis(document=document, analysis=analysis)


def build_upload_service(settings: Settings, store: BaseDocumentStore) -> UploadService:
    """Build an UploadService with all required collaborators."""
    return UploadService(
        store=store,
        analyzer=build_document_analyzer(settings, store),
        validator=UploadValidator(
            allowed_file_types=settings.allowed_file_types,
            max_size_bytes=settings.max_upload_size_bytes,
        ),
    )
