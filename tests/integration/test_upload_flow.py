import json

import pytest

from docanalyzer.config.settings import Settings
from docanalyzer.database.repositories.memory_store import MemoryStore
from docanalyzer.database.schemas import NewUser
from docanalyzer.uploads.exceptions import FileTooLargeError
from docanalyzer.uploads.models import UploadedFile
from docanalyzer.uploads.service import build_upload_service

PDF = "application/pdf"


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    monkeypatch.setenv("MAX_UPLOAD_SIZE_BYTES", "4096")
    return Settings()


class TestUploadFlow:
    @pytest.mark.asyncio
    async def test_upload_analyse_and_read_back(
        self, settings: Settings, sample_pdf_bytes: bytes
    ) -> None:
        store = MemoryStore()
        user = await store.create_user(NewUser(username="asha"))
        service = build_upload_service(settings, store)

        outcome = await service.upload(
            user.id, UploadedFile(file_name="sale_deed.pdf", mime_type=PDF, content=sample_pdf_bytes)
        )

        assert outcome.document.status == "pending"
        assert outcome.analysis.compliance_status == "compliant"
        fetched = await service.get_document(user.id, outcome.document.id)
        assert fetched.document.status == "valid"
        assert fetched.document.content != ""
        assert fetched.analysis == outcome.analysis
        data = json.loads(outcome.analysis.analysis_data or "")
        assert data["documentType"] == "Sale Deed"
        assert data["legalFrameworks"] == [
            "Registration Act, 1908",
            "Indian Stamp Act",
            "Transfer of Property Act, 1882",
            "Indian Contract Act, 1872",
        ]

    @pytest.mark.asyncio
    async def test_listing_shows_every_upload(
        self, settings: Settings, sample_pdf_bytes: bytes
    ) -> None:
        store = MemoryStore()
        user = await store.create_user(NewUser(username="asha"))
        service = build_upload_service(settings, store)
        names = ["invoice_7.pdf", "house_agreement.pdf", "scan.pdf"]

        for name in names:
            await service.upload(
                user.id, UploadedFile(file_name=name, mime_type=PDF, content=sample_pdf_bytes)
            )

        listing = await service.list_documents(user.id)
        statuses = {item.document.file_name: item.document.status for item in listing}
        types = {
            item.document.file_name: json.loads(item.analysis.analysis_data or "")["documentType"]
            for item in listing
            if item.analysis is not None
        }
        assert [item.document.file_name for item in listing] == list(reversed(names))
        assert statuses == {
            "invoice_7.pdf": "valid",
            "house_agreement.pdf": "valid",
            "scan.pdf": "invalid",
        }
        assert types == {
            "invoice_7.pdf": "Invoice",
            "house_agreement.pdf": "Property Document",
            "scan.pdf": "Unknown",
        }

    @pytest.mark.asyncio
    async def test_oversized_upload_is_rejected(self, settings: Settings) -> None:
        store = MemoryStore()
        user = await store.create_user(NewUser(username="asha"))
        service = build_upload_service(settings, store)

        with pytest.raises(FileTooLargeError):
            await service.upload(
                user.id, UploadedFile(file_name="big.pdf", mime_type=PDF, content=b"x" * 5000)
            )

        assert await store.get_documents_by_user_id(user.id) == []
