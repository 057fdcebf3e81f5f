import pytest

from docanalyzer.database.exceptions import DuplicateUsernameError
from docanalyzer.database.models import DocumentStatus
from docanalyzer.database.repositories.memory_store import MemoryStore
from docanalyzer.database.schemas import NewAnalysis, NewDocument, NewUser


def _new_document(user_id: int = 1, file_name: str = "deed.pdf") -> NewDocument:
    return NewDocument(
        user_id=user_id,
        file_name=file_name,
        file_type="application/pdf",
        file_size=512,
        document_type="Deed",
    )


class TestUsers:
    @pytest.mark.asyncio
    async def test_assigns_incrementing_ids(self) -> None:
        store = MemoryStore()

        first = await store.create_user(NewUser(username="asha"))
        second = await store.create_user(NewUser(username="ravi", email="r@example.com"))

        assert (first.id, second.id) == (1, 2)
        assert second.email == "r@example.com"

    @pytest.mark.asyncio
    async def test_finds_user_by_username(self) -> None:
        store = MemoryStore()
        user = await store.create_user(NewUser(username="asha"))

        assert await store.get_user_by_username("asha") == user
        assert await store.get_user_by_username("nobody") is None
        assert await store.get_user(user.id) == user

    @pytest.mark.asyncio
    async def test_rejects_duplicate_username(self) -> None:
        store = MemoryStore()
        await store.create_user(NewUser(username="asha"))

        with pytest.raises(DuplicateUsernameError, match="asha"):
            await store.create_user(NewUser(username="asha"))


class TestDocuments:
    @pytest.mark.asyncio
    async def test_create_sets_pending_status_and_empty_content(self) -> None:
        store = MemoryStore()

        document = await store.create_document(_new_document())

        assert document.id == 1
        assert document.status == DocumentStatus.PENDING
        assert document.content == ""
        assert document.document_type == "Deed"
        assert document.uploaded_at is not None
        assert await store.get_document(1) == document

    @pytest.mark.asyncio
    async def test_update_status_returns_new_record(self) -> None:
        store = MemoryStore()
        document = await store.create_document(_new_document())

        updated = await store.update_document_status(document.id, "valid")

        assert updated is not None
        assert updated.status == "valid"
        assert document.status == "pending"
        assert (await store.get_document(document.id)).status == "valid"  # type: ignore[union-attr]

    @pytest.mark.asyncio
    async def test_update_unknown_document_returns_none(self) -> None:
        store = MemoryStore()

        assert await store.update_document_status(99, "valid") is None
        assert await store.update_document_content(99, "abc") is None

    @pytest.mark.asyncio
    async def test_update_content(self) -> None:
        store = MemoryStore()
        document = await store.create_document(_new_document())

        updated = await store.update_document_content(document.id, "SGVsbG8=")

        assert updated is not None
        assert updated.content == "SGVsbG8="
        assert updated.status == "pending"

    @pytest.mark.asyncio
    async def test_lists_user_documents_newest_first(self) -> None:
        store = MemoryStore()
        older = await store.create_document(_new_document(file_name="a.pdf"))
        await store.create_document(_new_document(user_id=2, file_name="other.pdf"))
        newer = await store.create_document(_new_document(file_name="b.pdf"))

        documents = await store.get_documents_by_user_id(1)

        assert [doc.id for doc in documents] == [newer.id, older.id]

    @pytest.mark.asyncio
    async def test_separate_stores_do_not_share_state(self) -> None:
        first = MemoryStore()
        second = MemoryStore()
        await first.create_document(_new_document())

        assert await second.get_document(1) is None
        assert (await second.create_document(_new_document())).id == 1


class TestAnalyses:
    @pytest.mark.asyncio
    async def test_create_always_inserts(self) -> None:
        store = MemoryStore()

        placeholder = await store.create_analysis(
            NewAnalysis(document_id=1, compliance_status="processing")
        )
        final = await store.create_analysis(
            NewAnalysis(document_id=1, is_valid=True, compliance_status="compliant")
        )

        assert (placeholder.id, final.id) == (1, 2)
        assert await store.get_analysis(1) == placeholder
        assert await store.get_analysis(2) == final

    @pytest.mark.asyncio
    async def test_lookup_by_document_returns_latest(self) -> None:
        store = MemoryStore()
        await store.create_analysis(NewAnalysis(document_id=1, compliance_status="processing"))
        await store.create_analysis(NewAnalysis(document_id=2, compliance_status="processing"))
        latest = await store.create_analysis(
            NewAnalysis(document_id=1, compliance_status="compliant")
        )

        assert await store.get_analysis_by_document_id(1) == latest

    @pytest.mark.asyncio
    async def test_lookup_by_unknown_document_returns_none(self) -> None:
        assert await MemoryStore().get_analysis_by_document_id(5) is None

    @pytest.mark.asyncio
    async def test_defaults(self) -> None:
        analysis = await MemoryStore().create_analysis(NewAnalysis(document_id=3))

        assert analysis.is_valid is None
        assert analysis.issues_count == 0
        assert analysis.warnings == []
        assert analysis.recommendations == []
        assert analysis.created_at is not None

    @pytest.mark.asyncio
    async def test_returned_lists_do_not_alias_stored_record(self) -> None:
        store = MemoryStore()
        created = await store.create_analysis(
            NewAnalysis(document_id=1, warnings=["w1"], recommendations=["r1"])
        )

        created.warnings.append("tampered")
        fetched = await store.get_analysis(created.id)
        assert fetched is not None
        fetched.recommendations.clear()

        latest = await store.get_analysis_by_document_id(1)
        assert latest is not None
        assert latest.warnings == ["w1"]
        assert latest.recommendations == ["r1"]
