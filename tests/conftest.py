import io
from collections.abc import Callable
from datetime import datetime, timezone

import pytest
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from docanalyzer.database.models import DocumentRecord


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF that reads like a legal document."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.drawString(72, 760, "DEED OF SALE")
    c.drawString(72, 740, "This deed is executed on stamp paper of the prescribed value.")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def make_document() -> Callable[..., DocumentRecord]:
    """Factory for DocumentRecord instances with sensible defaults."""

    def _make(**overrides: object) -> DocumentRecord:
        fields: dict[str, object] = {
            "id": 1,
            "user_id": 10,
            "file_name": "lease.pdf",
            "file_type": "application/pdf",
            "file_size": 2048,
            "document_type": None,
            "uploaded_at": datetime(2024, 1, 1, tzinfo=timezone.utc),
        }
        fields.update(overrides)
        return DocumentRecord(**fields)  # type: ignore[arg-type]

    return _make
