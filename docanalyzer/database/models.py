from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum


class DocumentStatus(StrEnum):
    PENDING = "pending"
    VALID = "valid"
    INVALID = "invalid"
    ERROR = "error"


@dataclass(frozen=True)
class UserRecord:
    """Represents a row from the users map."""

    id: int
    username: str
    name: str | None = None
    email: str | None = None


@dataclass(frozen=True)
class DocumentRecord:
    """Represents a row from the documents map."""

    id: int
    user_id: int
    file_name: str
    file_type: str
    file_size: int
    document_type: str | None
    uploaded_at: datetime
    status: str = DocumentStatus.PENDING.value
    content: str = ""


@dataclass(frozen=True)
class AnalysisRecord:
    """Represents a row from the analyses map.

    ``analysis_data`` is the JSON-serialized report (or an error marker);
    callers decode it themselves.
    """

    id: int
    document_id: int
    created_at: datetime
    is_valid: bool | None = None
    compliance_status: str | None = None
    issues_count: int = 0
    warnings: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
    analysis_data: str | None = None
