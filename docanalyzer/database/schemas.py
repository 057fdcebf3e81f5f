"""Insert payloads accepted by the document store."""

from pydantic import BaseModel, ConfigDict, Field


class NewUser(BaseModel):
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    username: str = Field(min_length=1)
    name: str | None = None
    email: str | None = None


class NewDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_id: int
    file_name: str = Field(min_length=1)
    file_type: str = Field(min_length=1)
    file_size: int = Field(ge=0)
    document_type: str | None = None


class NewAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    document_id: int
    is_valid: bool | None = None
    compliance_status: str | None = None
    issues_count: int = Field(default=0, ge=0)
    warnings: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    analysis_data: str | None = None
