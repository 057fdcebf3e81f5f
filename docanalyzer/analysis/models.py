from dataclasses import dataclass
from enum import StrEnum


class DocumentCategory(StrEnum):
    """The closed set of labels a document can be classified into."""

    AGREEMENT = "Agreement"
    DEED = "Deed"
    INVOICE = "Invoice"
    BOND_PAPER = "Bond Paper"
    SALE_DEED = "Sale Deed"
    PROPERTY_DOCUMENT = "Property Document"
    UNKNOWN = "Unknown"

    @classmethod
    def from_label(cls, label: str | None) -> "DocumentCategory":
        """Match a free-form label case-insensitively, falling back to UNKNOWN."""
        if not label:
            return cls.UNKNOWN
        wanted = label.strip().lower()
        for category in cls:
            if category.value.lower() == wanted:
                return category
        return cls.UNKNOWN


class ComplianceStatus(StrEnum):
    COMPLIANT = "compliant"
    NON_COMPLIANT = "non-compliant"
    PROCESSING = "processing"
    ERROR = "error"


@dataclass(frozen=True)
class CategoryProfile:
    """Fixed report copy for one category."""

    issues: tuple[str, ...]
    warnings: tuple[str, ...]
    recommendations: tuple[str, ...]


@dataclass(frozen=True)
class AnalysisDetails:
    language_validity: bool
    clause_completeness_score: float
    legal_terminology_accuracy: float


@dataclass(frozen=True)
class ValidComplianceDetails:
    validity_period: str
    registration_required: bool
    stamp_duty_paid: bool
    proper_witness_attestation: bool
    notarization_status: str
    government_department_approval: str
    standards_compliance: tuple[str, ...]
    rera_compliance: str | None = None
    boundary_verification: str | None = None
    encumbrance_status: str | None = None


@dataclass(frozen=True)
class InvalidComplianceDetails:
    missing_elements: tuple[str, ...]
    non_compliance_risks: tuple[str, ...]


ComplianceDetails = ValidComplianceDetails | InvalidComplianceDetails


@dataclass(frozen=True)
class ClassificationResult:
    """Outcome of classifying one document, optionally with compliance details."""

    document_type: DocumentCategory
    is_valid: bool
    compliance_status: ComplianceStatus
    issues: tuple[str, ...]
    warnings: tuple[str, ...]
    recommendations: tuple[str, ...]
    legal_frameworks: tuple[str, ...]
    analysis_details: AnalysisDetails
    compliance_details: ComplianceDetails | None = None
