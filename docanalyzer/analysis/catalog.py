"""Fixed report copy: per-category findings, frameworks and compliance blocks."""

from docanalyzer.analysis.models import (
    AnalysisDetails,
    CategoryProfile,
    DocumentCategory,
    InvalidComplianceDetails,
    ValidComplianceDetails,
)

LEGAL_FRAMEWORKS: tuple[str, ...] = (
    "Registration Act, 1908",
    "Indian Stamp Act",
    "Transfer of Property Act, 1882",
    "Indian Contract Act, 1872",
)

PROPERTY_LEGAL_FRAMEWORKS: tuple[str, ...] = (
    "Real Estate (Regulation and Development) Act, 2016",
    "Indian Registration Act, 1908 (property specific sections)",
)

VALID_ANALYSIS_DETAILS = AnalysisDetails(
    language_validity=True,
    clause_completeness_score=0.85,
    legal_terminology_accuracy=0.9,
)

INVALID_ANALYSIS_DETAILS = AnalysisDetails(
    language_validity=True,
    clause_completeness_score=0.45,
    legal_terminology_accuracy=0.6,
)

VALID_COMPLIANCE_DETAILS = ValidComplianceDetails(
    validity_period="5 years from date of execution",
    registration_required=True,
    stamp_duty_paid=True,
    proper_witness_attestation=True,
    notarization_status="Complete",
    government_department_approval="Verified",
    standards_compliance=(
        "Ministry of Law and Justice - Document Standards 2021",
        "Digital India Initiative - E-Document Guidelines",
        "Indian Registration Act Requirements",
    ),
)

INVALID_COMPLIANCE_DETAILS = InvalidComplianceDetails(
    missing_elements=(
        "Proper digital signatures",
        "Mandatory disclosure clauses",
        "Required government stamps",
        "Authentication watermarks",
    ),
    non_compliance_risks=(
        "Document may not be legally enforceable",
        "Could be rejected by government authorities",
        "May face challenges in court proceedings",
        "Potential penalties for non-compliance",
    ),
)

PROPERTY_MISSING_ELEMENT = "RERA registration details"
PROPERTY_NON_COMPLIANCE_RISK = "Potential boundary disputes"

CATEGORY_PROFILES: dict[DocumentCategory, CategoryProfile] = {
    DocumentCategory.AGREEMENT: CategoryProfile(
        issues=(),
        warnings=("Recommended: Add explicit clause for maintenance responsibilities",),
        recommendations=(
            "Specific clause regarding security deposit return timeline",
            "Clear definition of 'normal wear and tear'",
            "Updated reference to recent Supreme Court judgment on rental caps",
        ),
    ),
    DocumentCategory.DEED: CategoryProfile(
        issues=(),
        warnings=("Consider adding more specific property demarcation details",),
        recommendations=(
            "Include latest amendments to the Registration Act, 1908",
            "Add clause related to digital signature validity",
            "Reference the most recent stamp duty regulations",
        ),
    ),
    DocumentCategory.INVOICE: CategoryProfile(
        issues=(),
        warnings=("GST details should be more prominently displayed",),
        recommendations=(
            "Include HSN/SAC codes for all items",
            "Add payment terms with reference to Late Payment Act",
            "Include cancellation and refund policy",
        ),
    ),
    DocumentCategory.BOND_PAPER: CategoryProfile(
        issues=(),
        warnings=("Verify stamp paper value matches transaction amount requirements",),
        recommendations=(
            "Include notarization details with registration number",
            "Add proper witness attestation with ID details",
            "Verify with the Indian Stamp Act for the appropriate stamp duty value",
            "Include e-stamping certificate details if using e-stamped paper",
        ),
    ),
    DocumentCategory.SALE_DEED: CategoryProfile(
        issues=(),
        warnings=("Ensure property boundaries match those in land records",),
        recommendations=(
            "Verify that stamp duty paid corresponds to current market value",
            "Include complete chain of title documents as annexures",
            "Ensure property tax receipts are attached and up to date",
            "Include all required witness signatures with their verified ID details",
            "Register with Sub-Registrar Office within the statutory time limit",
        ),
    ),
    DocumentCategory.PROPERTY_DOCUMENT: CategoryProfile(
        issues=(),
        warnings=("Property boundaries should be clearly defined with survey numbers",),
        recommendations=(
            "Include verification of property title from local authorities",
            "Ensure all co-owners have signed with proper ID verification",
            "Reference latest RERA regulations if applicable",
            "Include clear encumbrance certificate details",
            "Verify property tax payment status and include documentation",
        ),
    ),
    DocumentCategory.UNKNOWN: CategoryProfile(
        issues=(
            "Document type cannot be determined",
            "Missing standard legal clauses",
        ),
        warnings=(
            "Document may not be legally valid",
            "Format does not match any standard template",
        ),
        recommendations=(
            "Use a standard legal template",
            "Consult with a legal professional",
            "Add proper identification and authentication elements",
        ),
    ),
}
