from dataclasses import replace

from docanalyzer.analysis.catalog import (
    INVALID_COMPLIANCE_DETAILS,
    PROPERTY_LEGAL_FRAMEWORKS,
    PROPERTY_MISSING_ELEMENT,
    PROPERTY_NON_COMPLIANCE_RISK,
    VALID_COMPLIANCE_DETAILS,
)
from docanalyzer.analysis.models import (
    ClassificationResult,
    ComplianceDetails,
    DocumentCategory,
    InvalidComplianceDetails,
    ValidComplianceDetails,
)


class ReportAssembler:
    """Attaches compliance details to a classification result."""

    def assemble(self, result: ClassificationResult) -> ClassificationResult:
        """Return a copy of ``result`` with exactly one compliance block set.

        Property documents additionally get the property frameworks and the
        property-specific fields of whichever block was chosen.
        """
        details: ComplianceDetails = (
            VALID_COMPLIANCE_DETAILS if result.is_valid else INVALID_COMPLIANCE_DETAILS
        )
        legal_frameworks = result.legal_frameworks

        if result.document_type is DocumentCategory.PROPERTY_DOCUMENT:
            legal_frameworks = legal_frameworks + PROPERTY_LEGAL_FRAMEWORKS
            details = self._with_property_details(details)

        return replace(
            result,
            legal_frameworks=legal_frameworks,
            compliance_details=details,
        )

    def _with_property_details(self, details: ComplianceDetails) -> ComplianceDetails:
        if isinstance(details, ValidComplianceDetails):
            return replace(
                details,
                rera_compliance="Verified",
                boundary_verification="Completed",
                encumbrance_status="Clear",
            )
        return InvalidComplianceDetails(
            missing_elements=details.missing_elements + (PROPERTY_MISSING_ELEMENT,),
            non_compliance_risks=details.non_compliance_risks
            + (PROPERTY_NON_COMPLIANCE_RISK,),
        )
