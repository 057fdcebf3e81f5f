import json
from typing import Any

from docanalyzer.analysis.models import (
    AnalysisDetails,
    ClassificationResult,
    ComplianceDetails,
    ValidComplianceDetails,
)

ERROR_PAYLOAD: dict[str, str] = {"error": "Analysis failed"}


class ReportSerializer:
    """Converts classification results to the camelCase analysis-data payload."""

    def to_payload(self, result: ClassificationResult) -> dict[str, Any]:
        """Build a JSON-ready dict.

        ``complianceDetails`` is only present once the result has been
        assembled.
        """
        payload: dict[str, Any] = {
            "isValid": result.is_valid,
            "complianceStatus": str(result.compliance_status),
            "issues": list(result.issues),
            "warnings": list(result.warnings),
            "recommendations": list(result.recommendations),
            "documentType": str(result.document_type),
            "legalFrameworks": list(result.legal_frameworks),
            "analysisDetails": self._details_to_dict(result.analysis_details),
        }
        if result.compliance_details is not None:
            payload["complianceDetails"] = self._compliance_to_dict(
                result.compliance_details
            )
        return payload

    def to_json(self, result: ClassificationResult) -> str:
        return dump_payload(self.to_payload(result))

    def _details_to_dict(self, details: AnalysisDetails) -> dict[str, Any]:
        return {
            "languageValidity": details.language_validity,
            "clauseCompletenessScore": details.clause_completeness_score,
            "legalTerminologyAccuracy": details.legal_terminology_accuracy,
        }

    def _compliance_to_dict(self, details: ComplianceDetails) -> dict[str, Any]:
        if not isinstance(details, ValidComplianceDetails):
            return {
                "missingElements": list(details.missing_elements),
                "nonComplianceRisks": list(details.non_compliance_risks),
            }
        data: dict[str, Any] = {
            "validityPeriod": details.validity_period,
            "registrationRequired": details.registration_required,
            "stampDutyPaid": details.stamp_duty_paid,
            "properWitnessAttestation": details.proper_witness_attestation,
            "notarizationStatus": details.notarization_status,
            "governmentDepartmentApproval": details.government_department_approval,
            "standardsCompliance": list(details.standards_compliance),
        }
        optional = {
            "reraCompliance": details.rera_compliance,
            "boundaryVerification": details.boundary_verification,
            "encumbranceStatus": details.encumbrance_status,
        }
        data.update({key: value for key, value in optional.items() if value is not None})
        return data


def dump_payload(payload: dict[str, Any]) -> str:
    """Serialize a payload compactly, keeping key order."""
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
