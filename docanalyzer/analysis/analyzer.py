from docanalyzer.analysis.assembler import ReportAssembler
from docanalyzer.analysis.models import ComplianceStatus
from docanalyzer.analysis.pipeline import AnalysisContext, AnalysisStep
from docanalyzer.analysis.serializer import ERROR_PAYLOAD, ReportSerializer, dump_payload
from docanalyzer.analysis.steps import (
    AssembleReportStep,
    ClassifyStep,
    ExtractTextStep,
    PersistReportStep,
    UpdateDocumentStatusStep,
)
from docanalyzer.config.settings import Settings
from docanalyzer.database.models import AnalysisRecord, DocumentRecord, DocumentStatus
from docanalyzer.database.repositories.base import BaseDocumentStore
from docanalyzer.database.schemas import NewAnalysis
from docanalyzer.extraction.factory import TextExtractorFactory
from docanalyzer.logging.logger import Log

FAILURE_WARNING = "Analysis failed due to an error"
FAILURE_RECOMMENDATION = "Please try again or contact support"


class DocumentAnalyzer:
    """Runs the compliance analysis for one document.

    Pipeline: placeholder -> extract -> classify -> assemble -> status -> persist.
    Failures after the placeholder is written never reach the caller; they
    produce an error-shaped analysis instead.
    """

    def __init__(self, store: BaseDocumentStore, steps: list[AnalysisStep]) -> None:
        self._store = store
        self._steps = steps

    async def analyze(self, document: DocumentRecord) -> AnalysisRecord:
        Log.info(f"Analyzing document {document.id} ({document.file_name})")
        await self._store.create_analysis(
            NewAnalysis(
                document_id=document.id,
                is_valid=None,
                compliance_status=ComplianceStatus.PROCESSING.value,
                analysis_data=dump_payload({}),
            )
        )

        context = AnalysisContext(document=document)
        try:
            for step in self._steps:
                context = await step.run(context)
            if context.analysis is None:
                raise ValueError("Analysis pipeline finished without persisting a report")
        except Exception as exc:
            return await self._record_failure(document, exc)

        Log.info(
            f"Document {document.id} analysis {context.analysis.id} stored: "
            f"{context.analysis.compliance_status}"
        )
        return context.analysis

    async def _record_failure(self, document: DocumentRecord, exc: Exception) -> AnalysisRecord:
        Log.exception(f"Error analyzing document {document.id}: {exc}", exc)
        await self._store.update_document_status(document.id, DocumentStatus.ERROR.value)
        return await self._store.create_analysis(
            NewAnalysis(
                document_id=document.id,
                is_valid=False,
                compliance_status=ComplianceStatus.ERROR.value,
                issues_count=1,
                warnings=[FAILURE_WARNING],
                recommendations=[FAILURE_RECOMMENDATION],
                analysis_data=dump_payload(ERROR_PAYLOAD),
            )
        )


def build_document_analyzer(settings: Settings, store: BaseDocumentStore) -> DocumentAnalyzer:
    """Build a DocumentAnalyzer with the configured extractor."""
    steps: list[AnalysisStep] = [
        ExtractTextStep(TextExtractorFactory.create(settings)),
        ClassifyStep(),
        AssembleReportStep(ReportAssembler()),
        UpdateDocumentStatusStep(store),
        PersistReportStep(store, ReportSerializer()),
    ]
    return DocumentAnalyzer(store, steps)
