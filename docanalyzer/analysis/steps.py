from collections.abc import Callable

from docanalyzer.analysis.assembler import ReportAssembler
from docanalyzer.analysis.classifier import classify
from docanalyzer.analysis.models import ClassificationResult
from docanalyzer.analysis.pipeline import AnalysisContext, AnalysisStep
from docanalyzer.analysis.serializer import ReportSerializer
from docanalyzer.database.models import DocumentStatus
from docanalyzer.database.repositories.base import BaseDocumentStore
from docanalyzer.database.schemas import NewAnalysis
from docanalyzer.extraction.base import BaseTextExtractor
from docanalyzer.logging.logger import Log

Classifier = Callable[[str | None, str], ClassificationResult]


class ExtractTextStep(AnalysisStep):
    def __init__(self, extractor: BaseTextExtractor) -> None:
        self._extractor = extractor

    async def run(self, context: AnalysisContext) -> AnalysisContext:
        context.source_text = self._extractor.extract(context.document)
        Log.debug(
            f"Extracted {len(context.source_text)} chars for document {context.document.id}"
        )
        return context


class ClassifyStep(AnalysisStep):
    def __init__(self, classifier: Classifier = classify) -> None:
        self._classifier = classifier

    async def run(self, context: AnalysisContext) -> AnalysisContext:
        context.classification = self._classifier(
            context.document.document_type, context.source_text
        )
        Log.info(
            f"Document {context.document.id} classified as "
            f"'{context.classification.document_type}' "
            f"(declared '{context.document.document_type}')"
        )
        return context


class AssembleReportStep(AnalysisStep):
    def __init__(self, assembler: ReportAssembler) -> None:
        self._assembler = assembler

    async def run(self, context: AnalysisContext) -> AnalysisContext:
        if context.classification is None:
            raise ValueError("AnalysisContext.classification must be set before assembly")
        context.report = self._assembler.assemble(context.classification)
        return context


class UpdateDocumentStatusStep(AnalysisStep):
    def __init__(self, store: BaseDocumentStore) -> None:
        self._store = store

    async def run(self, context: AnalysisContext) -> AnalysisContext:
        if context.report is None:
            raise ValueError("AnalysisContext.report must be set before status update")
        status = DocumentStatus.VALID if context.report.is_valid else DocumentStatus.INVALID
        updated = await self._store.update_document_status(context.document.id, status.value)
        if updated is None:
            Log.warning(f"Document {context.document.id} vanished before status update")
        else:
            Log.info(f"Document {context.document.id} marked as {status}")
        return context


class PersistReportStep(AnalysisStep):
    def __init__(self, store: BaseDocumentStore, serializer: ReportSerializer) -> None:
        self._store = store
        self._serializer = serializer

    async def run(self, context: AnalysisContext) -> AnalysisContext:
        report = context.report
        if report is None:
            raise ValueError("AnalysisContext.report must be set before persist")
        context.analysis = await self._store.create_analysis(
            NewAnalysis(
                document_id=context.document.id,
                is_valid=report.is_valid,
                compliance_status=report.compliance_status.value,
                issues_count=len(report.issues),
                warnings=list(report.warnings),
                recommendations=list(report.recommendations),
                analysis_data=self._serializer.to_json(report),
            )
        )
        return context
