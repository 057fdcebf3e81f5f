from abc import ABC, abstractmethod
from dataclasses import dataclass

from docanalyzer.analysis.models import ClassificationResult
from docanalyzer.database.models import AnalysisRecord, DocumentRecord


@dataclass(slots=True)
class AnalysisContext:
    document: DocumentRecord
    source_text: str = ""
    classification: ClassificationResult | None = None
    report: ClassificationResult | None = None
    analysis: AnalysisRecord | None = None


class AnalysisStep(ABC):
    @abstractmethod
    async def run(self, context: AnalysisContext) -> AnalysisContext:
        raise NotImplementedError
