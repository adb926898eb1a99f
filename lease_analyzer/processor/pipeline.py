from abc import ABC, abstractmethod
from dataclasses import dataclass

from lease_analyzer.analysis.models import AnalysisOutcome
from lease_analyzer.extraction.models import ExtractionResult
from lease_analyzer.processor.models import UploadedFile


@dataclass(slots=True)
class FileContext:
    """Accumulates data as one file moves through the pipeline steps."""

    file: UploadedFile
    contract_id: str
    position: int = 1
    total: int = 1
    extraction: ExtractionResult | None = None
    text_quality: float = 0.0
    analysis_outcome: AnalysisOutcome | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: FileContext) -> FileContext:
        raise NotImplementedError
