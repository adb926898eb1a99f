from lease_analyzer.analysis.base import BaseContractAnalyzer
from lease_analyzer.analysis.models import AnalysisSucceeded, to_analysis_result
from lease_analyzer.extraction.base import BaseTextExtractor
from lease_analyzer.logging.logger import Log
from lease_analyzer.processor.pipeline import FileContext, PipelineStep
from lease_analyzer.rules.text_quality import calculate_text_quality
from lease_analyzer.rules.validation import is_analysis_successful


class ExtractTextStep(PipelineStep):
    def __init__(self, extractor: BaseTextExtractor) -> None:
        self._extractor = extractor

    def run(self, context: FileContext) -> FileContext:
        Log.info(
            f"Starting processing for file {context.position}/{context.total}: "
            f"{context.file.name}"
        )
        context.extraction = self._extractor.extract(context.file)
        Log.info(
            f"Extracted {len(context.extraction.text)} chars from {context.file.name} "
            f"via {context.extraction.method}"
        )
        return context


class ScoreTextQualityStep(PipelineStep):
    def run(self, context: FileContext) -> FileContext:
        if context.extraction is None:
            raise ValueError("FileContext.extraction must be set before quality scoring")
        context.text_quality = calculate_text_quality(context.extraction.text)
        Log.info(f"Text quality for {context.file.name}: {context.text_quality:.2f}")
        return context


class AnalyzeStep(PipelineStep):
    def __init__(self, analyzer: BaseContractAnalyzer) -> None:
        self._analyzer = analyzer

    def run(self, context: FileContext) -> FileContext:
        if context.extraction is None:
            raise ValueError("FileContext.extraction must be set before analysis")
        context.analysis_outcome = self._analyzer.analyze_outcome(
            context.extraction.text, context.file.name
        )
        return context


class QualityCheckStep(PipelineStep):
    """Logs analyses that fail the success rules; the result is kept either way."""

    def run(self, context: FileContext) -> FileContext:
        if context.analysis_outcome is None:
            raise ValueError("FileContext.analysis_outcome must be set before quality check")
        if not isinstance(context.analysis_outcome, AnalysisSucceeded):
            Log.error(f"Analysis failed for {context.file.name}")
        elif not is_analysis_successful(to_analysis_result(context.analysis_outcome)):
            Log.error(f"Analysis quality check failed for {context.file.name}")
        return context
