from abc import ABC, abstractmethod

from lease_analyzer.analysis.models import AnalysisOutcome, AnalysisResult, to_analysis_result


class BaseContractAnalyzer(ABC):
    """Contract for all lease analysis adapters."""

    @abstractmethod
    def analyze_outcome(self, text: str, file_name: str) -> AnalysisOutcome:
        """Turn extracted contract text into a structured analysis.

        Args:
            text: Normalized text from the extraction step.
            file_name: Source file name, used in prompts and failure insights.

        Returns:
            AnalysisSucceeded with the validated result, or AnalysisFailed
            with the reason. Never raises.
        """

    def analyze(self, text: str, file_name: str) -> AnalysisResult:
        """Same as analyze_outcome, lowered to the sentinel-populated shape."""
        return to_analysis_result(self.analyze_outcome(text, file_name))
