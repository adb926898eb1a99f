from dataclasses import dataclass, field
from typing import Literal

ERROR_SENTINEL = "Error in processing"
UNAVAILABLE_SENTINEL = "Service unavailable"
NOT_FOUND = "Not found"

FailureKind = Literal["error", "unavailable"]


@dataclass(frozen=True)
class AnalysisResult:
    """Structured lease analysis in the shape rendered by the UI."""

    lessors: list[str]
    lessees: list[str]
    acreage: str
    depths: str
    term: str
    royalty: str
    insights: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {
            "lessors": list(self.lessors),
            "lessees": list(self.lessees),
            "acreage": self.acreage,
            "depths": self.depths,
            "term": self.term,
            "royalty": self.royalty,
            "insights": list(self.insights),
        }


@dataclass(frozen=True)
class AnalysisSucceeded:
    result: AnalysisResult


@dataclass(frozen=True)
class AnalysisFailed:
    """Analysis could not be produced for a file.

    kind="error" covers bad model output and extraction failures,
    kind="unavailable" covers provider and transport failures.
    """

    file_name: str
    reason: str
    kind: FailureKind = "error"


AnalysisOutcome = AnalysisSucceeded | AnalysisFailed


def sentinel_result(sentinel: str, insights: list[str]) -> AnalysisResult:
    """Build a result whose every scalar field holds the sentinel."""
    return AnalysisResult(
        lessors=[sentinel],
        lessees=[sentinel],
        acreage=sentinel,
        depths=sentinel,
        term=sentinel,
        royalty=sentinel,
        insights=list(insights) or [f"Analysis failed: {sentinel}"],
    )


def to_analysis_result(outcome: AnalysisOutcome) -> AnalysisResult:
    """Lower an outcome into the sentinel-populated result shape."""
    if isinstance(outcome, AnalysisSucceeded):
        return outcome.result
    if outcome.kind == "unavailable":
        return sentinel_result(
            UNAVAILABLE_SENTINEL,
            [
                f"Contract analysis failed: {outcome.reason}",
                "This may be due to model access not being enabled.",
                "Please check model access permissions.",
            ],
        )
    return sentinel_result(
        ERROR_SENTINEL,
        [
            f"Failed to process {outcome.file_name}. Please try again or contact support.",
            f"Error details: {outcome.reason}",
        ],
    )
