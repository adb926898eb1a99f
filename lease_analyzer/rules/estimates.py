from dataclasses import dataclass
from typing import Literal

from lease_analyzer.processor.models import UploadedFile

Complexity = Literal["low", "medium", "high"]

COMPLEX_LEGAL_TERMS = (
    "whereas",
    "therefore",
    "notwithstanding",
    "heretofore",
    "hereafter",
    "mineral rights",
    "pooling",
    "unitization",
    "force majeure",
)


@dataclass(frozen=True)
class AnalysisComplexity:
    complexity: Complexity
    estimated_time_ms: int


def estimate_processing_time_ms(file: UploadedFile) -> int:
    size_mb = file.size / (1024 * 1024)
    if file.mime_type == "text/plain":
        return 1000
    if file.mime_type == "application/pdf":
        return int(max(3000, size_mb * 1000))
    if file.mime_type.startswith("image/"):
        return int(max(5000, size_mb * 2000))
    return 10000


def estimate_analysis_complexity(text: str) -> AnalysisComplexity:
    word_count = len(text.split())
    if word_count < 1000:
        complexity: Complexity = "low"
        estimated = 5000
    elif word_count < 5000:
        complexity = "medium"
        estimated = 10000
    else:
        complexity = "high"
        estimated = 20000

    lowered = text.lower()
    if sum(1 for term in COMPLEX_LEGAL_TERMS if term in lowered) > 5:
        estimated += 5000
    return AnalysisComplexity(complexity=complexity, estimated_time_ms=estimated)
