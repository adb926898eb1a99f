from dataclasses import dataclass, field, replace
from datetime import datetime

from lease_analyzer.analysis.models import AnalysisResult
from lease_analyzer.processor.models import Contract, UploadedFile

_COMPARED_FIELDS = ("acreage", "depths", "term", "royalty")


@dataclass(frozen=True)
class ContractComparison:
    similarity: float
    differences: list[str] = field(default_factory=list)
    common_parties: list[str] = field(default_factory=list)


def compare_contracts(first: Contract, second: Contract) -> ContractComparison:
    """Compare the scalar terms and the parties of two analyzed contracts."""
    a, b = first.analysis, second.analysis
    matches = sum(1 for name in _COMPARED_FIELDS if getattr(a, name) == getattr(b, name))
    differences = [
        f'{name}: "{getattr(a, name)}" vs "{getattr(b, name)}"'
        for name in _COMPARED_FIELDS
        if getattr(a, name) != getattr(b, name)
    ]
    other_parties = {*b.lessors, *b.lessees}
    common = [party for party in [*a.lessors, *a.lessees] if party in other_parties]
    return ContractComparison(
        similarity=matches / len(_COMPARED_FIELDS),
        differences=differences,
        common_parties=common,
    )


def enhance_analysis_with_metadata(
    analysis: AnalysisResult,
    file: UploadedFile,
    processed_at: datetime,
) -> AnalysisResult:
    note = (
        f"Processed {file.name} ({file.size / 1024:.1f}KB) "
        f"on {processed_at.isoformat()}"
    )
    return replace(analysis, insights=[*analysis.insights, note])
