from dataclasses import dataclass, field
from datetime import datetime

from lease_analyzer.analysis.models import AnalysisResult


@dataclass(frozen=True)
class UploadedFile:
    """A file handed over by the upload surface (name, declared size/type, bytes)."""

    name: str
    size: int
    mime_type: str
    content: bytes = field(repr=False)


@dataclass(frozen=True)
class Contract:
    """Per-file outcome of processing, successful or error-flagged."""

    id: str
    file_name: str
    upload_date: datetime
    extracted_text: str
    analysis: AnalysisResult
    storage_key: str | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "fileName": self.file_name,
            "uploadDate": self.upload_date.isoformat(),
            "extractedText": self.extracted_text,
            "analysis": self.analysis.to_dict(),
            "storageKey": self.storage_key,
        }


@dataclass(frozen=True)
class ProcessingSummary:
    total_files: int
    successfully_processed: int
    failed: int
    average_quality_score: int
    high_risk_contracts: int


@dataclass
class DetailedProcessingResult:
    success: bool
    contracts: list[Contract]
    errors: list[str]
    summary: ProcessingSummary

    def to_dict(self) -> dict[str, object]:
        return {
            "success": self.success,
            "contracts": [contract.to_dict() for contract in self.contracts],
            "errors": list(self.errors),
            "summary": {
                "totalFiles": self.summary.total_files,
                "successfullyProcessed": self.summary.successfully_processed,
                "failed": self.summary.failed,
                "averageQualityScore": self.summary.average_quality_score,
                "highRiskContracts": self.summary.high_risk_contracts,
            },
        }


@dataclass
class DeleteContractResult:
    success: bool
    contract_id: str
    storage_cleanup_success: bool = True
    errors: list[str] = field(default_factory=list)
