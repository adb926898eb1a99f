from dataclasses import dataclass

from lease_analyzer.extraction.exceptions import ExtractionMethod


@dataclass(frozen=True)
class ExtractionResult:
    """Normalized text of one file plus the storage key it was uploaded under, if any."""

    text: str
    method: ExtractionMethod
    storage_key: str | None = None
