from abc import ABC, abstractmethod

from lease_analyzer.extraction.models import ExtractionResult
from lease_analyzer.processor.models import UploadedFile


class BaseTextExtractor(ABC):
    """Contract for all text extraction adapters."""

    @abstractmethod
    def extract(self, file: UploadedFile) -> ExtractionResult:
        """Extract text from an uploaded file.

        Args:
            file: The uploaded file with its declared MIME type and bytes.

        Returns:
            ExtractionResult with the text and the storage key if the file
            was uploaded to object storage on the way.

        Raises:
            ExtractionError: if every applicable extraction path fails.
        """
