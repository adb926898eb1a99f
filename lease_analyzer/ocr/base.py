from abc import ABC, abstractmethod

from lease_analyzer.ocr.models import Block, DetectionPage


class BaseOcrClient(ABC):
    """Contract for provider-specific OCR clients."""

    @abstractmethod
    def detect_text(self, document: bytes) -> list[Block]:
        """Run synchronous text detection over raw document bytes.

        Raises:
            OcrError: on any provider failure.
        """

    @abstractmethod
    def start_detection(self, bucket: str, key: str) -> str:
        """Submit an asynchronous detection job for a stored object; return its id.

        Raises:
            OcrError: if the job cannot be submitted or no id is returned.
        """

    @abstractmethod
    def get_detection(self, job_id: str, next_token: str | None = None) -> DetectionPage:
        """Fetch job status and, once finished, one page of its blocks.

        Raises:
            OcrInvalidJobError: if the job id is unknown or expired.
            OcrError: on any other provider failure.
        """
