"""Submit/poll/collect state machine for asynchronous OCR jobs."""

import time
from collections.abc import Callable

from lease_analyzer.logging.logger import Log
from lease_analyzer.ocr.base import BaseOcrClient
from lease_analyzer.ocr.exceptions import (
    OcrError,
    OcrInvalidJobError,
    OcrJobFailedError,
    OcrJobTimeoutError,
    OcrNoTextError,
)
from lease_analyzer.ocr.models import Block, DetectionPage, JobStatus, line_text

_PROGRESS_MESSAGES: dict[int, str] = {
    10: "Still processing document, normal for large or complex PDFs",
    20: "Document processing continues",
    40: "Processing taking longer than usual, document may be complex",
    60: "Still processing after many polls, image-based PDFs can take longer",
    80: "Processing continues, approaching the poll limit",
}


class OcrJobPoller:
    """Runs one asynchronous detection job to completion and returns its text."""

    def __init__(
        self,
        ocr_client: BaseOcrClient,
        *,
        poll_interval_seconds: float = 3.0,
        max_attempts: int = 100,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._ocr_client = ocr_client
        self._poll_interval = poll_interval_seconds
        self._max_attempts = max_attempts
        self._sleep = sleep

    def run(self, bucket: str, key: str) -> str:
        """Start a job for bucket/key, wait for it and return the joined LINE text.

        Raises:
            OcrError: if submission fails, the job fails, the job id becomes
                invalid, polling times out, or the result carries no text.
        """
        job_id = self._ocr_client.start_detection(bucket, key)
        Log.info(f"OCR job {job_id} started for s3://{bucket}/{key}")
        return self.wait(job_id)

    def wait(self, job_id: str) -> str:
        for attempt in range(1, self._max_attempts + 1):
            self._sleep(self._poll_interval)
            try:
                page = self._ocr_client.get_detection(job_id)
            except OcrInvalidJobError:
                raise
            except OcrError as exc:
                Log.warning(
                    f"Error polling OCR job {job_id} "
                    f"(attempt {attempt}/{self._max_attempts}): {exc}"
                )
                continue

            Log.debug(
                f"OCR job {job_id} status: {page.status.value} "
                f"(attempt {attempt}/{self._max_attempts})"
            )
            if page.status in (JobStatus.SUCCEEDED, JobStatus.PARTIAL_SUCCESS):
                if page.status == JobStatus.PARTIAL_SUCCESS:
                    Log.warning(f"OCR job {job_id} finished with partial success")
                return self._collect(job_id, page)
            if page.status == JobStatus.FAILED:
                raise OcrJobFailedError(
                    f"OCR job failed: {page.status_message or 'Unknown error'}"
                )
            if attempt in _PROGRESS_MESSAGES:
                Log.info(f"OCR job {job_id}: {_PROGRESS_MESSAGES[attempt]}")

        raise OcrJobTimeoutError(
            f"OCR job {job_id} timed out after {self._max_attempts} attempts "
            f"({self._max_attempts * self._poll_interval:.0f} seconds)"
        )

    def _collect(self, job_id: str, first_page: DetectionPage) -> str:
        if not first_page.blocks:
            raise OcrNoTextError("No text blocks found in document")
        blocks: list[Block] = list(first_page.blocks)
        next_token = first_page.next_token
        while next_token:
            page = self._ocr_client.get_detection(job_id, next_token)
            blocks.extend(page.blocks)
            Log.debug(f"OCR job {job_id}: fetched {len(page.blocks)} more blocks")
            next_token = page.next_token

        text = line_text(blocks)
        Log.info(f"OCR job {job_id} collected {len(blocks)} blocks, {len(text)} chars")
        if not text.strip():
            raise OcrNoTextError("No text could be extracted from the document")
        return text
