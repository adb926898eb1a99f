"""Text extraction dispatched by declared MIME type.

text/plain is decoded locally. PDFs are uploaded to object storage and run
through an asynchronous OCR job, falling back to synchronous OCR for small
files. Everything else is sent to synchronous OCR as raw bytes.
"""

from collections.abc import Callable
from datetime import datetime, timezone

from lease_analyzer.extraction.base import BaseTextExtractor
from lease_analyzer.extraction.exceptions import ExtractionError
from lease_analyzer.extraction.models import ExtractionResult
from lease_analyzer.extraction.ocr_job import OcrJobPoller
from lease_analyzer.logging.logger import Log
from lease_analyzer.ocr.base import BaseOcrClient
from lease_analyzer.ocr.exceptions import OcrNoTextError
from lease_analyzer.ocr.models import line_text
from lease_analyzer.processor.models import UploadedFile
from lease_analyzer.rules.text_quality import normalize_contract_text
from lease_analyzer.storage.base import BaseFileStorage
from lease_analyzer.storage.keys import UploadClock, build_storage_key

TEXT_MIME_TYPE = "text/plain"
PDF_MIME_TYPE = "application/pdf"
DEFAULT_FALLBACK_MAX_SIZE = 5 * 1024 * 1024


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TextExtractor(BaseTextExtractor):
    """Extracts contract text through local decoding, sync OCR or async OCR."""

    def __init__(
        self,
        *,
        storage: BaseFileStorage,
        ocr_client: BaseOcrClient,
        poller: OcrJobPoller,
        bucket: str,
        fallback_max_size: int = DEFAULT_FALLBACK_MAX_SIZE,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._storage = storage
        self._ocr_client = ocr_client
        self._poller = poller
        self._bucket = bucket
        self._fallback_max_size = fallback_max_size
        self._upload_clock = UploadClock(clock)

    def extract(self, file: UploadedFile) -> ExtractionResult:
        Log.info(
            f"Starting text extraction for {file.name} "
            f"({file.mime_type}, {file.size} bytes)"
        )
        if file.mime_type == TEXT_MIME_TYPE:
            return self._extract_plain_text(file)
        if file.mime_type == PDF_MIME_TYPE:
            return self._extract_pdf(file)
        return self._extract_with_sync_ocr(file)

    def _extract_plain_text(self, file: UploadedFile) -> ExtractionResult:
        decoded = file.content.decode("utf-8", errors="replace")
        return ExtractionResult(text=normalize_contract_text(decoded), method="direct")

    def _extract_pdf(self, file: UploadedFile) -> ExtractionResult:
        storage_key: str | None = None
        try:
            storage_key = self._upload(file)
            text = self._poller.run(self._bucket, storage_key)
            return ExtractionResult(text=text, method="async-ocr", storage_key=storage_key)
        except Exception as async_exc:
            Log.error(f"Async OCR failed for {file.name}: {async_exc}")
            if file.size >= self._fallback_max_size:
                Log.error(f"{file.name} too large for synchronous OCR fallback")
                raise ExtractionError(
                    file.name, "async-ocr", async_exc, storage_key=storage_key
                ) from async_exc

        Log.info(f"Attempting synchronous OCR fallback for {file.name}")
        try:
            result = self._extract_with_sync_ocr(file)
        except ExtractionError as exc:
            exc.storage_key = storage_key
            raise
        return ExtractionResult(text=result.text, method=result.method, storage_key=storage_key)

    def _extract_with_sync_ocr(self, file: UploadedFile) -> ExtractionResult:
        if file.mime_type == PDF_MIME_TYPE:
            Log.warning(
                f"Using synchronous OCR for PDF {file.name}, multi-page text may be incomplete"
            )
        try:
            blocks = self._ocr_client.detect_text(file.content)
            text = line_text(blocks)
            if not text.strip():
                raise OcrNoTextError("No text could be extracted from the file")
        except Exception as exc:
            raise ExtractionError(file.name, "sync-ocr", exc) from exc
        Log.info(f"Synchronous OCR found {len(blocks)} blocks in {file.name}")
        return ExtractionResult(text=text, method="sync-ocr")

    def _upload(self, file: UploadedFile) -> str:
        key = build_storage_key(file.name, self._upload_clock.next_millis())
        self._storage.put(self._bucket, key, file.content, file.mime_type)
        return key
