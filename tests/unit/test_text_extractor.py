from collections.abc import Callable
from datetime import datetime, timezone
from typing import get_args
from unittest.mock import MagicMock

import pytest

from lease_analyzer.extraction.exceptions import ExtractionError, ExtractionMethod
from lease_analyzer.extraction.extractor import TextExtractor
from lease_analyzer.ocr.exceptions import OcrError, OcrJobTimeoutError
from lease_analyzer.ocr.models import Block
from lease_analyzer.processor.models import UploadedFile
from lease_analyzer.storage.exceptions import StorageError

MB = 1024 * 1024
NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)
EXPECTED_KEY = "contracts/1704067200000-lease.pdf"


def _make_extractor(
    storage: MagicMock | None = None,
    ocr_client: MagicMock | None = None,
    poller: MagicMock | None = None,
) -> tuple[TextExtractor, MagicMock, MagicMock, MagicMock]:
    storage = storage or MagicMock()
    ocr_client = ocr_client or MagicMock()
    poller = poller or MagicMock()
    extractor = TextExtractor(
        storage=storage,
        ocr_client=ocr_client,
        poller=poller,
        bucket="leases",
        fallback_max_size=5 * MB,
        clock=lambda: NOW,
    )
    return extractor, storage, ocr_client, poller


class TestPlainText:
    def test_decodes_and_normalizes_without_network(
        self, make_file: Callable[..., UploadedFile]
    ) -> None:
        extractor, storage, ocr_client, poller = _make_extractor()
        file = make_file(content=b"  Lessor: John Doe\r\n\r\n\r\n\r\nLessee: Acme  ")

        result = extractor.extract(file)

        assert result.text == "Lessor: John Doe\n\nLessee: Acme"
        assert result.method == "direct"
        assert result.storage_key is None
        storage.put.assert_not_called()
        ocr_client.detect_text.assert_not_called()
        poller.run.assert_not_called()

    def test_invalid_utf8_is_replaced(self, make_file: Callable[..., UploadedFile]) -> None:
        extractor, *_ = _make_extractor()
        result = extractor.extract(make_file(content=b"Lessor \xff"))
        assert result.text == "Lessor \ufffd"


class TestPdf:
    def test_uploads_then_runs_async_ocr(self, make_file: Callable[..., UploadedFile]) -> None:
        extractor, storage, ocr_client, poller = _make_extractor()
        poller.run.return_value = "Lessor: John Doe"
        file = make_file(name="lease.pdf", mime_type="application/pdf", content=b"%PDF")

        result = extractor.extract(file)

        storage.put.assert_called_once_with("leases", EXPECTED_KEY, b"%PDF", "application/pdf")
        poller.run.assert_called_once_with("leases", EXPECTED_KEY)
        assert result.text == "Lessor: John Doe"
        assert result.method == "async-ocr"
        assert result.storage_key == EXPECTED_KEY
        ocr_client.detect_text.assert_not_called()

    def test_small_pdf_falls_back_to_sync_ocr(
        self, make_file: Callable[..., UploadedFile]
    ) -> None:
        extractor, _, ocr_client, poller = _make_extractor()
        poller.run.side_effect = OcrJobTimeoutError("timed out")
        ocr_client.detect_text.return_value = [Block(block_type="LINE", text="Page one")]
        file = make_file(name="lease.pdf", mime_type="application/pdf", content=b"%PDF")

        result = extractor.extract(file)

        assert result.text == "Page one"
        assert result.method == "sync-ocr"
        assert result.storage_key == EXPECTED_KEY

    def test_large_pdf_does_not_fall_back(self, make_file: Callable[..., UploadedFile]) -> None:
        extractor, _, ocr_client, poller = _make_extractor()
        poller.run.side_effect = OcrJobTimeoutError("timed out")
        file = make_file(
            name="lease.pdf", mime_type="application/pdf", content=b"%PDF", size=10 * MB
        )

        with pytest.raises(ExtractionError) as exc_info:
            extractor.extract(file)

        assert exc_info.value.method == "async-ocr"
        assert exc_info.value.storage_key == EXPECTED_KEY
        ocr_client.detect_text.assert_not_called()

    def test_fallback_failure_keeps_storage_key(
        self, make_file: Callable[..., UploadedFile]
    ) -> None:
        extractor, _, ocr_client, poller = _make_extractor()
        poller.run.side_effect = OcrJobTimeoutError("timed out")
        ocr_client.detect_text.side_effect = OcrError("unsupported document")
        file = make_file(name="lease.pdf", mime_type="application/pdf", content=b"%PDF")

        with pytest.raises(ExtractionError) as exc_info:
            extractor.extract(file)

        assert exc_info.value.method == "sync-ocr"
        assert exc_info.value.storage_key == EXPECTED_KEY

    def test_upload_failure_has_no_storage_key(
        self, make_file: Callable[..., UploadedFile]
    ) -> None:
        storage = MagicMock()
        storage.put.side_effect = StorageError("denied")
        extractor, _, _, poller = _make_extractor(storage=storage)
        file = make_file(
            name="lease.pdf", mime_type="application/pdf", content=b"%PDF", size=10 * MB
        )

        with pytest.raises(ExtractionError) as exc_info:
            extractor.extract(file)

        assert exc_info.value.storage_key is None
        poller.run.assert_not_called()

    def test_same_named_uploads_get_distinct_keys(
        self, make_file: Callable[..., UploadedFile]
    ) -> None:
        extractor, storage, _, poller = _make_extractor()
        poller.run.return_value = "Lessor: John Doe"
        first = make_file(name="lease.pdf", mime_type="application/pdf", content=b"%PDF-a")
        second = make_file(name="lease.pdf", mime_type="application/pdf", content=b"%PDF-b")

        keys = [extractor.extract(first).storage_key, extractor.extract(second).storage_key]

        assert keys == [EXPECTED_KEY, "contracts/1704067200001-lease.pdf"]
        assert [c.args[1] for c in storage.put.call_args_list] == keys


class TestSyncOcr:
    def test_image_uses_sync_ocr(self, make_file: Callable[..., UploadedFile]) -> None:
        extractor, storage, ocr_client, poller = _make_extractor()
        ocr_client.detect_text.return_value = [
            Block(block_type="PAGE"),
            Block(block_type="LINE", text="OIL AND GAS LEASE"),
            Block(block_type="WORD", text="OIL"),
            Block(block_type="LINE", text="Royalty: 3/16"),
        ]
        file = make_file(name="scan.png", mime_type="image/png", content=b"\x89PNG")

        result = extractor.extract(file)

        assert result.text == "OIL AND GAS LEASE\nRoyalty: 3/16"
        assert result.method == "sync-ocr"
        ocr_client.detect_text.assert_called_once_with(b"\x89PNG")
        storage.put.assert_not_called()
        poller.run.assert_not_called()

    def test_no_line_text_fails(self, make_file: Callable[..., UploadedFile]) -> None:
        extractor, _, ocr_client, _ = _make_extractor()
        ocr_client.detect_text.return_value = [Block(block_type="PAGE")]
        file = make_file(name="scan.png", mime_type="image/png", content=b"\x89PNG")

        with pytest.raises(ExtractionError, match="scan.png using sync-ocr"):
            extractor.extract(file)

    def test_ocr_error_is_wrapped(self, make_file: Callable[..., UploadedFile]) -> None:
        extractor, _, ocr_client, _ = _make_extractor()
        ocr_client.detect_text.side_effect = OcrError("bad image")
        file = make_file(name="scan.jpg", mime_type="image/jpeg", content=b"\xff\xd8")

        with pytest.raises(ExtractionError) as exc_info:
            extractor.extract(file)

        assert isinstance(exc_info.value.cause, OcrError)
        assert exc_info.value.file_name == "scan.jpg"


class TestExtractionMethods:
    def test_every_path_reports_a_known_method(
        self, make_file: Callable[..., UploadedFile]
    ) -> None:
        extractor, _, ocr_client, poller = _make_extractor()
        poller.run.return_value = "Lessor: John Doe"
        ocr_client.detect_text.return_value = [Block(block_type="LINE", text="Lessor")]
        files = [
            make_file(),
            make_file(name="lease.pdf", mime_type="application/pdf", content=b"%PDF"),
            make_file(name="scan.png", mime_type="image/png", content=b"\x89PNG"),
        ]

        methods = [extractor.extract(file).method for file in files]

        assert methods == ["direct", "async-ocr", "sync-ocr"]
        assert set(methods) == set(get_args(ExtractionMethod))
