import json
from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest

from lease_analyzer.main import main


@pytest.fixture(autouse=True)
def local_providers(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    monkeypatch.setenv("STORAGE_PROVIDER", "memory")
    monkeypatch.setenv("ANALYSIS_PROVIDER", "example")
    monkeypatch.delenv("S3_BUCKET_NAME", raising=False)
    with patch("lease_analyzer.ocr.textract_adapter.boto3.client"):
        yield


@pytest.fixture()
def lease_txt(tmp_path: Path) -> Path:
    path = tmp_path / "lease.txt"
    path.write_text("Lessor: John Doe\nLessee: Acme Energy\nRoyalty: 1/8")
    return path


class TestMain:
    def test_prints_contracts_as_json(
        self, lease_txt: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        exit_code = main([str(lease_txt)])

        assert exit_code == 0
        contracts = json.loads(capsys.readouterr().out)
        assert len(contracts) == 1
        assert contracts[0]["fileName"] == "lease.txt"
        assert contracts[0]["extractedText"].startswith("Lessor: John Doe")
        assert contracts[0]["analysis"]["lessors"] == ["Example Mineral Owner"]

    def test_detailed_prints_summary(
        self, lease_txt: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        exit_code = main([str(lease_txt), "--detailed"])

        assert exit_code == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["success"] is True
        assert payload["summary"]["totalFiles"] == 1
        assert payload["summary"]["successfullyProcessed"] == 1

    def test_missing_file_fails(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        exit_code = main([str(tmp_path / "missing.pdf")])

        assert exit_code == 1
        assert "Processing failed: File not found" in capsys.readouterr().err

    def test_validation_failure_fails(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        empty = tmp_path / "empty.txt"
        empty.write_bytes(b"")

        exit_code = main([str(empty)])

        assert exit_code == 1
        assert "File validation failed" in capsys.readouterr().err

    def test_missing_bucket_fails(
        self,
        lease_txt: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("STORAGE_PROVIDER", "s3")

        exit_code = main([str(lease_txt)])

        assert exit_code == 1
        assert "Configuration error for s3_bucket_name" in capsys.readouterr().err

    def test_unexpected_error_fails(
        self, lease_txt: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with patch("lease_analyzer.main.build_services", side_effect=RuntimeError("boom")):
            exit_code = main([str(lease_txt)])

        assert exit_code == 1
        assert "Processing failed unexpectedly" in capsys.readouterr().err

    def test_requires_at_least_one_file(self) -> None:
        with pytest.raises(SystemExit):
            main([])
