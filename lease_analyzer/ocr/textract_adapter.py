from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from lease_analyzer.ocr.base import BaseOcrClient
from lease_analyzer.ocr.exceptions import OcrError, OcrInvalidJobError, OcrNoTextError
from lease_analyzer.ocr.models import Block, DetectionPage, JobStatus


class TextractClientAdapter(BaseOcrClient):
    """OCR client adapter built on the boto3 Textract client."""

    def __init__(self, *, region: str, client: Any = None) -> None:
        self._client = client if client is not None else boto3.client(
            "textract", region_name=region
        )

    def detect_text(self, document: bytes) -> list[Block]:
        try:
            response = self._client.detect_document_text(Document={"Bytes": document})
        except (ClientError, BotoCoreError) as exc:
            raise OcrError(f"Textract detect_document_text failed: {exc}") from exc
        raw_blocks = response.get("Blocks")
        if not raw_blocks:
            raise OcrNoTextError("No text blocks found in document")
        return self._parse_blocks(raw_blocks)

    def start_detection(self, bucket: str, key: str) -> str:
        try:
            response = self._client.start_document_text_detection(
                DocumentLocation={"S3Object": {"Bucket": bucket, "Name": key}}
            )
        except (ClientError, BotoCoreError) as exc:
            raise OcrError(f"Textract start_document_text_detection failed: {exc}") from exc
        job_id = response.get("JobId")
        if not isinstance(job_id, str) or not job_id:
            raise OcrError("Failed to start Textract job - no JobId received")
        return job_id

    def get_detection(self, job_id: str, next_token: str | None = None) -> DetectionPage:
        params: dict[str, str] = {"JobId": job_id}
        if next_token:
            params["NextToken"] = next_token
        try:
            response = self._client.get_document_text_detection(**params)
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") == "InvalidJobIdException":
                raise OcrInvalidJobError(
                    f"Textract job {job_id} is invalid or expired"
                ) from exc
            raise OcrError(f"Textract get_document_text_detection failed: {exc}") from exc
        except BotoCoreError as exc:
            raise OcrError(f"Textract get_document_text_detection failed: {exc}") from exc
        return DetectionPage(
            status=self._parse_status(response.get("JobStatus")),
            blocks=self._parse_blocks(response.get("Blocks") or []),
            next_token=response.get("NextToken") or None,
            status_message=response.get("StatusMessage"),
        )

    @staticmethod
    def _parse_status(raw: Any) -> JobStatus:
        try:
            return JobStatus(raw)
        except ValueError:
            return JobStatus.UNKNOWN

    @staticmethod
    def _parse_blocks(raw_blocks: Any) -> list[Block]:
        if not isinstance(raw_blocks, list):
            raise OcrError("Textract returned malformed Blocks")
        blocks: list[Block] = []
        for raw in raw_blocks:
            if not isinstance(raw, dict):
                continue
            text = raw.get("Text")
            blocks.append(
                Block(
                    block_type=str(raw.get("BlockType", "")),
                    text=text if isinstance(text, str) else "",
                )
            )
        return blocks
