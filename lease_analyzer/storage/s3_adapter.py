from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from lease_analyzer.logging.logger import Log
from lease_analyzer.storage.base import BaseFileStorage
from lease_analyzer.storage.exceptions import StorageCleanupError, StorageError

_NOT_FOUND_CODES = frozenset({"404", "NoSuchKey", "NotFound"})


class S3FileStorage(BaseFileStorage):
    """Object storage adapter built on the boto3 S3 client."""

    def __init__(self, *, region: str, client: Any = None) -> None:
        self._client = client if client is not None else boto3.client("s3", region_name=region)

    def put(self, bucket: str, key: str, body: bytes, content_type: str) -> None:
        Log.info(f"Uploading {len(body)} bytes to s3://{bucket}/{key}")
        try:
            self._client.put_object(
                Bucket=bucket,
                Key=key,
                Body=body,
                ContentType=content_type,
            )
        except (ClientError, BotoCoreError) as exc:
            raise StorageError(f"S3 upload failed for {key}: {exc}") from exc

    def delete(self, bucket: str, key: str) -> None:
        Log.info(f"Deleting s3://{bucket}/{key}")
        try:
            self._client.delete_object(Bucket=bucket, Key=key)
        except (ClientError, BotoCoreError) as exc:
            raise StorageCleanupError(f"Failed to delete file from S3: {exc}") from exc

    def exists(self, bucket: str, key: str) -> bool:
        try:
            self._client.head_object(Bucket=bucket, Key=key)
        except ClientError as exc:
            code = str(exc.response.get("Error", {}).get("Code", ""))
            if code in _NOT_FOUND_CODES:
                return False
            raise StorageError(f"Failed to check file existence in S3: {exc}") from exc
        except BotoCoreError as exc:
            raise StorageError(f"Failed to check file existence in S3: {exc}") from exc
        return True
