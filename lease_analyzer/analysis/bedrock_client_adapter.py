import json
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from lease_analyzer.analysis.client_base import BaseAnalysisClient
from lease_analyzer.analysis.exceptions import AnalysisError, AnalysisNetworkError

ANTHROPIC_BEDROCK_VERSION = "bedrock-2023-05-31"


class BedrockClientAdapter(BaseAnalysisClient):
    """Analysis client adapter built on the Bedrock runtime invoke_model API."""

    def __init__(self, *, region: str, client: Any = None) -> None:
        self._client = client if client is not None else boto3.client(
            "bedrock-runtime", region_name=region
        )

    def complete(
        self,
        *,
        model: str,
        prompt: str,
        max_tokens: int,
        temperature: float,
    ) -> str:
        body = {
            "anthropic_version": ANTHROPIC_BEDROCK_VERSION,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        try:
            response = self._client.invoke_model(
                modelId=model,
                body=json.dumps(body),
                contentType="application/json",
                accept="application/json",
            )
        except (ClientError, BotoCoreError) as exc:
            raise AnalysisNetworkError(f"Bedrock invoke_model failed: {exc}") from exc

        stream = response.get("body")
        if stream is None:
            raise AnalysisNetworkError("No response body from Bedrock")
        raw = stream.read() if hasattr(stream, "read") else stream
        try:
            payload = json.loads(raw)
            content = payload["content"][0]["text"]
        except (json.JSONDecodeError, KeyError, IndexError, TypeError) as exc:
            raise AnalysisError(f"Unexpected Bedrock response body: {exc}") from exc
        if not isinstance(content, str):
            raise AnalysisError("Bedrock returned non-text content")
        return content
