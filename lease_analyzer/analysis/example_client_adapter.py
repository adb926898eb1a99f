"""Example analysis client adapter.

Returns a fixed, valid analysis without any network call. Useful for local
runs (analysis_provider=example) and tests.
"""

import json
from typing import ClassVar

from lease_analyzer.analysis.client_base import BaseAnalysisClient


class ExampleClientAdapter(BaseAnalysisClient):
    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "lessors": ["Example Mineral Owner"],
        "lessees": ["Example Energy Corporation"],
        "acreage": "160 acres",
        "depths": "All depths",
        "term": "5 years",
        "royalty": "1/8th (12.5%)",
        "insights": ["Example analysis generated without a model call."],
    }

    def complete(
        self,
        *,
        model: str,
        prompt: str,
        max_tokens: int,
        temperature: float,
    ) -> str:
        _ = model, prompt, max_tokens, temperature
        return json.dumps(self.DEFAULT_RESPONSE)
