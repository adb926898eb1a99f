"""Model-backed oil & gas lease analyzer."""

import json
from pathlib import Path

from lease_analyzer.analysis.base import BaseContractAnalyzer
from lease_analyzer.analysis.client_base import BaseAnalysisClient
from lease_analyzer.analysis.exceptions import AnalysisError, AnalysisNetworkError
from lease_analyzer.analysis.models import AnalysisFailed, AnalysisOutcome, AnalysisSucceeded
from lease_analyzer.analysis.prompt_loader import load_prompt_template
from lease_analyzer.analysis.validator import validate_and_build
from lease_analyzer.logging.logger import Log


class ContractAnalyzer(BaseContractAnalyzer):
    """Analyzes extracted lease text with a hosted text generation model."""

    def __init__(
        self,
        *,
        client: BaseAnalysisClient,
        model: str,
        max_tokens: int = 2000,
        temperature: float = 0.0,
        prompt_template_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._max_tokens = max_tokens
        self._temperature = max(0.0, min(1.0, temperature))
        self._prompt_template = load_prompt_template(prompt_template_path)

    def analyze_outcome(self, text: str, file_name: str) -> AnalysisOutcome:
        Log.info(f"Analyzing {file_name} ({len(text)} chars) with model {self._model}")
        try:
            prompt = self._build_prompt(text, file_name)
            raw_response = self._client.complete(
                model=self._model,
                prompt=prompt,
                max_tokens=self._max_tokens,
                temperature=self._temperature,
            )
            Log.debug(f"Model raw response for {file_name}:\n{raw_response}")
            result = validate_and_build(self._parse_json(raw_response))
        except AnalysisNetworkError as exc:
            Log.error(f"Analysis provider unavailable for {file_name}: {exc}")
            return AnalysisFailed(file_name=file_name, reason=str(exc), kind="unavailable")
        except AnalysisError as exc:
            Log.error(f"Analysis failed for {file_name}: {exc}")
            return AnalysisFailed(file_name=file_name, reason=str(exc))
        except Exception as exc:
            Log.error(f"Unexpected analysis error for {file_name}: {exc}")
            return AnalysisFailed(file_name=file_name, reason=str(exc) or type(exc).__name__)

        Log.info(
            f"Analysis complete for {file_name}: "
            f"{len(result.lessors)} lessors, {len(result.lessees)} lessees, "
            f"{len(result.insights)} insights"
        )
        return AnalysisSucceeded(result=result)

    def _build_prompt(self, text: str, file_name: str) -> str:
        return self._prompt_template.format(contract_text=text, file_name=file_name)

    @staticmethod
    def _parse_json(raw: str) -> dict[str, object]:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()
            if lines and lines[0].startswith("```"):
                lines = lines[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines)

        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise AnalysisError(f"Invalid JSON response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise AnalysisError("JSON response must be an object")
        return parsed
