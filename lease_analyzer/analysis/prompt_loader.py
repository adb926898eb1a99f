from pathlib import Path

from lease_analyzer.analysis.exceptions import AnalysisError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the lease analysis prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled lease_analysis_prompt.txt.

    Returns:
        The raw template string with a {contract_text} placeholder.

    Raises:
        AnalysisError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "lease_analysis_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AnalysisError(f"Failed to load prompt template: {exc}") from exc
