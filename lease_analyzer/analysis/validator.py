"""Validates parsed model output against the lease analysis shape."""

from typing import Any

from lease_analyzer.analysis.exceptions import AnalysisValidationError
from lease_analyzer.analysis.models import NOT_FOUND, AnalysisResult

REQUIRED_FIELDS = ("lessors", "lessees", "acreage", "depths", "term", "royalty", "insights")
_LIST_FIELDS = ("lessors", "lessees", "insights")
_SCALAR_FIELDS = ("acreage", "depths", "term", "royalty")


def validate_and_build(data: dict[str, Any]) -> AnalysisResult:
    """Validate raw parsed JSON and build an AnalysisResult.

    Nothing from a payload that fails any check is kept.

    Raises:
        AnalysisValidationError: on any validation failure.
    """
    for name in REQUIRED_FIELDS:
        if name not in data:
            raise AnalysisValidationError(f"Analysis result missing required field: {name}")
    lists = {name: _build_string_list(name, data[name]) for name in _LIST_FIELDS}
    scalars = {name: _build_scalar(name, data[name]) for name in _SCALAR_FIELDS}
    return AnalysisResult(**lists, **scalars)


def _build_string_list(name: str, raw: Any) -> list[str]:
    if not isinstance(raw, list):
        raise AnalysisValidationError(f"'{name}' must be a list")
    if not raw:
        raise AnalysisValidationError(f"'{name}' must have at least one entry")
    for index, item in enumerate(raw):
        if not isinstance(item, str):
            raise AnalysisValidationError(f"'{name}[{index}]' must be a string")
    return list(raw)


def _build_scalar(name: str, raw: Any) -> str:
    if raw is None:
        return NOT_FOUND
    if isinstance(raw, bool) or not isinstance(raw, (str, int, float)):
        raise AnalysisValidationError(f"'{name}' must be a string")
    return str(raw)
