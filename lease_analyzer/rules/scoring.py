"""Domain scoring rules over a completed lease analysis.

All functions are pure. Royalty, acreage and term are free text produced by
the model, so every extractor returns None when no usable number is present
or when the field carries an error sentinel.
"""

import re
from dataclasses import dataclass
from typing import Literal

from lease_analyzer.analysis.models import AnalysisResult
from lease_analyzer.rules.validation import is_error_value, is_missing_value

ContractSize = Literal["small", "medium", "large", "unknown"]

STANDARD_ROYALTY_PERCENT = 12.5
BELOW_MARKET_ROYALTY_PERCENT = 10.0
HIGH_ROYALTY_PERCENT = 20.0
LARGE_ACREAGE = 1000.0
COMPLEX_PARTY_COUNT = 4
HIGH_RISK_THRESHOLD = 70

CRITICAL_KEYWORDS = (
    "unusual",
    "problematic",
    "risk",
    "concern",
    "warning",
    "issue",
    "potential problem",
    "non-standard",
    "deviation",
    "conflict",
    "ambiguous",
    "unclear",
)

_PERCENT = re.compile(r"(\d+(?:\.\d+)?)\s*%")
_FRACTION = re.compile(r"(\d+)/(\d+)")
_DECIMAL = re.compile(r"(?<![\d.])0\.(\d+)")
_ACREAGE = re.compile(r"(\d+(?:\.\d+)?)\s*(?:acres?)?", re.IGNORECASE)
_TERM_YEARS = re.compile(r"(\d+)[-\s]*years?", re.IGNORECASE)


def extract_royalty_percentage(royalty: str) -> float | None:
    """Read a royalty as a percentage: "12.5%", "1/8" or "0.125"."""
    if not royalty or is_error_value(royalty):
        return None
    percent = _PERCENT.search(royalty)
    if percent:
        return float(percent.group(1))
    fraction = _FRACTION.search(royalty)
    if fraction:
        numerator, denominator = int(fraction.group(1)), int(fraction.group(2))
        if denominator != 0:
            return numerator / denominator * 100
    decimal = _DECIMAL.search(royalty)
    if decimal:
        return float(f"0.{decimal.group(1)}") * 100
    return None


def is_royalty_above_standard(royalty: str) -> bool:
    percentage = extract_royalty_percentage(royalty)
    return percentage is not None and percentage > STANDARD_ROYALTY_PERCENT


def is_royalty_below_market(royalty: str) -> bool:
    percentage = extract_royalty_percentage(royalty)
    return percentage is not None and percentage < BELOW_MARKET_ROYALTY_PERCENT


def extract_acreage(acreage: str) -> float | None:
    if not acreage or is_error_value(acreage):
        return None
    match = _ACREAGE.search(acreage)
    return float(match.group(1)) if match else None


def classify_contract_size(acreage: str) -> ContractSize:
    value = extract_acreage(acreage)
    if value is None:
        return "unknown"
    if value < 50:
        return "small"
    if value < 500:
        return "medium"
    return "large"


def extract_term_years(term: str) -> int | None:
    if not term or is_error_value(term):
        return None
    match = _TERM_YEARS.search(term)
    return int(match.group(1)) if match else None


def is_standard_term(term: str) -> bool:
    years = extract_term_years(term)
    return years is not None and 3 <= years <= 5


def total_parties(lessors: list[str], lessees: list[str]) -> int:
    return sum(1 for party in [*lessors, *lessees] if not is_error_value(party))


def is_complex_agreement(lessors: list[str], lessees: list[str]) -> bool:
    return total_parties(lessors, lessees) > COMPLEX_PARTY_COUNT


def critical_insights(insights: list[str]) -> list[str]:
    return [
        insight
        for insight in insights
        if any(keyword in insight.lower() for keyword in CRITICAL_KEYWORDS)
    ]


def calculate_risk_score(analysis: AnalysisResult) -> int:
    """Additive 0-100 risk score; higher means less favorable terms."""
    score = 0
    royalty = extract_royalty_percentage(analysis.royalty)
    if royalty is not None and royalty < BELOW_MARKET_ROYALTY_PERCENT:
        score += 20
    if royalty is not None and royalty > HIGH_ROYALTY_PERCENT:
        score += 10
    if is_complex_agreement(analysis.lessors, analysis.lessees):
        score += 15
    if not is_standard_term(analysis.term):
        score += 10
    score += min(len(critical_insights(analysis.insights)) * 5, 25)
    acreage = extract_acreage(analysis.acreage)
    if acreage is not None and acreage > LARGE_ACREAGE:
        score += 10
    return min(score, 100)


def calculate_quality_score(analysis: AnalysisResult) -> int:
    """Subtractive 0-100 completeness score; starts at 100."""
    score = 100
    if any(is_error_value(lessor) for lessor in analysis.lessors):
        score -= 20
    if any(is_error_value(lessee) for lessee in analysis.lessees):
        score -= 20
    if is_missing_value(analysis.acreage):
        score -= 15
    if is_missing_value(analysis.depths):
        score -= 10
    if is_missing_value(analysis.term):
        score -= 15
    if is_missing_value(analysis.royalty):
        score -= 20
    if len(analysis.insights) > 5:
        score += 10
    return max(0, min(score, 100))


def is_high_risk(analysis: AnalysisResult) -> bool:
    return calculate_risk_score(analysis) > HIGH_RISK_THRESHOLD


@dataclass(frozen=True)
class ContractSummary:
    primary_lessor: str
    primary_lessee: str
    royalty_percentage: float | None
    term_years: int | None
    acreage: float | None
    contract_size: ContractSize
    risk_score: int
    quality_score: int
    is_complex: bool
    critical_issues_count: int


def generate_contract_summary(analysis: AnalysisResult) -> ContractSummary:
    return ContractSummary(
        primary_lessor=analysis.lessors[0] if analysis.lessors else "Unknown",
        primary_lessee=analysis.lessees[0] if analysis.lessees else "Unknown",
        royalty_percentage=extract_royalty_percentage(analysis.royalty),
        term_years=extract_term_years(analysis.term),
        acreage=extract_acreage(analysis.acreage),
        contract_size=classify_contract_size(analysis.acreage),
        risk_score=calculate_risk_score(analysis),
        quality_score=calculate_quality_score(analysis),
        is_complex=is_complex_agreement(analysis.lessors, analysis.lessees),
        critical_issues_count=len(critical_insights(analysis.insights)),
    )
