"""Pure text normalization and quality heuristics for extracted contract text."""

import re

CONTRACT_KEYWORDS = (
    "lessor",
    "lessee",
    "royalty",
    "bonus",
    "lease",
    "mineral rights",
    "drilling",
    "production",
    "oil",
    "gas",
    "acreage",
    "term",
    "depth",
    "formation",
    "pooling",
    "unitization",
    "assignment",
)

_BLANK_RUN = re.compile(r"\n{3,}")
_LEADING_WS = re.compile(r"^[^\S\n]+", re.MULTILINE)


def normalize_contract_text(text: str) -> str:
    """Collapse CRLF, strip line indentation, squeeze blank-line runs, trim."""
    normalized = text.replace("\r\n", "\n")
    normalized = _LEADING_WS.sub("", normalized)
    normalized = _BLANK_RUN.sub("\n\n", normalized)
    return normalized.strip()


def extract_keywords(text: str) -> list[str]:
    lowered = text.lower()
    return [keyword for keyword in CONTRACT_KEYWORDS if keyword in lowered]


def calculate_text_quality(text: str) -> float:
    """Score extracted text between 0 and 1.

    Weighs length (saturating at 1000 chars), word count (saturating at
    100 words), keyword density and the presence of line structure.
    """
    if not text:
        return 0.0
    length_factor = min(len(text) / 1000, 1.0)
    word_factor = min(len(text.split()) / 100, 1.0)
    keyword_factor = len(extract_keywords(text)) / 10
    structure_factor = 0.2 if "\n" in text else 0.0
    score = length_factor * 0.3 + word_factor * 0.3 + keyword_factor * 0.3 + structure_factor
    return min(score, 1.0)
