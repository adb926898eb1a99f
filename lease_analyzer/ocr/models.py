from dataclasses import dataclass, field
from enum import Enum


class BlockType(str, Enum):
    PAGE = "PAGE"
    LINE = "LINE"
    WORD = "WORD"


class JobStatus(str, Enum):
    IN_PROGRESS = "IN_PROGRESS"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"
    PARTIAL_SUCCESS = "PARTIAL_SUCCESS"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class Block:
    """One OCR block; only LINE blocks carry extractable text."""

    block_type: str
    text: str = ""


@dataclass(frozen=True)
class DetectionPage:
    """One page of an asynchronous detection job's results."""

    status: JobStatus
    blocks: list[Block] = field(default_factory=list)
    next_token: str | None = None
    status_message: str | None = None


def line_text(blocks: list[Block]) -> str:
    """Join LINE block text in response order, one line per block."""
    return "\n".join(
        block.text for block in blocks if block.block_type == BlockType.LINE and block.text
    )
