"""Validation and priority rules over file metadata and analysis results."""

from dataclasses import dataclass, field

from lease_analyzer.analysis.models import (
    ERROR_SENTINEL,
    NOT_FOUND,
    UNAVAILABLE_SENTINEL,
    AnalysisResult,
)

MAX_FILE_NAME_LENGTH = 255
DEFAULT_MAX_FILE_SIZE = 50 * 1024 * 1024

FILE_TYPE_LABELS: dict[str, str] = {
    "pdf": "PDF Document",
    "txt": "Text Document",
    "doc": "Word Document",
    "docx": "Word Document",
    "png": "Image",
    "jpg": "Image",
    "jpeg": "Image",
    "gif": "Image",
    "bmp": "Image",
    "tiff": "Image",
}

SUPPORTED_MIME_TYPES = frozenset({
    "application/pdf",
    "text/plain",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "image/png",
    "image/jpeg",
    "image/gif",
    "image/bmp",
    "image/tiff",
})

TYPE_PRIORITY: dict[str, int] = {
    "txt": 10,
    "pdf": 5,
    "doc": 3,
    "docx": 3,
    "png": 2,
    "jpg": 2,
    "jpeg": 2,
    "gif": 1,
    "bmp": 1,
    "tiff": 1,
}

_ERROR_MARKERS = (ERROR_SENTINEL, UNAVAILABLE_SENTINEL)
_FAILURE_INSIGHT_MARKERS = ("Failed to process", "Contract analysis failed")


@dataclass(frozen=True)
class MetadataValidation:
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


@dataclass(frozen=True)
class FileTypeSupport:
    is_supported: bool
    file_type: str


def file_extension(file_name: str) -> str:
    """Lowercased extension without the dot; empty for dotfiles or no dot."""
    dot = file_name.rfind(".")
    return file_name[dot + 1:].lower() if dot > 0 else ""


def validate_file_metadata(
    file_name: str,
    file_size: int,
    max_size: int = DEFAULT_MAX_FILE_SIZE,
) -> MetadataValidation:
    errors: list[str] = []
    if not file_name or not file_name.strip():
        errors.append("File name cannot be empty")
    if len(file_name) > MAX_FILE_NAME_LENGTH:
        errors.append(f"File name cannot exceed {MAX_FILE_NAME_LENGTH} characters")
    if file_size > max_size:
        errors.append(
            f"File size ({file_size / 1024 / 1024:.1f}MB) exceeds maximum allowed "
            f"size of {max_size / 1024 / 1024:.0f}MB"
        )
    if file_size <= 0:
        errors.append("File size must be greater than 0")
    return MetadataValidation(errors=errors)


def is_supported_file_type(
    file_name: str,
    mime_type: str | None = None,
    extensions: frozenset[str] | None = None,
    mime_types: frozenset[str] | None = None,
) -> FileTypeSupport:
    """A file is supported when either its extension or its MIME type is allowed."""
    allowed_extensions = extensions if extensions is not None else frozenset(FILE_TYPE_LABELS)
    allowed_mime_types = mime_types if mime_types is not None else SUPPORTED_MIME_TYPES
    extension = file_extension(file_name)
    supported = extension in allowed_extensions or (
        mime_type is not None and mime_type in allowed_mime_types
    )
    return FileTypeSupport(
        is_supported=supported,
        file_type=FILE_TYPE_LABELS.get(extension, "Unknown"),
    )


def processing_priority(file_name: str, file_size: int) -> int:
    """Higher is processed first: fast types and small files win."""
    priority = TYPE_PRIORITY.get(file_extension(file_name), 1)
    size_mb = file_size / (1024 * 1024)
    if size_mb < 1:
        priority += 5
    elif size_mb < 5:
        priority += 2
    elif size_mb > 20:
        priority -= 2
    return max(1, priority)


def is_error_value(value: str) -> bool:
    return any(marker in value for marker in _ERROR_MARKERS)


def is_missing_value(value: str) -> bool:
    return value == NOT_FOUND or is_error_value(value)


def has_processing_errors(analysis: AnalysisResult) -> bool:
    return (
        any(is_error_value(lessor) for lessor in analysis.lessors)
        or any(is_error_value(lessee) for lessee in analysis.lessees)
        or any(
            marker in insight
            for insight in analysis.insights
            for marker in _FAILURE_INSIGHT_MARKERS
        )
    )


def has_required_fields(analysis: AnalysisResult) -> bool:
    return (
        len(analysis.lessors) > 0
        and len(analysis.lessees) > 0
        and analysis.acreage != NOT_FOUND
        and analysis.depths != NOT_FOUND
        and analysis.term != NOT_FOUND
        and analysis.royalty != NOT_FOUND
        and len(analysis.insights) > 0
    )


def is_analysis_successful(analysis: AnalysisResult) -> bool:
    return not has_processing_errors(analysis) and has_required_fields(analysis)
