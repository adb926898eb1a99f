class OcrError(Exception):
    """Raised when an OCR call fails."""


class OcrNoTextError(OcrError):
    """Raised when the OCR response carries no text blocks."""


class OcrJobFailedError(OcrError):
    """Raised when an asynchronous detection job reports FAILED."""


class OcrJobTimeoutError(OcrError):
    """Raised when a detection job does not finish within the allowed number of polls."""


class OcrInvalidJobError(OcrError):
    """Raised when a job id is unknown or has expired."""
