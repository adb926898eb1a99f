from typing import Literal

ExtractionMethod = Literal["direct", "sync-ocr", "async-ocr"]


class ExtractionError(Exception):
    """Raised when text cannot be extracted from a file.

    Carries the file name, the method that failed and the underlying cause.
    storage_key is set when the file was uploaded before the failure.
    """

    def __init__(
        self,
        file_name: str,
        method: ExtractionMethod,
        cause: Exception,
        storage_key: str | None = None,
    ) -> None:
        super().__init__(f"Text extraction failed for {file_name} using {method}: {cause}")
        self.file_name = file_name
        self.method = method
        self.cause = cause
        self.storage_key = storage_key
