class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class ValidationError(ProcessorError):
    """Raised when a single file fails the batch pre-check."""


class AggregateValidationError(ValidationError):
    """Raised when one or more files in a batch fail validation.

    Raised before any extraction or analysis work starts.
    """

    def __init__(self, errors: list[str]) -> None:
        super().__init__(f"File validation failed: {', '.join(errors)}")
        self.errors = list(errors)


class FileReadError(ProcessorError):
    """Raised when a local file cannot be read."""
