class AnalysisError(Exception):
    """Raised when contract analysis fails."""


class AnalysisValidationError(AnalysisError):
    """Raised when the model output does not have the expected shape."""


class AnalysisNetworkError(AnalysisError):
    """Raised when the model provider call fails due to network/infrastructure issues."""
