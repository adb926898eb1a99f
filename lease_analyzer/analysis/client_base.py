from abc import ABC, abstractmethod


class BaseAnalysisClient(ABC):
    """Contract for provider-specific text generation clients."""

    @abstractmethod
    def complete(
        self,
        *,
        model: str,
        prompt: str,
        max_tokens: int,
        temperature: float,
    ) -> str:
        """Return provider response as plain text."""
