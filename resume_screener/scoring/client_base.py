from abc import ABC, abstractmethod


class BaseScoringClient(ABC):
    """Contract for provider-specific text generation clients."""

    @abstractmethod
    def generate(
        self,
        *,
        model: str,
        prompt: str,
        max_output_tokens: int,
        temperature: float,
    ) -> str:
        """Return the provider's raw text answer for a single user prompt."""
