"""Abstract generative-model interface — port for text generation providers."""

from abc import ABC, abstractmethod


class GenerativeModelClient(ABC):
    """Port — single-shot prompt in, text out."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Unique name identifying this provider (e.g. 'gemini')."""
        ...

    @abstractmethod
    async def generate_content(self, prompt: str, model: str) -> str:
        """Send one prompt and return the generated text.

        Args:
            prompt: The full prompt text.
            model: The model identifier (e.g. 'gemini-3-flash-preview').

        Returns:
            The generated text, possibly empty.

        Raises:
            LLMProviderError: If the provider returns an error.
        """
        ...
