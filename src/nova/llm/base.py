from abc import ABC, abstractmethod
from typing import Any

from ..errors import RemoteGenerationError
from .models import GenerationResult


class GenerationProvider(ABC):
    """Abstract base class for remote text-generation services.

    This module hides the design decision of which service answers the
    utterances the local rules cannot. The session only ever sees
    generate(prompt) -> text; implementations handle:
    - API client setup and authentication
    - Request/response format conversion
    - Wrapping SDK errors in RemoteGenerationError

    Supports async context manager protocol for proper resource cleanup:
        async with provider:
            text = await provider.generate(prompt)
        # Automatically cleaned up
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider identifier, e.g. 'gemini'."""

    @property
    @abstractmethod
    def model(self) -> str:
        """Default model name."""

    @abstractmethod
    async def complete(
        self,
        prompt: str,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> GenerationResult:
        """Send a single-turn prompt to the service.

        Args:
            prompt: Full prompt text
            temperature: Sampling temperature (0.0 to 2.0)
            max_tokens: Maximum tokens to generate
            **kwargs: Provider-specific parameters

        Returns:
            GenerationResult containing generated content and metadata

        Raises:
            RemoteGenerationError: On network, auth or quota failures
        """

    async def generate(self, prompt: str, **kwargs: Any) -> str:
        """Generate text for a prompt.

        Args:
            prompt: Full prompt text
            **kwargs: Passed through to complete()

        Returns:
            Non-empty generated text

        Raises:
            RemoteGenerationError: If the call fails or the reply is empty
        """
        result = await self.complete(prompt, **kwargs)
        text = result.content.strip()
        if not text:
            raise RemoteGenerationError(
                f"{self.name} returned an empty response", provider=self.name
            )
        return text

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""

    async def __aenter__(self) -> "GenerationProvider":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors raised by httpx
        transports that are torn down after the loop has stopped.
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
