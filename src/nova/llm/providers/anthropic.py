"""Anthropic Claude generation provider.

Uses the official Anthropic Python SDK for async generation.
Reference: https://github.com/anthropics/anthropic-sdk-python
"""

from typing import Any

import anthropic
from anthropic import AsyncAnthropic

from ...errors import RemoteGenerationError
from ..base import GenerationProvider
from ..models import GenerationResult


class AnthropicProvider(GenerationProvider):
    """Anthropic Claude provider.

    Hidden design decisions:
    - Anthropic API client initialization
    - Required max_tokens default
    - Mapping SDK errors to RemoteGenerationError
    """

    def __init__(
        self,
        api_key: str,
        model: str = "claude-sonnet-4-20250514",
        base_url: str | None = None,
        **client_kwargs: Any
    ):
        self._model = model
        self._client = AsyncAnthropic(
            api_key=api_key,
            base_url=base_url,
            **client_kwargs
        )

    @property
    def name(self) -> str:
        return "anthropic"

    @property
    def model(self) -> str:
        return self._model

    async def complete(
        self,
        prompt: str,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> GenerationResult:
        """Generate a reply using the Messages API."""
        try:
            response = await self._client.messages.create(
                model=self._model,
                messages=[{"role": "user", "content": prompt}],
                temperature=temperature,
                max_tokens=max_tokens or 1024,
                **kwargs
            )
        except anthropic.AnthropicError as e:
            raise RemoteGenerationError(f"Anthropic request failed: {e}", provider=self.name) from e

        content = "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        )
        usage = {
            "prompt_tokens": response.usage.input_tokens,
            "completion_tokens": response.usage.output_tokens,
            "total_tokens": response.usage.input_tokens + response.usage.output_tokens
        }
        return GenerationResult(content=content, model=response.model, usage=usage)

    async def close(self) -> None:
        """Close the Anthropic client."""
        await self._client.close()
