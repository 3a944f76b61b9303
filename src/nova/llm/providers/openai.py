"""OpenAI-compatible generation providers (OpenAI and DeepSeek)."""

from typing import Any

import openai
from openai import AsyncOpenAI

from ...errors import RemoteGenerationError
from ..base import GenerationProvider
from ..models import GenerationResult


class OpenAIProvider(GenerationProvider):
    """OpenAI Chat Completions provider.

    Hidden design decisions:
    - OpenAI API client initialization
    - Single-turn message construction
    - Mapping SDK errors to RemoteGenerationError
    """

    provider_name = "openai"

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        base_url: str | None = None,
        organization: str | None = None,
        **client_kwargs: Any
    ):
        """Initialize OpenAI provider.

        Args:
            api_key: API key
            model: Default model to use
            base_url: Optional custom API base URL
            organization: Optional organization ID
            **client_kwargs: Additional kwargs for AsyncOpenAI client
        """
        self._model = model
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            organization=organization,
            **client_kwargs
        )

    @property
    def name(self) -> str:
        return self.provider_name

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
        """Generate a reply using the Chat Completions API."""
        params: dict[str, Any] = {
            "model": self._model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": temperature,
            **kwargs,
        }
        if max_tokens is not None:
            params["max_tokens"] = max_tokens

        try:
            response = await self._client.chat.completions.create(**params)
        except openai.OpenAIError as e:
            raise RemoteGenerationError(f"{self.name} request failed: {e}", provider=self.name) from e

        content = ""
        if response.choices:
            content = response.choices[0].message.content or ""

        usage = None
        if response.usage:
            usage = {
                "prompt_tokens": response.usage.prompt_tokens,
                "completion_tokens": response.usage.completion_tokens,
                "total_tokens": response.usage.total_tokens
            }

        return GenerationResult(content=content, model=response.model or self._model, usage=usage)

    async def close(self) -> None:
        """Close the OpenAI client."""
        await self._client.close()


class DeepSeekProvider(OpenAIProvider):
    """DeepSeek provider using its OpenAI-compatible API."""

    provider_name = "deepseek"

    def __init__(
        self,
        api_key: str,
        model: str = "deepseek-chat",
        base_url: str = "https://api.deepseek.com",
        **client_kwargs: Any
    ):
        super().__init__(api_key=api_key, model=model, base_url=base_url, **client_kwargs)
