"""Google Gemini generation provider (default remote service).

Talks to the google-genai SDK's async surface. Gemini occasionally answers
with no text at all (safety blocks, transient backend issues); such
replies are re-requested with a short linear backoff.
"""

import asyncio
from typing import Any

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from ...errors import RemoteGenerationError
from ..base import GenerationProvider
from ..models import GenerationResult

EMPTY_REPLY_BACKOFF_SECONDS = 0.5


class GeminiProvider(GenerationProvider):
    """Gemini provider.

    Hidden design decisions:
    - SDK client construction from an API key
    - Re-requesting empty replies before reporting them
    - Translating SDK API errors into RemoteGenerationError
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.0-flash",
        max_retries: int = 3,
        **client_kwargs: Any
    ):
        """Create the provider.

        Args:
            api_key: Gemini API key
            model: Model name (gemini-2.0-flash, gemini-2.5-flash, ...)
            max_retries: Total attempts while replies come back empty
            **client_kwargs: Passed through to genai.Client
        """
        self._model = model
        self._max_retries = max(1, max_retries)
        self._client = genai.Client(api_key=api_key, **client_kwargs)

    @property
    def name(self) -> str:
        return "gemini"

    @property
    def model(self) -> str:
        return self._model

    def _extract_content(self, response: Any) -> str:
        """Concatenate the text parts of the first candidate ('' if none)."""
        for candidate in (response.candidates or [])[:1]:
            parts = candidate.content.parts if candidate.content else None
            texts = [part.text for part in parts or [] if getattr(part, "text", None)]
            if texts:
                return "".join(texts)

        # response.text raises on some blocked replies
        try:
            return response.text or ""
        except (ValueError, AttributeError):
            return ""

    @staticmethod
    def _usage(response: Any) -> dict[str, int] | None:
        meta = response.usage_metadata
        if not meta:
            return None
        return {
            "prompt_tokens": meta.prompt_token_count or 0,
            "completion_tokens": meta.candidates_token_count or 0,
            "total_tokens": meta.total_token_count or 0,
        }

    async def complete(
        self,
        prompt: str,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> GenerationResult:
        """Send the prompt to Gemini as a single user turn."""
        config = types.GenerateContentConfig(
            temperature=temperature,
            max_output_tokens=max_tokens,
            **kwargs
        )

        content = ""
        usage = None
        attempt = 0
        while True:
            try:
                response = await self._client.aio.models.generate_content(
                    model=self._model,
                    contents=prompt,
                    config=config
                )
            except genai_errors.APIError as e:
                raise RemoteGenerationError(f"Gemini request failed: {e}", provider=self.name) from e

            usage = self._usage(response) or usage
            content = self._extract_content(response)
            attempt += 1
            if content or attempt >= self._max_retries:
                break
            await asyncio.sleep(EMPTY_REPLY_BACKOFF_SECONDS * attempt)

        return GenerationResult(content=content, model=self._model, usage=usage)

    async def close(self) -> None:
        """Nothing to release; genai.Client holds no open session."""
