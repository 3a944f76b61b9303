"""Tests for generation providers and the provider factory."""
from types import SimpleNamespace
from unittest.mock import AsyncMock

import openai
import pytest
from hypothesis import given
from hypothesis import strategies as st

from conftest import FakeGenerator
from nova.errors import RemoteGenerationError
from nova.llm import (
    SUPPORTED_PROVIDERS,
    AnthropicProvider,
    DeepSeekProvider,
    GeminiProvider,
    GenerationProvider,
    OpenAIProvider,
    create_generation_provider,
)


class TestFactory:
    """Tests for create_generation_provider."""

    @pytest.mark.parametrize(
        "provider,cls,model",
        [
            ("gemini", GeminiProvider, "gemini-2.0-flash"),
            ("openai", OpenAIProvider, "gpt-4o-mini"),
            ("deepseek", DeepSeekProvider, "deepseek-chat"),
            ("anthropic", AnthropicProvider, "claude-sonnet-4-20250514"),
            ("Claude", AnthropicProvider, "claude-sonnet-4-20250514"),
        ],
    )
    def test_creates_provider(self, provider: str, cls: type, model: str):
        instance = create_generation_provider(provider, api_key="test-key")
        assert isinstance(instance, cls)
        assert instance.model == model

    def test_model_override(self):
        provider = create_generation_provider("gemini", api_key="test-key", model="gemini-2.5-flash")
        assert provider.model == "gemini-2.5-flash"
        assert provider.name == "gemini"

    def test_missing_api_key(self):
        with pytest.raises(TypeError, match="api_key"):
            create_generation_provider("gemini")

    @given(st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=12).filter(
        lambda name: name not in SUPPORTED_PROVIDERS and name != "claude"
    ))
    def test_unknown_provider(self, name: str):
        """Property test: any unknown name is rejected with ValueError."""
        with pytest.raises(ValueError, match="Unsupported provider"):
            create_generation_provider(name, api_key="test-key")

    def test_deepseek_is_openai_compatible(self):
        provider = create_generation_provider("deepseek", api_key="test-key")
        assert isinstance(provider, OpenAIProvider)
        assert provider.name == "deepseek"


class TestGenerate:
    """Tests for GenerationProvider.generate."""

    def test_cannot_instantiate_abstract_class(self):
        with pytest.raises(TypeError):
            GenerationProvider()

    @pytest.mark.asyncio
    async def test_strips_reply(self):
        assert await FakeGenerator(reply="\n Hello! \n").generate("hi") == "Hello!"

    @pytest.mark.asyncio
    async def test_empty_reply_raises(self):
        with pytest.raises(RemoteGenerationError) as exc_info:
            await FakeGenerator(reply="  ").generate("hi")
        assert exc_info.value.provider == "fake"

    @pytest.mark.asyncio
    async def test_context_manager_closes(self):
        generator = FakeGenerator()
        async with generator as entered:
            assert entered is generator
        assert generator.closed


def gemini_response(*texts: str, usage=None):
    parts = [SimpleNamespace(text=text) for text in texts]
    return SimpleNamespace(
        candidates=[SimpleNamespace(content=SimpleNamespace(parts=parts))] if parts else [],
        usage_metadata=usage,
        text="".join(texts) or None,
    )


class TestGemini:
    """Tests for the Gemini provider with a stubbed client."""

    def test_extract_content_joins_parts(self):
        provider = GeminiProvider(api_key="test-key")
        assert provider._extract_content(gemini_response("Hel", "lo")) == "Hello"

    def test_extract_content_without_candidates(self):
        provider = GeminiProvider(api_key="test-key")
        assert provider._extract_content(gemini_response()) == ""

    @pytest.mark.asyncio
    async def test_complete_reports_usage(self):
        provider = GeminiProvider(api_key="test-key")
        usage = SimpleNamespace(prompt_token_count=12, candidates_token_count=3, total_token_count=15)
        generate_content = AsyncMock(return_value=gemini_response("Paris.", usage=usage))
        provider._client = SimpleNamespace(aio=SimpleNamespace(models=SimpleNamespace(generate_content=generate_content)))

        result = await provider.complete("capital of france?")

        assert result.content == "Paris."
        assert result.usage == {"prompt_tokens": 12, "completion_tokens": 3, "total_tokens": 15}
        assert generate_content.await_args.kwargs["model"] == "gemini-2.0-flash"
        assert generate_content.await_args.kwargs["contents"] == "capital of france?"

    @pytest.mark.asyncio
    async def test_empty_reply_is_retried(self):
        provider = GeminiProvider(api_key="test-key", max_retries=2)
        generate_content = AsyncMock(side_effect=[gemini_response(), gemini_response("Second try")])
        provider._client = SimpleNamespace(aio=SimpleNamespace(models=SimpleNamespace(generate_content=generate_content)))

        assert await provider.generate("hello") == "Second try"
        assert generate_content.await_count == 2


class TestOpenAICompatible:
    """Tests for the OpenAI provider with a stubbed client."""

    @pytest.mark.asyncio
    async def test_sdk_error_is_wrapped(self):
        provider = OpenAIProvider(api_key="test-key")
        create = AsyncMock(side_effect=openai.OpenAIError("rate limited"))
        provider._client = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))

        with pytest.raises(RemoteGenerationError, match="rate limited") as exc_info:
            await provider.generate("hello")
        assert exc_info.value.provider == "openai"

    @pytest.mark.asyncio
    async def test_single_user_message(self):
        provider = DeepSeekProvider(api_key="test-key")
        message = SimpleNamespace(content="Hi there")
        response = SimpleNamespace(choices=[SimpleNamespace(message=message)], usage=None, model="deepseek-chat")
        create = AsyncMock(return_value=response)
        provider._client = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))

        result = await provider.complete("hello", max_tokens=50)

        assert result.content == "Hi there"
        assert create.await_args.kwargs["messages"] == [{"role": "user", "content": "hello"}]
        assert create.await_args.kwargs["max_tokens"] == 50


class TestAnthropic:
    """Tests for the Anthropic provider with a stubbed client."""

    @pytest.mark.asyncio
    async def test_joins_text_blocks(self):
        provider = AnthropicProvider(api_key="test-key")
        response = SimpleNamespace(
            content=[
                SimpleNamespace(type="text", text="Hello "),
                SimpleNamespace(type="tool_use", name="ignored"),
                SimpleNamespace(type="text", text="world"),
            ],
            usage=SimpleNamespace(input_tokens=5, output_tokens=2),
            model="claude-sonnet-4-20250514",
        )
        provider._client = SimpleNamespace(messages=SimpleNamespace(create=AsyncMock(return_value=response)))

        result = await provider.complete("hi")

        assert result.content == "Hello world"
        assert result.usage["total_tokens"] == 7
