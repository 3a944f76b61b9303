from typing import Any

from .base import GenerationProvider
from .providers import AnthropicProvider, DeepSeekProvider, GeminiProvider, OpenAIProvider

SUPPORTED_PROVIDERS = ("gemini", "openai", "deepseek", "anthropic")


def create_generation_provider(provider: str, **config: Any) -> GenerationProvider:
    """Create a remote generation provider.

    The provider is meant to be created once at bootstrap and injected
    into every ConversationSession.

    Args:
        provider: Provider type ('gemini', 'openai', 'deepseek', 'anthropic')
        **config: Provider-specific configuration
            - api_key: str (required for every provider)
            - model: str (defaults: 'gemini-2.0-flash', 'gpt-4o-mini',
              'deepseek-chat', 'claude-sonnet-4-20250514')

    Returns:
        Initialized provider instance

    Raises:
        ValueError: If provider type is not supported
        TypeError: If required configuration is missing

    Examples:
        >>> provider = create_generation_provider(
        ...     "gemini",
        ...     api_key="...",
        ...     model="gemini-2.0-flash"
        ... )
    """
    provider_lower = provider.lower()
    classes: dict[str, type[GenerationProvider]] = {
        "gemini": GeminiProvider,
        "openai": OpenAIProvider,
        "deepseek": DeepSeekProvider,
        "anthropic": AnthropicProvider,
        "claude": AnthropicProvider,
    }

    if provider_lower not in classes:
        raise ValueError(
            f"Unsupported provider: {provider}. "
            f"Supported providers: {', '.join(repr(p) for p in SUPPORTED_PROVIDERS)}"
        )

    if "api_key" not in config:
        raise TypeError(f"{provider_lower.capitalize()} provider requires 'api_key' in config")

    return classes[provider_lower](**config)
