from .base import GenerationProvider
from .factory import SUPPORTED_PROVIDERS, create_generation_provider
from .models import GenerationResult
from .providers import AnthropicProvider, DeepSeekProvider, GeminiProvider, OpenAIProvider

__all__ = [
    "GenerationProvider",
    "GenerationResult",
    "SUPPORTED_PROVIDERS",
    "create_generation_provider",
    "AnthropicProvider",
    "DeepSeekProvider",
    "GeminiProvider",
    "OpenAIProvider",
]
