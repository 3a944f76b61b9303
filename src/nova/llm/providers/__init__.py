from .anthropic import AnthropicProvider
from .gemini import GeminiProvider
from .openai import DeepSeekProvider, OpenAIProvider

__all__ = ["AnthropicProvider", "DeepSeekProvider", "GeminiProvider", "OpenAIProvider"]
