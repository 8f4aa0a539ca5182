"""LLM provider module for csvchat.

Thin async adapters over vendor SDKs, used by the answer provider.
"""

from .base import LLMProvider
from .factory import SUPPORTED_PROVIDERS, create_llm_provider
from .models import ChatMessage, LLMResponse

__all__ = [
    "LLMProvider",
    "SUPPORTED_PROVIDERS",
    "create_llm_provider",
    "ChatMessage",
    "LLMResponse",
]
