"""Answer provider module for csvchat.

The answer provider is the only external call in a turn.
"""

from .base import AnswerProvider
from .llm import LLMAnswerProvider, build_messages
from .models import AnswerRequest

__all__ = [
    "AnswerProvider",
    "AnswerRequest",
    "LLMAnswerProvider",
    "build_messages",
]
