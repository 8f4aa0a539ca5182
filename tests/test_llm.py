"""Unit tests for the LLM module."""
from types import SimpleNamespace
from unittest.mock import AsyncMock

import anthropic
import httpx
import openai
import pytest

from csvchat.errors import QuotaExceededError
from csvchat.llm import ChatMessage, LLMProvider, create_llm_provider
from csvchat.llm.providers.gemini import is_quota_error


def rate_limit_response(url: str) -> httpx.Response:
    return httpx.Response(429, request=httpx.Request("POST", url))


class TestLLMFactory:
    """Tests for create_llm_provider."""

    def test_llm_provider_is_abstract(self):
        """Test that LLMProvider cannot be instantiated directly."""
        with pytest.raises(TypeError):
            LLMProvider()  # type: ignore

    def test_unsupported_provider(self):
        """Test that an unknown provider name is rejected."""
        with pytest.raises(ValueError, match="Unsupported provider"):
            create_llm_provider("deepseek", api_key="key")

    def test_missing_api_key(self):
        """Test that an API key is required."""
        with pytest.raises(TypeError, match="api_key"):
            create_llm_provider("openai")

    def test_create_openai(self):
        """Test creating an OpenAI provider."""
        provider = create_llm_provider("openai", api_key="test-key", model="gpt-4o")
        assert provider.model == "gpt-4o"

    def test_claude_alias(self):
        """Test that 'claude' selects the Anthropic provider."""
        from csvchat.llm.providers.anthropic import AnthropicProvider

        provider = create_llm_provider("Claude", api_key="test-key")
        assert isinstance(provider, AnthropicProvider)


class TestQuotaMapping:
    """Tests for translating rate-limit errors."""

    @pytest.mark.asyncio
    async def test_openai_rate_limit(self):
        """Test that OpenAI 429s become QuotaExceededError."""
        provider = create_llm_provider("openai", api_key="test-key")
        error = openai.RateLimitError(
            "rate limited",
            response=rate_limit_response("https://api.openai.com/v1/chat/completions"),
            body=None,
        )
        provider._client.chat.completions.create = AsyncMock(side_effect=error)

        with pytest.raises(QuotaExceededError):
            await provider.chat_completion([ChatMessage(role="user", content="hi")])

    @pytest.mark.asyncio
    async def test_anthropic_rate_limit(self):
        """Test that Anthropic 429s become QuotaExceededError."""
        provider = create_llm_provider("anthropic", api_key="test-key")
        error = anthropic.RateLimitError(
            "rate limited",
            response=rate_limit_response("https://api.anthropic.com/v1/messages"),
            body=None,
        )
        provider._client.messages.create = AsyncMock(side_effect=error)

        with pytest.raises(QuotaExceededError):
            await provider.chat_completion([
                ChatMessage(role="system", content="sys"),
                ChatMessage(role="user", content="hi"),
            ])

    @pytest.mark.parametrize(("code", "status", "expected"), [
        (429, None, True),
        (400, "RESOURCE_EXHAUSTED", True),
        (500, "INTERNAL", False),
        (400, None, False),
    ])
    def test_gemini_quota_detection(self, code, status, expected):
        """Test which Gemini API errors count as quota errors."""
        assert is_quota_error(SimpleNamespace(code=code, status=status)) is expected

    def test_quota_error_message(self):
        """Test the default quota error text."""
        assert str(QuotaExceededError()) == "API quota exceeded. Please try again later."
