from typing import Any

from .base import LLMProvider

SUPPORTED_PROVIDERS = ("openai", "anthropic", "gemini")


def create_llm_provider(provider: str, **config: Any) -> LLMProvider:
    """Create an LLM provider instance.

    Provider SDKs are imported lazily so only the selected one must load.

    Args:
        provider: Provider type ('openai', 'anthropic' or 'claude', 'gemini')
        **config: Provider-specific configuration
            For OpenAI:
                - api_key: str (required)
                - model: str (default: 'gpt-4o-mini')
                - base_url: str | None
            For Anthropic (Claude):
                - api_key: str (required)
                - model: str (default: 'claude-sonnet-4-20250514')
            For Gemini:
                - api_key: str (required)
                - model: str (default: 'gemini-2.5-flash')

    Returns:
        Initialized LLM provider instance

    Raises:
        ValueError: If provider type is not supported
        TypeError: If required configuration is missing

    Examples:
        >>> provider = create_llm_provider("gemini", api_key="...")
    """
    provider_lower = provider.lower()

    if provider_lower in ("anthropic", "claude"):
        provider_lower = "anthropic"
    if provider_lower not in SUPPORTED_PROVIDERS:
        raise ValueError(
            f"Unsupported provider: {provider}. "
            f"Supported providers: {', '.join(repr(p) for p in SUPPORTED_PROVIDERS)}"
        )
    if "api_key" not in config:
        raise TypeError(f"{provider_lower} provider requires 'api_key' in config")

    if provider_lower == "openai":
        from .providers.openai import OpenAIProvider
        return OpenAIProvider(**config)

    if provider_lower == "anthropic":
        from .providers.anthropic import AnthropicProvider
        return AnthropicProvider(**config)

    from .providers.gemini import GeminiProvider
    return GeminiProvider(**config)
