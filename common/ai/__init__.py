"""
AI module - Pluggable AI providers (Claude, OpenAI).
"""

from typing import Optional

from common.ai.base import AIProvider
from common.ai.claude import ClaudeProvider
from common.ai.openai import OpenAIProvider


def create_ai_provider(
    provider: str,
    api_key: Optional[str],
    model: Optional[str] = None,
) -> Optional[AIProvider]:
    """
    Build the configured provider, or None when no API key is set.

    Args:
        provider: "claude" or "openai"
        api_key: API key for that provider
        model: Optional model override

    Raises:
        ValueError: Unknown provider name
    """
    if not api_key:
        return None

    if provider == "openai":
        return OpenAIProvider(api_key=api_key, model=model) if model else OpenAIProvider(api_key=api_key)
    if provider == "claude":
        return ClaudeProvider(api_key=api_key, model=model) if model else ClaudeProvider(api_key=api_key)

    raise ValueError(f"Unknown AI provider: {provider}")


__all__ = ["AIProvider", "ClaudeProvider", "OpenAIProvider", "create_ai_provider"]
