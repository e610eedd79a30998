"""
Abstract AI provider interface.

Defines the contract that all AI/LLM providers must implement.
This allows swapping between different AI services (Claude, OpenAI, etc.)
without changing application code.

Example:
    from common.ai import AIProvider, ClaudeProvider, OpenAIProvider

    def get_ai_provider(settings) -> AIProvider:
        if settings.AI_PROVIDER == "openai":
            return OpenAIProvider(api_key=settings.OPENAI_API_KEY)
        return ClaudeProvider(api_key=settings.CLAUDE_API_KEY)
"""

from abc import ABC, abstractmethod


class AIProvider(ABC):
    """
    Abstract AI provider interface.

    Implement this for different LLM services. The contract is
    "prompt text in, completion text out".
    """

    name: str = "base"

    @abstractmethod
    async def chat(
        self,
        message: str,
        max_tokens: int = 1024,
        temperature: float = 0.7,
    ) -> str:
        """
        Send a fully assembled prompt as a single user message.

        Args:
            message: The prompt text
            max_tokens: Maximum tokens in the response
            temperature: Sampling temperature (0-1)

        Returns:
            The AI's response text
        """
        pass
