"""
Anthropic Claude AI provider implementation.

Provides chat completions using the Anthropic API.

Example:
    from common.ai import ClaudeProvider

    claude = ClaudeProvider(api_key="your-api-key")
    response = await claude.chat("How much sleep do adults need?")
    print(response)
"""

from anthropic import AsyncAnthropic

from common.ai.base import AIProvider


class ClaudeProvider(AIProvider):
    """
    Anthropic Claude AI provider.

    Uses the async Anthropic SDK client for API calls.
    """

    name = "claude"

    def __init__(
        self,
        api_key: str,
        model: str = "claude-sonnet-4-5-20250929",
        max_retries: int = 3,
        timeout: float = 60.0,
    ):
        """
        Initialize Claude provider.

        Args:
            api_key: Anthropic API key
            model: Model to use (default: claude-sonnet-4-5-20250929)
            max_retries: Number of retries for failed requests
            timeout: Request timeout in seconds
        """
        self.client = AsyncAnthropic(
            api_key=api_key,
            max_retries=max_retries,
            timeout=timeout,
        )
        self.model = model

    async def chat(
        self,
        message: str,
        max_tokens: int = 1024,
        temperature: float = 0.7,
    ) -> str:
        """Send message and get response from Claude."""
        response = await self.client.messages.create(
            model=self.model,
            max_tokens=max_tokens,
            temperature=temperature,
            messages=[{"role": "user", "content": message}],
        )
        return "".join(
            block.text for block in response.content if block.type == "text"
        )
