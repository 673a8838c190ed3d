"""Claude (Anthropic) LLM Client"""

import os

from commitgen.llm.base import LLMClient, LLMResponse, LLMError, GenerationParams


class ClaudeClient(LLMClient):
    """Claude API client. Requires ANTHROPIC_API_KEY env var."""

    DEFAULT_MODEL = "claude-sonnet-4-20250514"
    MAX_TOKENS = 1000

    def __init__(self, api_key: str | None = None, model: str | None = None,
                 params: GenerationParams | None = None):
        self.api_key = api_key or os.environ.get("ANTHROPIC_API_KEY")
        self.model = model or self.DEFAULT_MODEL
        self.params = params or GenerationParams()

        if not self.api_key:
            raise LLMError(
                "No API key found. Set ANTHROPIC_API_KEY environment variable:\n"
                "  export ANTHROPIC_API_KEY='your-key-here'"
            )

        try:
            from anthropic import Anthropic
            self._client = Anthropic(api_key=self.api_key)
        except ImportError:
            raise LLMError(
                "Anthropic SDK not installed. Run:\n"
                "  pip install anthropic"
            )

    @property
    def name(self) -> str:
        return f"Claude ({self.model})"

    def generate(self, system: str, messages: list[str]) -> LLMResponse:
        from anthropic import APIError, AuthenticationError

        kwargs = self.params.as_kwargs()
        # max_tokens is mandatory for the Messages API
        kwargs.setdefault("max_tokens", self.MAX_TOKENS)

        try:
            response = self._client.messages.create(
                model=self.model,
                system=system,
                messages=[{
                    "role": "user",
                    "content": [{"type": "text", "text": m} for m in messages],
                }],
                **kwargs
            )
        except AuthenticationError:
            raise LLMError("Invalid API key. Check your ANTHROPIC_API_KEY.")
        except APIError as e:
            raise LLMError(f"Claude API error: {e.message}")

        content = ""
        for block in response.content:
            if block.type == "text":
                content = block.text
                break

        return LLMResponse(
            content=content,
            model=self.model,
            tokens_used=response.usage.input_tokens + response.usage.output_tokens
        )
