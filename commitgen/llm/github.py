"""GitHub Models LLM Client (OpenAI-compatible endpoint)"""

import os

from commitgen.llm.base import LLMClient, LLMResponse, LLMError, GenerationParams


class GitHubModelsClient(LLMClient):
    """GitHub Models client. Requires GITHUB_ACCESS_TOKEN env var."""

    DEFAULT_MODEL = "gpt-4o-mini"
    BASE_URL = "https://models.inference.ai.azure.com"

    def __init__(self, api_key: str | None = None, model: str | None = None,
                 params: GenerationParams | None = None):
        self.api_key = api_key or os.environ.get("GITHUB_ACCESS_TOKEN")
        self.model = model or self.DEFAULT_MODEL
        self.params = params or GenerationParams()

        if not self.api_key:
            raise LLMError(
                "GitHub access token is missing. Set GITHUB_ACCESS_TOKEN environment variable:\n"
                "  export GITHUB_ACCESS_TOKEN='your-token-here'"
            )

        try:
            from openai import OpenAI
            self._client = OpenAI(api_key=self.api_key, base_url=self.BASE_URL)
        except ImportError:
            raise LLMError(
                "OpenAI SDK not installed. Run:\n"
                "  pip install openai"
            )

    @property
    def name(self) -> str:
        return f"GitHub Models ({self.model})"

    def generate(self, system: str, messages: list[str]) -> LLMResponse:
        from openai import AuthenticationError, OpenAIError

        chat = [{"role": "system", "content": system}]
        chat.extend({"role": "user", "content": m} for m in messages)

        try:
            response = self._client.chat.completions.create(
                model=self.model,
                messages=chat,
                **self.params.as_kwargs()
            )
        except AuthenticationError:
            raise LLMError("Invalid access token. Check your GITHUB_ACCESS_TOKEN.")
        except OpenAIError as e:
            raise LLMError(f"GitHub Models API error: {e}")

        content = ""
        if response.choices:
            content = response.choices[0].message.content or ""

        return LLMResponse(
            content=content,
            model=self.model,
            tokens_used=response.usage.total_tokens if response.usage else 0
        )
