"""LLM Client Package"""

from commitgen.llm.base import LLMClient, LLMResponse, LLMError, GenerationParams
from commitgen.llm.claude import ClaudeClient
from commitgen.llm.github import GitHubModelsClient

PROVIDERS = {
    "github": GitHubModelsClient,
    "claude": ClaudeClient,
}


def get_client(provider: str = "github", model: str | None = None,
               params: GenerationParams | None = None) -> LLMClient:
    """Get an LLM client. Provider can be 'github' or 'claude'."""
    if provider in PROVIDERS:
        return PROVIDERS[provider](model=model, params=params)

    raise LLMError(f"Unknown provider: {provider}. Use 'github' or 'claude'.")


__all__ = [
    "LLMClient",
    "LLMResponse",
    "LLMError",
    "GenerationParams",
    "ClaudeClient",
    "GitHubModelsClient",
    "get_client",
    "PROVIDERS",
]
