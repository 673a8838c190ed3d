"""LLM Base Classes and Shared Code"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, asdict
from typing import Optional


@dataclass
class GenerationParams:
    """Sampling settings passed through to the provider as-is."""
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    top_p: Optional[float] = None

    def as_kwargs(self) -> dict:
        """Request keyword arguments, leaving unset values to the provider."""
        return {k: v for k, v in asdict(self).items() if v is not None}


@dataclass
class LLMResponse:
    """Structured response from any LLM provider."""
    content: str
    model: str = ""
    tokens_used: int = 0


class LLMError(Exception):
    """Raised when LLM operations fail."""
    pass


class LLMClient(ABC):
    """Abstract base for LLM clients. One call per generate(), no retries."""

    @abstractmethod
    def generate(self, system: str, messages: list[str]) -> LLMResponse:
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass
