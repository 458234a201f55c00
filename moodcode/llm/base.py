"""LLM Base Classes and Shared Code"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from moodcode.errors import LLMError


SYSTEM_PROMPT = """You are a senior software engineer who rewrites lazy git commit messages into precise ones.

Your standards:
- One subject line, imperative mood, under 72 characters
- Conventional commit format (type(scope): subject) whenever the change fits a type
- Specific verbs over vague ones (never "update", "change", "modify")
- Output the commit message and nothing else: no preamble, no markdown, no quotes"""


@dataclass
class LLMResponse:
    """Structured response from any LLM provider."""
    content: str
    model: str = ""
    tokens_used: int = 0


class LLMClient(ABC):
    """Abstract base for LLM transport clients."""

    @abstractmethod
    def generate(self, prompt: str) -> LLMResponse:
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass


class CommitRewriter(ABC):
    """Capability the processor depends on to propose a better message."""

    @abstractmethod
    def rewrite(self, diff_text: str, current_message: str) -> str:
        """Return an improved version of `current_message` for this diff."""
        pass

    @abstractmethod
    def generate_from_diff(self, diff_text: str) -> str:
        """Return a commit message written from the diff alone."""
        pass


__all__ = ["SYSTEM_PROMPT", "LLMResponse", "LLMClient", "CommitRewriter", "LLMError"]
