"""LLM Client Package"""

from moodcode.config import Config
from moodcode.errors import ConfigError
from moodcode.llm.base import CommitRewriter, LLMClient, LLMResponse, LLMError, SYSTEM_PROMPT
from moodcode.llm.claude import ClaudeClient
from moodcode.llm.groq import GroqClient
from moodcode.llm.ollama import OllamaClient
from moodcode.llm.rewriter import LLMCommitRewriter

PROVIDERS = {
    "groq": GroqClient,
    "claude": ClaudeClient,
    "ollama": OllamaClient,
}


def get_client(provider: str = "groq", model: str | None = None, config: Config | None = None) -> LLMClient:
    """Get an LLM client. Provider can be 'groq', 'claude' or 'ollama'."""
    if provider not in PROVIDERS:
        raise ConfigError(f"Unknown provider: {provider}. Use one of: {', '.join(PROVIDERS)}.")

    config = config or Config()
    return PROVIDERS[provider](
        model=model,
        temperature=config.temperature,
        max_tokens=config.max_tokens,
    )


def get_rewriter(provider: str = "groq", model: str | None = None, config: Config | None = None) -> CommitRewriter:
    client = get_client(provider=provider, model=model, config=config)
    return LLMCommitRewriter(client, config=config)


__all__ = [
    "CommitRewriter",
    "LLMClient",
    "LLMCommitRewriter",
    "LLMResponse",
    "LLMError",
    "ClaudeClient",
    "GroqClient",
    "OllamaClient",
    "get_client",
    "get_rewriter",
    "PROVIDERS",
    "SYSTEM_PROMPT",
]
