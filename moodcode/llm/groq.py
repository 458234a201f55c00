"""Groq LLM Client (OpenAI-compatible chat completions API)"""

import os

from moodcode.errors import ConfigError
from moodcode.llm.base import LLMClient, LLMResponse, LLMError, SYSTEM_PROMPT


class GroqClient(LLMClient):
    """Groq API client. Requires GROQ_API_KEY env var."""

    BASE_URL = "https://api.groq.com/openai/v1/"
    DEFAULT_MODEL = "llama-3.1-8b-instant"
    MAX_TOKENS = 100
    TEMPERATURE = 0.3

    def __init__(self, api_key: str | None = None, model: str | None = None,
                 temperature: float | None = None, max_tokens: int | None = None):
        self.api_key = api_key or os.environ.get("GROQ_API_KEY")
        self.model = model or self.DEFAULT_MODEL
        self.temperature = self.TEMPERATURE if temperature is None else temperature
        self.max_tokens = max_tokens or self.MAX_TOKENS

        if not self.api_key:
            raise ConfigError(
                "GROQ_API_KEY environment variable not set:\n"
                "  export GROQ_API_KEY='your-key-here'"
            )

        try:
            from openai import OpenAI
        except ImportError:
            raise ConfigError(
                "OpenAI SDK not installed. Run:\n"
                "  pip install openai"
            )
        self._client = OpenAI(api_key=self.api_key, base_url=self.BASE_URL)

    @property
    def name(self) -> str:
        return f"Groq ({self.model})"

    def generate(self, prompt: str) -> LLMResponse:
        from openai import APIError, AuthenticationError

        try:
            response = self._client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )
        except AuthenticationError as e:
            raise LLMError("Invalid API key. Check your GROQ_API_KEY.") from e
        except APIError as e:
            raise LLMError(f"Groq API error: {e.message}") from e

        content = ""
        if response.choices:
            content = (response.choices[0].message.content or "").strip()

        return LLMResponse(
            content=content,
            model=self.model,
            tokens_used=response.usage.total_tokens if response.usage else 0,
        )
