"""Ollama LLM Client for Local Models"""

import http.client
import json
import os
import socket
import urllib.error
import urllib.request

from moodcode.llm.base import LLMClient, LLMResponse, LLMError, SYSTEM_PROMPT


class OllamaClient(LLMClient):
    """Ollama client for local models. Requires: ollama serve"""

    DEFAULT_MODEL = "llama3.1:8b"
    DEFAULT_HOST = "http://localhost:11434"
    DEFAULT_TIMEOUT = 300  # 5 minutes for CPU inference
    MAX_TOKENS = 100
    TEMPERATURE = 0.3

    def __init__(self, model: str | None = None, host: str | None = None,
                 temperature: float | None = None, max_tokens: int | None = None):
        self.model = model or self.DEFAULT_MODEL
        self.host = host or os.environ.get("OLLAMA_HOST", self.DEFAULT_HOST)
        self.timeout = int(os.environ.get("MOODCODE_TIMEOUT", self.DEFAULT_TIMEOUT))
        self.temperature = self.TEMPERATURE if temperature is None else temperature
        self.max_tokens = max_tokens or self.MAX_TOKENS
        self._verify_connection()

    @property
    def name(self) -> str:
        return f"Ollama ({self.model})"

    def _verify_connection(self) -> None:
        """Check if Ollama is running and accessible."""
        try:
            req = urllib.request.Request(f"{self.host}/api/tags")
            with urllib.request.urlopen(req, timeout=5):
                pass
        except (urllib.error.URLError, OSError) as e:
            raise LLMError("Ollama not running. Start with: ollama serve") from e

    def _call_api(self, prompt: str) -> dict:
        """Make a single API call to Ollama."""
        payload = {
            "model": self.model,
            "prompt": prompt,
            "system": SYSTEM_PROMPT,
            "stream": False,
            "options": {
                "temperature": self.temperature,
                "num_predict": self.max_tokens,
            }
        }

        data = json.dumps(payload).encode('utf-8')
        req = urllib.request.Request(
            f"{self.host}/api/generate", data=data, headers={"Content-Type": "application/json"}
        )
        with urllib.request.urlopen(req, timeout=self.timeout) as response:
            return json.loads(response.read().decode('utf-8'))

    def generate(self, prompt: str) -> LLMResponse:
        try:
            result = self._call_api(prompt)
        except urllib.error.HTTPError as e:
            if e.code == 404:
                raise LLMError(f"Model '{self.model}' not found. Run: ollama pull {self.model}") from e
            raise LLMError(f"Ollama error ({e.code}): {e.reason}") from e
        except urllib.error.URLError as e:
            if isinstance(e.reason, socket.timeout):
                raise LLMError(f"Request timed out after {self.timeout}s. Increase timeout: set MOODCODE_TIMEOUT=600") from e
            raise LLMError(f"Ollama request failed: {e}") from e
        except socket.timeout as e:
            raise LLMError(f"Request timed out after {self.timeout}s. Increase timeout: set MOODCODE_TIMEOUT=600") from e
        except json.JSONDecodeError as e:
            raise LLMError("Invalid response from Ollama.") from e
        except http.client.HTTPException as e:
            raise LLMError(f"Incomplete response from Ollama: {e}") from e
        except OSError as e:
            raise LLMError(f"Connection to Ollama lost: {e}") from e

        return LLMResponse(
            content=result.get("response", "").strip(),
            model=self.model,
            tokens_used=result.get("eval_count", 0)
        )
