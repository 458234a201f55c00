"""LLM-backed CommitRewriter: one call, cleaned output, fallback on failure."""

import logging

from moodcode.cleaner import clean_response
from moodcode.config import Config
from moodcode.llm.base import CommitRewriter, LLMClient, LLMError
from moodcode.prompts import PromptBuilder, PromptConfig

logger = logging.getLogger(__name__)


class LLMCommitRewriter(CommitRewriter):
    """Sends a single prompt per request; transport errors degrade to the fallback."""

    def __init__(self, client: LLMClient, builder: PromptBuilder | None = None, config: Config | None = None):
        config = config or Config()
        self.client = client
        self.builder = builder or PromptBuilder(PromptConfig(
            max_subject_length=config.max_subject_length,
            max_diff_chars=config.max_diff_chars,
        ))

    def rewrite(self, diff_text: str, current_message: str) -> str:
        prompt = self.builder.build_rewrite(diff_text, current_message)
        return self._complete(prompt, fallback=current_message)

    def generate_from_diff(self, diff_text: str) -> str:
        prompt = self.builder.build_from_diff(diff_text)
        return self._complete(prompt, fallback="")

    def _complete(self, prompt: str, fallback: str) -> str:
        logger.debug("Sending prompt to %s (%d chars)", self.client.name, len(prompt))
        try:
            response = self.client.generate(prompt)
        except LLMError as e:
            logger.warning("Error rewriting commit via %s: %s", self.client.name, e)
            logger.debug("Rewrite failure details", exc_info=True)
            return clean_response("", fallback)

        logger.debug("Raw response (%d tokens): %r", response.tokens_used, response.content)
        return clean_response(response.content, fallback)
