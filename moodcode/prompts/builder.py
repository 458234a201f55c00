"""Prompt Builder - Construct LLM prompts for rewriting commit messages."""

from dataclasses import dataclass

from moodcode import COMMIT_TYPES

TRUNCATION_MARKER = "\n... (truncated)"

# Before/after pairs shown to the model
REWRITE_EXAMPLES = [
    ("fix stuff", "fix: resolve user authentication validation error"),
    ("update", "feat: add user profile picture upload functionality"),
    ("test", "test: add unit tests for payment processing"),
]


@dataclass
class PromptConfig:
    """Knobs that shape the prompt."""
    max_subject_length: int = 72
    max_diff_chars: int = 2000


def truncate_diff(diff_text: str, max_chars: int) -> str:
    """Cut the diff to keep the prompt inside the model's context window."""
    if len(diff_text) <= max_chars:
        return diff_text
    return diff_text[:max_chars] + TRUNCATION_MARKER


class PromptBuilder:
    """Builds the two prompts the rewriter sends: rewrite and diff-only."""

    def __init__(self, config: PromptConfig | None = None):
        self.config = config or PromptConfig()

    def build_rewrite(self, diff_text: str, current_message: str) -> str:
        sections = [
            "Rewrite this git commit message to be clear and professional:",
            f'Current message: "{current_message}"',
            self._build_diff_section(diff_text),
            self._build_rules_section(),
            self._build_examples_section(),
            "Improved commit message:",
        ]
        return "\n\n".join(sections)

    def build_from_diff(self, diff_text: str) -> str:
        sections = [
            "Write a git commit message that describes these staged changes:",
            self._build_diff_section(diff_text),
            self._build_rules_section(),
            "Commit message:",
        ]
        return "\n\n".join(sections)

    def _build_diff_section(self, diff_text: str) -> str:
        diff = truncate_diff(diff_text or "", self.config.max_diff_chars)
        return f"Git changes:\n{diff}" if diff.strip() else "Git changes: (diff unavailable)"

    def _build_rules_section(self) -> str:
        types = ", ".join(f"{t}:" for t in COMMIT_TYPES)
        return f"""Rules:
- Keep it under {self.config.max_subject_length} characters
- Use imperative mood ("Add" not "Added")
- Be specific about what changed
- Follow conventional commits format when possible ({types})
- Return ONLY the improved commit message, nothing else
- No markdown, no quotes, no explanation"""

    def _build_examples_section(self) -> str:
        lines = [f'- "{before}" → "{after}"' for before, after in REWRITE_EXAMPLES]
        return "Examples:\n" + "\n".join(lines)
