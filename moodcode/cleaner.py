"""Response Cleaner - Collapse free-form LLM output into one commit message line.

Models ignore "return ONLY the commit message" often enough that every
response goes through an ordered list of extraction strategies. Each strategy
targets one failure mode (markdown fences, chatty preambles, prose with an
embedded header) and returns either a candidate line or None. The first
candidate wins; surrounding quotes are stripped last.
"""

import logging
import re
from typing import Callable

from moodcode import COMMIT_TYPE_NAMES, DEFAULT_MESSAGE

logger = logging.getLogger(__name__)

TYPES_PATTERN = '|'.join(COMMIT_TYPE_NAMES)

# type(scope): subject  /  type!: subject
CONVENTIONAL_RE = re.compile(rf'^({TYPES_PATTERN})(\([^)]*\))?!?: ')
EMBEDDED_RE = re.compile(rf'\b({TYPES_PATTERN})(\([^)]*\))?!?: .*\S')
# Optional language tag (bash, text, git, ...) alone on the opening fence line
FENCE_RE = re.compile(r'```(?:[\w+-]+(?=[ \t]*\n))?[ \t]*\n?(.*?)```', re.DOTALL)

# Lines that introduce the answer rather than being the answer
PREAMBLES = (
    "Here's", "Here’s", "Here is", "Based on", "Following", "This rewritten",
    "Sure", "Certainly",
)

# Removed from the start of the response, in order (case-insensitive)
PREFIX_PATTERNS = [
    r"(?:sure|certainly|of course|okay)[!,.]",
    r"here(?:'|’)s an? (?:rewritten|improved|revised) version of (?:the|your) commit message[^:\n]*:",
    r"here(?:'|’)s (?:a|an|the|your|my) (?:\w+ )?commit message[^:\n]*:",
    r"here is (?:a|an|the|your|my) (?:\w+ )?commit message[^:\n]*:",
    r"based on the (?:git )?(?:diff|changes)[^:\n]*:",
    r"following (?:the )?conventional commits? format[^:\n]*:",
    r"this rewritten (?:commit )?message[^:\n]*:",
    r"(?:improved|rewritten|suggested|revised|new) commit message:",
    r"commit message:",
]
_PREFIX_RES = [re.compile(rf'^\s*{p}\s*', re.IGNORECASE) for p in PREFIX_PATTERNS]

QUOTE_PAIRS = {'"': '"', "'": "'", '“': '”', '‘': '’'}

FIX_STUFF_MESSAGE = "fix: resolve code issues and improve functionality"

MAX_SUBJECT_LENGTH = 72
MAX_SUBJECT_WORDS = 10
PROSE_LENGTH = 20


def _first_line(text: str) -> str:
    for line in text.splitlines():
        if line.strip():
            return line.strip()
    return ""


def _is_prose(text: str) -> bool:
    """Long text without a colon is still a sentence, not a commit header."""
    return len(text) > PROSE_LENGTH and ':' not in text


def strip_wrapping_quotes(text: str) -> str:
    """Remove one pair of matching quotes spanning the whole string."""
    text = text.strip()
    if len(text) >= 2 and QUOTE_PAIRS.get(text[0]) == text[-1]:
        return text[1:-1].strip()
    return text


def looks_like_commit_message(line: str) -> bool:
    if CONVENTIONAL_RE.match(line):
        return True
    return (
        len(line) < MAX_SUBJECT_LENGTH
        and not line.endswith('.')
        and len(line.split()) < MAX_SUBJECT_WORDS
        and line[:1].isupper()
    )


def _is_explanation(line: str) -> bool:
    return (
        line.startswith('```')
        or line.startswith(PREAMBLES)
        or 'conventional commits format' in line.lower()
        or line.endswith(':')
    )


def extract_fenced_block(text: str) -> str | None:
    """Content of the first ``` block, skipping any language tag."""
    match = FENCE_RE.search(text)
    if not match:
        return None
    return _first_line(match.group(1)) or None


def scan_lines(text: str) -> str | None:
    """First line of a multi-line response that reads like a commit subject."""
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if len(lines) <= 1:
        return None

    for line in lines:
        if _is_explanation(line):
            continue
        candidate = strip_wrapping_quotes(line)
        if candidate and looks_like_commit_message(candidate):
            return line
    return None


def _strip_prefixes(text: str) -> str:
    for pattern in _PREFIX_RES:
        text = pattern.sub('', text, count=1)
    return _first_line(text.strip().strip('`'))


def strip_known_prefixes(text: str) -> str | None:
    """Response minus known preamble phrases, if what's left is header-shaped."""
    stripped = _strip_prefixes(text)
    if not stripped or _is_prose(stripped):
        return None
    return stripped


def extract_embedded_commit(text: str) -> str | None:
    """A 'type(scope): subject' fragment buried inside prose."""
    match = EMBEDDED_RE.search(text)
    return match.group(0).strip() if match else None


def keep_stripped_prose(text: str) -> str | None:
    return _strip_prefixes(text) or None


Strategy = Callable[[str], str | None]

CLEANING_STRATEGIES: list[tuple[str, Strategy]] = [
    ("fenced-block", extract_fenced_block),
    ("line-scan", scan_lines),
    ("prefix-strip", strip_known_prefixes),
    ("embedded-header", extract_embedded_commit),
    ("stripped-prose", keep_stripped_prose),
]


def build_fallback_message(fallback: str | None) -> str:
    """Synthesize a conventional message from the caller's fallback text."""
    fallback = (fallback or "").strip()
    if not fallback:
        return DEFAULT_MESSAGE

    lowered = fallback.lower()
    if lowered == "fix stuff":
        return FIX_STUFF_MESSAGE
    if CONVENTIONAL_RE.match(fallback):
        return fallback

    if any(word in lowered for word in ("feat", "add", "new")):
        commit_type = "feat"
    elif any(word in lowered for word in ("doc", "readme")):
        commit_type = "docs"
    else:
        commit_type = "fix"
    return f"{commit_type}: {fallback}"


def clean_response(raw: str | None, fallback: str = "") -> str:
    """Extract a single commit message line from raw LLM output.

    Never raises and never returns an empty string: empty output yields
    `fallback` (or DEFAULT_MESSAGE), unusable output yields a message
    synthesized from `fallback`.
    """
    text = (raw or "").strip()
    if not text:
        return (fallback or "").strip() or DEFAULT_MESSAGE

    candidate = None
    for name, strategy in CLEANING_STRATEGIES:
        candidate = strategy(text)
        if candidate:
            logger.debug("Response cleaned by %s strategy", name)
            break

    if not candidate:
        logger.debug("No usable text in response, building fallback message")
        candidate = build_fallback_message(fallback)

    return strip_wrapping_quotes(candidate) or build_fallback_message(fallback)


clean = clean_response
