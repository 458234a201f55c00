"""Message Classifier - Decide whether a commit message needs rewriting."""

from moodcode import COMMIT_TYPE_NAMES

# Low-information messages that are a red flag on their own
LAZY_PATTERNS = frozenset({
    "fix", "test", "update", "change", "stuff", "things", "work", "temp",
    "wip", "asdf", "qwerty", "shit", "fuck", "damn", "crap", "whatever",
    "idk", "meh", "ok", "done", "finished", "final", "last", "end",
    "refactor", "chore", "docs", "feat", "style", "perf", "ci", "build", "revert",
    "bug", "patch",
})

# "fix:", "feat:" ... with nothing after the colon
CONVENTIONAL_HEADERS = frozenset(f"{t}:" for t in COMMIT_TYPE_NAMES)

# Words that legitimately repeat in a normal sentence
STOP_WORDS = frozenset({"and", "or", "the", "a", "an", "to", "for", "in", "on", "with", "of"})

MIN_LENGTH = 3
SHORT_MESSAGE_LENGTH = 15


def _normalize(message: str | None) -> str:
    return (message or "").strip().lower()


def contains_repetitive_words(message: str) -> bool:
    """True if any non-stop-word token occurs more than once in the message.

    Occurrences are counted by splitting the whole message on the token, so a
    word embedded in a longer word ("user" in "username") counts as a repeat.
    """
    words = message.split()
    if len(words) < 2:
        return False

    for word in words:
        if len(word) <= 2 or word in STOP_WORDS:
            continue
        if len(message.split(word)) - 1 > 1:
            return True
    return False


def is_bad_commit_message(message: str | None) -> bool:
    """Return True when the message is too lazy to keep as-is.

    Rules run in order and the first match wins:
      1. empty or shorter than 3 chars
      2. exactly a lazy token ("wip", "fix", ...)
      3. a bare conventional header ("fix:")
      4. short and starting with a lazy token ("fix bug")
      5. a repeated word
    """
    normalized = _normalize(message)

    if len(normalized) < MIN_LENGTH:
        return True

    if normalized in LAZY_PATTERNS:
        return True

    if normalized in CONVENTIONAL_HEADERS:
        return True

    if len(normalized) < SHORT_MESSAGE_LENGTH and any(
        normalized == pattern or normalized.startswith(pattern + " ")
        for pattern in LAZY_PATTERNS
    ):
        return True

    if contains_repetitive_words(normalized):
        return True

    return False


is_bad = is_bad_commit_message
