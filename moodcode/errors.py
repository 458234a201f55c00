"""Exception hierarchy shared across packages."""


class MoodCodeError(Exception):
    """Base for all errors raised by moodcode."""
    pass


class ConfigError(MoodCodeError):
    """Raised for missing credentials or invalid provider settings."""
    pass


class GitError(MoodCodeError):
    """Raised when git operations fail."""
    pass


class NoStagedChangesError(GitError):
    """Raised when there is nothing staged to analyze."""
    pass


class LLMError(MoodCodeError):
    """Raised when LLM operations fail."""
    pass
