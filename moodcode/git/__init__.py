"""Git Operations Package"""

from moodcode.errors import GitError, NoStagedChangesError
from moodcode.git.analyzer import GitAnalyzer

__all__ = [
    "GitAnalyzer",
    "GitError",
    "NoStagedChangesError",
]
