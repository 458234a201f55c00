"""
MoodCode

Commit message quality gate for git hooks: flags lazy messages and
asks an LLM to rewrite them from the staged diff.
"""

__version__ = "1.0.0"

# Centralized commit types - single source of truth
# Used by: classifier.py, cleaner.py, prompts/builder.py
COMMIT_TYPES = {
    'feat': 'A new feature or capability',
    'fix': 'A bug fix',
    'refactor': 'Code restructuring without behavior change',
    'chore': 'Maintenance tasks, dependencies, tooling',
    'docs': 'Documentation only changes',
    'test': 'Adding or updating tests',
    'style': 'Formatting, whitespace, no code change',
    'perf': 'Performance improvement',
    'ci': 'CI/CD configuration changes',
    'build': 'Build system or external dependency changes',
    'revert': 'Reverts a previous commit',
}

COMMIT_TYPE_NAMES = list(COMMIT_TYPES.keys())

# Used when neither the LLM nor the caller supplied any usable text
DEFAULT_MESSAGE = "Update code"
