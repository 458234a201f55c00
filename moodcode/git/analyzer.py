"""Git Analyzer - Read the staged change set from a working tree."""

import logging
import subprocess

from moodcode.errors import GitError

logger = logging.getLogger(__name__)


class GitAnalyzer:
    """Diff source backed by the git CLI.

    Commands run in `repo_path` when given, otherwise in the current
    directory (git itself walks up to the repository root).
    """

    def __init__(self, repo_path: str | None = None):
        self.repo_path = repo_path
        self._verify_git_available()
        self._verify_in_repo()

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stdout."""
        logger.debug("Running git %s", ' '.join(args))
        try:
            result = subprocess.run(
                ['git', *args],
                capture_output=True,
                text=True,
                check=True,
                encoding='utf-8',
                errors='replace',
                cwd=self.repo_path,
            )
            return result.stdout
        except subprocess.CalledProcessError as e:
            raise GitError(f"Git command failed: git {' '.join(args)}\n{e.stderr}") from e
        except FileNotFoundError as e:
            raise GitError("Git is not installed or not in PATH") from e

    def _verify_git_available(self) -> None:
        """Fail fast if git isn't available."""
        self._run_git('--version')

    def _verify_in_repo(self) -> None:
        """Fail fast if we're not in a git repository."""
        try:
            self._run_git('rev-parse', '--git-dir')
        except GitError as e:
            raise GitError("Not inside a git repository") from e

    def get_repository_root(self) -> str:
        return self._run_git('rev-parse', '--show-toplevel').strip()

    def has_staged_changes(self) -> bool:
        return bool(self.get_modified_files())

    def get_modified_files(self) -> list[str]:
        """Paths staged for the next commit, in git's order."""
        output = self._run_git('diff', '--staged', '--name-only')
        return [line for line in output.splitlines() if line.strip()]

    def get_staged_diff(self) -> str:
        """Unified diff between HEAD and the index."""
        return self._run_git('diff', '--staged')
