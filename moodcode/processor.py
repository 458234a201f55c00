"""Commit Processor - Classify a message, rewrite it if needed, and get it approved."""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from moodcode import DEFAULT_MESSAGE
from moodcode.classifier import is_bad_commit_message
from moodcode.errors import NoStagedChangesError
from moodcode.llm.base import CommitRewriter
from moodcode.output import ARROW, bold, colorize_commit_type, dim, error, info, success, warning

logger = logging.getLogger(__name__)

ACCEPT_ANSWERS = {"", "y", "yes", "д", "да"}
REJECT_ANSWERS = {"n", "no", "н", "нет"}
EDIT_ANSWERS = {"e", "edit", "р", "редактировать"}


class DiffSource(Protocol):
    """What the processor needs from a working tree."""

    def has_staged_changes(self) -> bool: ...

    def get_modified_files(self) -> list[str]: ...

    def get_staged_diff(self) -> str: ...


@dataclass
class CommitAnalysis:
    """Result of analyzing one commit message against the staged diff."""
    original_message: str
    suggested_message: str = ""
    needs_improvement: bool = False
    modified_files: list[str] = field(default_factory=list)
    diff_text: str = ""
    diff_based: bool = False


class CommitProcessor:
    """Runs classifier -> (optional) rewriter and drives the approval prompt."""

    def __init__(self, diff_source: DiffSource, rewriter: CommitRewriter, interactive: bool = True):
        self.diff_source = diff_source
        self.rewriter = rewriter
        self.interactive = interactive

    def analyze(self, message: str, diff_based: bool = False) -> CommitAnalysis:
        message = (message or "").strip()
        if not message and not diff_based:
            raise ValueError("Commit message is required unless --diff-based is used")

        if not self.diff_source.has_staged_changes():
            raise NoStagedChangesError("No staged changes found. Please stage your changes first.")

        analysis = CommitAnalysis(
            original_message=message,
            needs_improvement=is_bad_commit_message(message),
            modified_files=self.diff_source.get_modified_files(),
            diff_text=self.diff_source.get_staged_diff(),
            diff_based=diff_based,
        )
        logger.debug("Classified %r as %s", message, "bad" if analysis.needs_improvement else "good")

        if analysis.needs_improvement:
            print(info("Generating improved commit message..."))
            if diff_based:
                suggested = self.rewriter.generate_from_diff(analysis.diff_text)
            else:
                suggested = self.rewriter.rewrite(analysis.diff_text, analysis.original_message)
            analysis.suggested_message = suggested.strip() or message or DEFAULT_MESSAGE
        else:
            analysis.suggested_message = analysis.original_message

        return analysis

    def display_analysis(self, analysis: CommitAnalysis) -> None:
        print()
        print(info(bold("=== MoodCode Analysis ===")))

        if analysis.needs_improvement:
            original = analysis.original_message or dim("(empty)")
            print(error(f'Original:   "{original}"'))
            print(f'{success("Suggested:")}  "{colorize_commit_type(analysis.suggested_message)}"')
            print()
            if analysis.modified_files:
                print(warning(f"Modified files: {', '.join(analysis.modified_files)}"))
        else:
            print(success(f'Good commit message: "{analysis.original_message}"'))
            print(success("No changes needed!"))

        print()

    def prompt_for_approval(self) -> str:
        """Ask once; returns 'accept', 'reject' or 'edit'."""
        try:
            answer = input(warning("Accept this suggestion? [Y/n/e(dit)]: ")).strip().lower()
        except (KeyboardInterrupt, EOFError):
            return "accept"

        if answer in ACCEPT_ANSWERS:
            return "accept"
        if answer in REJECT_ANSWERS:
            return "reject"
        if answer not in EDIT_ANSWERS:
            logger.debug("Unrecognized answer %r, treating as edit", answer)
        return "edit"

    def prompt_for_edit(self, current_message: str) -> str:
        print(warning(f"Current suggestion: {current_message}"))
        try:
            edited = input(warning("Enter your preferred message: ")).strip()
        except (KeyboardInterrupt, EOFError):
            return current_message
        return edited or current_message

    def resolve_approved_message(self, analysis: CommitAnalysis) -> str:
        """Single approval round: original, suggested, or user-edited text."""
        if not analysis.needs_improvement:
            return analysis.original_message

        if not self.interactive:
            return analysis.suggested_message

        decision = self.prompt_for_approval()
        if decision == "accept":
            return analysis.suggested_message
        if decision == "reject":
            if analysis.original_message:
                print(dim(f"Keeping original {ARROW} {analysis.original_message}"))
                return analysis.original_message
            return analysis.suggested_message
        return self.prompt_for_edit(analysis.suggested_message)
