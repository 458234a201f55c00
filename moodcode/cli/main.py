"""CLI Main Entry Point"""

import logging
import sys

import argcomplete

from moodcode.config import Config, load_config
from moodcode.errors import ConfigError, GitError, LLMError
from moodcode.git import GitAnalyzer
from moodcode.llm import get_rewriter
from moodcode.output import dim, print_error
from moodcode.processor import CommitProcessor

from moodcode.cli.args import build_parser
from moodcode.cli.commands import display_config
from moodcode.cli.errorlog import log_exception

logger = logging.getLogger(__name__)

# Git hooks grep stdout for this prefix; everything else is advisory
APPROVED_PREFIX = "APPROVED_MESSAGE:"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _fail(message: str, exc: Exception, config: Config) -> int:
    """Report a fatal error, write the error log, return the exit code."""
    print_error(message)
    try:
        path = log_exception(exc, config.log_dir)
    except OSError as log_exc:
        logger.warning("Could not write error log: %s", log_exc)
    else:
        print(dim(f"A detailed error log has been saved to: {path}"), file=sys.stderr)
    return 1


def _run(args, config: Config, message: str) -> int:
    provider = args.provider or config.provider
    model = args.model or config.model

    rewriter = get_rewriter(provider=provider, model=model, config=config)
    analyzer = GitAnalyzer()
    logger.debug("Repository: %s", analyzer.get_repository_root())

    interactive = not args.yes and sys.stdin.isatty()
    processor = CommitProcessor(analyzer, rewriter, interactive=interactive)

    analysis = processor.analyze(message, diff_based=args.diff_based)
    processor.display_analysis(analysis)
    approved = processor.resolve_approved_message(analysis)

    print(f"{APPROVED_PREFIX}{approved}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    argcomplete.autocomplete(parser)
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    config = load_config()
    config.apply_env()

    if args.display_config:
        return display_config(config)

    message = " ".join(args.message).strip()
    if not message and not args.diff_based:
        parser.print_help()
        return 0

    try:
        return _run(args, config, message)
    except ConfigError as e:
        return _fail(f"MoodCode Error: {e}", e, config)
    except GitError as e:
        return _fail(f"MoodCode Error: {e}", e, config)
    except LLMError as e:
        return _fail(
            "MoodCode Error: Failed to communicate with AI service. "
            f"Please check your network connection and API key. Details: {e}",
            e, config,
        )
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        return _fail(f"An unexpected error occurred: {e}", e, config)
