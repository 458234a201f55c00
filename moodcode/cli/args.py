"""CLI Argument Parsing"""

import argparse

from moodcode import __version__
from moodcode.config import VALID_PROVIDERS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='moodcode-hook',
        description='Check a commit message and suggest a better one from the staged diff',
        epilog='This tool is usually invoked by a git commit-msg hook.'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('message', nargs='*', help='Commit message to check')

    # Generation options
    parser.add_argument('--diff-based', action='store_true', help='Generate the commit message from the staged diff')
    parser.add_argument('-y', '--yes', action='store_true', help='Accept the suggestion without prompting')

    # LLM options
    parser.add_argument('-p', '--provider', type=str, choices=sorted(VALID_PROVIDERS), help='LLM provider')
    parser.add_argument('-m', '--model', type=str, metavar='MODEL', help='Model name')

    # Output options
    parser.add_argument('--verbose', action='store_true', help='Show debug traces on stderr')
    parser.add_argument('--config', dest='display_config', action='store_true', help='Show current configuration')

    return parser
