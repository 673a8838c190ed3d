"""CLI Argument Parsing"""

import argparse
import argcomplete

from commitgen import __version__
from commitgen.config import VALID_PROVIDERS


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='commitgen',
        description='Write an AI-generated conventional commit message into a git commit message file',
        epilog='Run as a prepare-commit-msg hook: commitgen --install-hook'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    # Hook arguments: git passes the message file, then source and sha (ignored)
    parser.add_argument('commit_msg_file', nargs='?', metavar='COMMIT_MSG_FILE', help='Commit message file to populate')
    parser.add_argument('hook_args', nargs='*', metavar='HOOK_ARG', help=argparse.SUPPRESS)

    # LLM options
    parser.add_argument('-p', '--provider', type=str, choices=sorted(VALID_PROVIDERS), help='LLM provider')
    parser.add_argument('-m', '--model', type=str, metavar='MODEL', help='Model name')

    # Output options
    parser.add_argument('--verbose', action='store_true', help='Show debug info (prompt size, tokens used)')

    # Setup/config
    parser.add_argument('--install-hook', action='store_true', help='Install as the prepare-commit-msg hook of this repository')
    parser.add_argument('--display-config', action='store_true', help='Show current configuration')

    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
