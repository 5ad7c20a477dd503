"""CLI Argument Parsing"""

import argparse
import argcomplete

from congratsbot import OUTPUT_NAME, __version__


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='congratsbot',
        description='Announce a merged commit in chat',
        epilog='Reads COMMIT_AUTHOR, COMMIT_ID, COMMIT_MESSAGE and GITHUB_REPO from the environment',
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    parser.add_argument('--output-name', type=str, default=OUTPUT_NAME, metavar='NAME', help=f'Workflow output to set (default: {OUTPUT_NAME})')
    parser.add_argument('--seed', type=int, metavar='N', help='Seed the emoji/template picks for a reproducible message')
    parser.add_argument('--preview', action='store_true', help='Print the plain message instead of the workflow command')

    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
