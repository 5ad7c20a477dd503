"""CLI Main Entry Point"""

import random
import sys

from congratsbot import CongratsbotError
from congratsbot.cli.args import parse_args
from congratsbot.config import load_config
from congratsbot.message import MessageComposer
from congratsbot.output import dim, print_error, set_output


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    try:
        config = load_config()
        composer = MessageComposer(
            emojis=config.emojis,
            templates=config.templates,
            rng=random.Random(args.seed),
        )
        message = composer.compose(config.to_event())
    except CongratsbotError as e:
        print_error(str(e))
        return 1

    if args.preview:
        print(dim(f"{args.output_name}:"), file=sys.stderr)
        print(message)
        return 0

    set_output(args.output_name, message)
    return 0
