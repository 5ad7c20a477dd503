"""Command Line Interface Package"""

from congratsbot.cli.args import parse_args
from congratsbot.cli.main import main

__all__ = ["parse_args", "main"]
