"""Output Package

Workflow command emission on stdout, status lines on stderr.
"""

import os
import sys
from typing import TextIO


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'
    DIM = '\033[2m'
    RED = '\033[31m'
    YELLOW = '\033[33m'


def _supports_color() -> bool:
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    if not hasattr(sys.stderr, 'isatty') or not sys.stderr.isatty():
        return False
    if sys.platform == 'win32':
        try:
            import ctypes
            kernel32 = ctypes.windll.kernel32
            kernel32.SetConsoleMode(kernel32.GetStdHandle(-12), 7)
            return True
        except Exception:
            return False
    return True


COLORS_ENABLED = _supports_color()


def _colorize(text: str, *codes: str) -> str:
    if not COLORS_ENABLED:
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"


def error(text: str) -> str:
    return _colorize(text, Colors.RED)


def warning(text: str) -> str:
    return _colorize(text, Colors.YELLOW)


def dim(text: str) -> str:
    return _colorize(text, Colors.DIM)


def print_error(message: str) -> None:
    print(f"{error('Error:')} {message}", file=sys.stderr)


def print_warning(message: str) -> None:
    print(f"{warning('Warning:')} {message}", file=sys.stderr)


def escape_data(value: str) -> str:
    """Escape a value for a workflow command (percent first, then CR, then LF)."""
    return value.replace('%', '%25').replace('\r', '%0D').replace('\n', '%0A')


def set_output(name: str, value: str, stream: TextIO | None = None) -> None:
    """Write a ``::set-output`` workflow command, preceded by a blank line."""
    stream = stream if stream is not None else sys.stdout
    stream.write('\n')
    stream.write(f"::set-output name={name}::{escape_data(value)}\n")


__all__ = [
    "Colors", "COLORS_ENABLED",
    "error", "warning", "dim",
    "print_error", "print_warning",
    "escape_data", "set_output",
]
